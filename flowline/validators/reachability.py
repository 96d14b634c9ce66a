"""Reachability validator."""

from ..graph.model_graph import WorkflowGraph
from ..schema.models import NodeKind
from .base import ValidationResult


def check_orphaned_nodes(graph: WorkflowGraph) -> ValidationResult:
    """Check for nodes that cannot be reached from the Start node.

    An orphaned node can never run. It is reported even when it is wired
    to other nodes, as long as none of them leads back to Start.

    The check needs a single Start node to walk from; without one it
    reports nothing and leaves the problem to the Start node check.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with errors for orphaned nodes.
    """
    result = ValidationResult()

    start_nodes = graph.get_nodes_of_kind(NodeKind.START)
    if len(start_nodes) != 1:
        return result

    reachable = graph.get_reachable(start_nodes[0].id)

    for node in graph.iter_nodes():
        if node.id not in reachable:
            result.add_error(
                code="ORPHANED_NODE",
                message=(
                    f"{node.kind.display_name} '{node.label}' is not connected to the "
                    f"Start node; connect it to the workflow or delete it"
                ),
                node_id=node.id,
            )

    return result
