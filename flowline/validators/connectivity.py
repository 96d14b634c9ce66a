"""Interior node connectivity validator."""

from ..graph.model_graph import WorkflowGraph
from ..schema.models import NodeKind
from .base import ValidationResult


def check_node_connections(graph: WorkflowGraph) -> ValidationResult:
    """Check that every step between Start and End is wired in and out.

    These are warnings only. A node that nothing reaches is reported as
    an error by the orphan check.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with warnings for unconnected interior nodes.
    """
    result = ValidationResult()

    for node in graph.iter_nodes():
        if node.kind in (NodeKind.START, NodeKind.END):
            continue

        name = f"{node.kind.display_name} '{node.label}'"

        if not graph.get_incoming_edges(node.id):
            result.add_warning(
                code="NODE_NO_INCOMING",
                message=f"{name} has no incoming connections; connect it from a previous step",
                node_id=node.id,
            )

        if not graph.get_outgoing_edges(node.id):
            result.add_warning(
                code="NODE_NO_OUTGOING",
                message=f"{name} has no outgoing connections; connect it to a next step",
                node_id=node.id,
            )

    return result
