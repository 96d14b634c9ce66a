"""Start and End node validators."""

from ..graph.model_graph import WorkflowGraph
from ..schema.models import NodeKind
from .base import ValidationResult


def _quoted_labels(graph: WorkflowGraph, node_ids: list[str]) -> str:
    return ", ".join(f"'{graph.get_label(node_id)}'" for node_id in node_ids)


def check_start_node(graph: WorkflowGraph) -> ValidationResult:
    """Check that the workflow has exactly one well-connected Start node.

    A lone Start node must have no incoming edges and should have at
    least one outgoing edge. When there are several Start nodes, every
    one after the first is reported so it can be deleted.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with errors for missing, duplicate or entered
        Start nodes and a warning for a Start node that leads nowhere.
    """
    result = ValidationResult()
    start_nodes = graph.get_nodes_of_kind(NodeKind.START)

    if not start_nodes:
        result.add_error(
            code="NO_START_NODE",
            message="Workflow has no Start node; every workflow needs exactly one",
        )
        return result

    if len(start_nodes) > 1:
        result.add_error(
            code="MULTIPLE_START_NODES",
            message=f"Workflow has {len(start_nodes)} Start nodes; only one is allowed",
            count=len(start_nodes),
        )
        for node in start_nodes[1:]:
            result.add_error(
                code="DUPLICATE_START_NODE",
                message=f"Extra Start node '{node.label}' must be removed",
                node_id=node.id,
            )
        return result

    start = start_nodes[0]

    incoming = graph.get_incoming_edges(start.id)
    if incoming:
        sources = _quoted_labels(graph, [edge.source for edge in incoming])
        result.add_error(
            code="START_NODE_HAS_INCOMING",
            message=(
                f"Start node '{start.label}' cannot have incoming connections; "
                f"remove the connection from {sources}"
            ),
            node_id=start.id,
            edge_ids=[edge.id for edge in incoming],
        )

    if not graph.get_outgoing_edges(start.id):
        result.add_warning(
            code="START_NODE_NO_OUTGOING",
            message=f"Start node '{start.label}' has no outgoing connections",
            node_id=start.id,
        )

    return result


def check_end_nodes(graph: WorkflowGraph) -> ValidationResult:
    """Check that the workflow has terminal, reachable End nodes.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with errors for a missing End node or End nodes
        with outgoing edges, and warnings for End nodes nothing leads to.
    """
    result = ValidationResult()
    end_nodes = graph.get_nodes_of_kind(NodeKind.END)

    if not end_nodes:
        result.add_error(
            code="NO_END_NODE",
            message="Workflow has no End node; every workflow needs at least one",
        )
        return result

    for end in end_nodes:
        outgoing = graph.get_outgoing_edges(end.id)
        if outgoing:
            targets = _quoted_labels(graph, [edge.target for edge in outgoing])
            result.add_error(
                code="END_NODE_HAS_OUTGOING",
                message=(
                    f"End node '{end.label}' cannot have outgoing connections; "
                    f"remove the connection to {targets}"
                ),
                node_id=end.id,
                edge_ids=[edge.id for edge in outgoing],
            )

        if not graph.get_incoming_edges(end.id):
            result.add_warning(
                code="END_NODE_NO_INCOMING",
                message=f"End node '{end.label}' has no incoming connections",
                node_id=end.id,
            )

    return result
