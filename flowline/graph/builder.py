"""Builders for converting workflow snapshots to WorkflowGraph."""

from typing import Iterable

from ..schema.models import Edge, Node, WorkflowDocument
from .model_graph import WorkflowGraph


def build_graph(nodes: Iterable[Node], edges: Iterable[Edge]) -> WorkflowGraph:
    """Build a WorkflowGraph from a snapshot of nodes and edges.

    The inputs are only read. Nodes are added before edges so node order
    is the order they were given in, even when an edge names a node that
    appears later in the list.

    Args:
        nodes: The workflow nodes.
        edges: The workflow edges.

    Returns:
        A WorkflowGraph indexing the snapshot.
    """
    graph = WorkflowGraph()

    for node in nodes:
        graph.add_node(node)

    for edge in edges:
        graph.add_edge(edge)

    return graph


def build_graph_from_document(document: WorkflowDocument) -> WorkflowGraph:
    """Build a WorkflowGraph from a parsed workflow document."""
    return build_graph(document.nodes, document.edges)
