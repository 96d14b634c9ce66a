"""Graph layer for indexing workflow snapshots as networkx graphs."""

from .model_graph import UNKNOWN_LABEL, WorkflowGraph
from .builder import build_graph, build_graph_from_document

__all__ = [
    "UNKNOWN_LABEL",
    "WorkflowGraph",
    "build_graph",
    "build_graph_from_document",
]
