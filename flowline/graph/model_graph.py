"""WorkflowGraph wrapper around networkx for workflow snapshots."""

from collections import deque
from typing import Iterator

import networkx as nx

from ..schema.models import Edge, Node, NodeKind

UNKNOWN_LABEL = "Unknown"


def _in_order(edges) -> list[Edge]:
    """Edge objects from networkx edge tuples, in the order they were added."""
    return [data["edge"] for _, _, data in sorted(edges, key=lambda e: e[2]["order"])]


class WorkflowGraph:
    """A graph index over one snapshot of workflow nodes and edges.

    Wraps a networkx MultiDiGraph so parallel edges between the same pair
    of nodes are kept apart. Edges may point at ids that were never added
    as nodes; networkx creates a bare placeholder for those, which the
    query methods below never report as a workflow node.
    """

    def __init__(self):
        """Initialize an empty workflow graph."""
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> str:
        """Add a workflow node.

        Args:
            node: The node to index.

        Returns:
            The node ID.
        """
        self._graph.add_node(node.id, node=node, kind=node.kind)
        return node.id

    def add_edge(self, edge: Edge) -> None:
        """Add a directed edge. Endpoints do not have to exist."""
        self._graph.add_edge(
            edge.source, edge.target, edge=edge, order=self._graph.number_of_edges()
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over workflow nodes in insertion order."""
        for _, data in self._graph.nodes(data=True):
            node = data.get("node")
            if node is not None:
                yield node

    def get_nodes(self) -> list[Node]:
        """Get all workflow nodes in insertion order."""
        return list(self.iter_nodes())

    def get_node(self, node_id: str) -> Node | None:
        """Get a node by id, or None for unknown ids."""
        if not self._graph.has_node(node_id):
            return None
        return self._graph.nodes[node_id].get("node")

    def has_node(self, node_id: str) -> bool:
        """Check whether a workflow node with this id exists."""
        return self.get_node(node_id) is not None

    def get_nodes_of_kind(self, kind: NodeKind) -> list[Node]:
        """Get all nodes of one kind, in insertion order."""
        return [node for node in self.iter_nodes() if node.kind == kind]

    def get_label(self, node_id: str) -> str:
        """Get a node's label, or a placeholder for dangling ids."""
        node = self.get_node(node_id)
        if node is None:
            return UNKNOWN_LABEL
        return node.label

    def get_incoming_edges(self, node_id: str) -> list[Edge]:
        """Get all edges whose target is the given node, in the order they were added."""
        if not self._graph.has_node(node_id):
            return []
        return _in_order(self._graph.in_edges(node_id, data=True))

    def get_outgoing_edges(self, node_id: str) -> list[Edge]:
        """Get all edges whose source is the given node, in the order they were added."""
        if not self._graph.has_node(node_id):
            return []
        return _in_order(self._graph.out_edges(node_id, data=True))

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over all edges in the order they were added."""
        yield from _in_order(self._graph.edges(data=True))

    def get_reachable(self, start_id: str) -> set[str]:
        """Get the ids reachable from a node by following outgoing edges.

        The start node is reachable from itself. Dangling targets are
        included in the result since an edge does lead to them.

        Args:
            start_id: The node to start from.

        Returns:
            Set of reachable node ids.
        """
        reachable = {start_id}
        queue = deque([start_id])

        while queue:
            current = queue.popleft()
            for edge in self.get_outgoing_edges(current):
                if edge.target not in reachable:
                    reachable.add(edge.target)
                    queue.append(edge.target)

        return reachable

    def find_first_cycle(self) -> list[str] | None:
        """Find the first directed cycle in depth-first order.

        Depth-first search starts from every unvisited node in insertion
        order. The first edge that points back at a node on the current
        path closes the cycle. Each node is visited once and the search
        keeps an explicit stack, so deep graphs do not hit the recursion
        limit.

        Returns:
            The node ids along the cycle, ending with the id it started
            from (e.g. ``["a", "b", "c", "a"]``), or None if acyclic.
        """
        visited: set[str] = set()
        on_path: set[str] = set()

        for root in self.iter_nodes():
            if root.id in visited:
                continue

            path = [root.id]
            visited.add(root.id)
            on_path.add(root.id)
            stack = [iter(self.get_outgoing_edges(root.id))]

            while stack:
                for edge in stack[-1]:
                    target = edge.target
                    if target not in visited:
                        visited.add(target)
                        on_path.add(target)
                        path.append(target)
                        stack.append(iter(self.get_outgoing_edges(target)))
                        break
                    if target in on_path:
                        return path[path.index(target):] + [target]
                else:
                    stack.pop()
                    on_path.discard(path.pop())

        return None
