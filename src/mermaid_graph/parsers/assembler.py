"""Graph assembler: the per-parse scan context shared by every extractor.

Keeps an index of nodes by id and of edges by (source, target) so that
deduplication, implicit-node synthesis, and label merging never depend on
linear scans or on which duplicate happens to be found first.
"""

from __future__ import annotations

from mermaid_graph.ir.model import Edge, GraphData, Node
from mermaid_graph.types import EdgeType, NodeType


class GraphAssembler:
    """Mutable node/edge accumulator for a single parse call."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edges: list[Edge] = []
        self._pairs: dict[tuple[str, str], Edge] = {}

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def add_node(self, node: Node) -> Node:
        """Insert node, or fold it into an existing node with the same id."""
        existing = self._nodes.get(node.id)
        if existing is None:
            self._nodes[node.id] = node
            return node
        existing.augment(node)
        return existing

    def ensure_node(self, node_id: str, type: NodeType = NodeType.Implicit) -> Node:
        """Return the node for node_id, synthesizing a bare one at most once."""
        existing = self._nodes.get(node_id)
        if existing is not None:
            return existing
        node = Node.bare(node_id, type)
        self._nodes[node_id] = node
        return node

    def add_edge(self, edge: Edge) -> Edge:
        self._edges.append(edge)
        self._pairs.setdefault(edge.pair, edge)
        return edge

    def merge_label(self, source: str, target: str, label: str, type: EdgeType) -> Edge:
        """Label the first edge between source and target, creating it if absent."""
        existing = self._pairs.get((source, target))
        if existing is not None:
            existing.label = label
            return existing
        return self.add_edge(Edge.new(source, target, type, label))

    def close_edges(self, type: NodeType = NodeType.Implicit) -> list[Node]:
        """Synthesize nodes for every edge endpoint that was never declared."""
        created: list[Node] = []
        for edge in self._edges:
            for endpoint in edge.pair:
                if endpoint not in self._nodes:
                    created.append(self.ensure_node(endpoint, type))
        return created

    def attach_stereotype(self, node_id: str, stereotype: str, type: NodeType = NodeType.Class) -> bool:
        """Set the stereotype on an existing node of the given type. Never creates nodes."""
        node = self._nodes.get(node_id)
        if node is None or node.type != type:
            return False
        node.stereotype = stereotype
        return True

    def next_note_id(self) -> str:
        n = len(self._nodes)
        while f"note_{n}" in self._nodes:
            n += 1
        return f"note_{n}"

    def snapshot(self) -> GraphData:
        return GraphData.snapshot(self.nodes, self._edges)
