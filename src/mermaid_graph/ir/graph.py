"""Graph IR: projects GraphData into a networkx MultiDiGraph for analysis.

Downstream consumers (layout, summaries, closure checks) query topology here
instead of walking the raw node/edge tuples. Parallel edges are kept because
sequence diagrams routinely exchange several messages between one pair.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from mermaid_graph.ir.model import Edge, GraphData, Node
from mermaid_graph.types import EdgeType, NodeType


@dataclass
class NodeData:
    id: str
    label: str
    type: NodeType


@dataclass
class EdgeData:
    edge_type: EdgeType
    label: str | None


class GraphIR:
    """Topology view over a parsed GraphData.

    Wraps a networkx MultiDiGraph and exposes helpers for topology queries.
    """

    def __init__(self, digraph: nx.MultiDiGraph) -> None:
        self.digraph = digraph

    @classmethod
    def from_graph_data(cls, graph: GraphData) -> GraphIR:
        """Build a GraphIR from parser output."""
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()

        for node in graph.nodes:
            _add_node_if_absent(digraph, node)

        for edge in graph.edges:
            _ensure_node(digraph, edge.source)
            _ensure_node(digraph, edge.target)
            _add_edge(digraph, edge)

        return cls(digraph=digraph)

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def out_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.out_degree(node_id)

    def isolated_nodes(self) -> list[str]:
        return [n for n in self.digraph.nodes if self.digraph.degree(n) == 0]


def _add_node_if_absent(digraph: nx.MultiDiGraph, node: Node) -> None:
    if node.id not in digraph:
        digraph.add_node(node.id, data=NodeData(id=node.id, label=node.label, type=node.type))


def _ensure_node(digraph: nx.MultiDiGraph, node_id: str) -> None:
    if node_id not in digraph:
        digraph.add_node(node_id, data=NodeData(id=node_id, label=node_id, type=NodeType.Implicit))


def _add_edge(digraph: nx.MultiDiGraph, edge: Edge) -> None:
    digraph.add_edge(edge.source, edge.target, data=EdgeData(edge_type=edge.type, label=edge.label))
