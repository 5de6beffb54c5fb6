"""Intermediate representation: parse result types and GraphIR."""

from mermaid_graph.ir.graph import EdgeData, GraphIR, NodeData
from mermaid_graph.ir.model import Edge, GraphData, Member, Node

__all__ = [
    "Edge",
    "EdgeData",
    "GraphData",
    "GraphIR",
    "Member",
    "Node",
    "NodeData",
]
