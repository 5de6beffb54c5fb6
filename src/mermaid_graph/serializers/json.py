"""JSON projections of GraphData.

`to_dict` keeps everything the parser extracted. `to_wire` is the flattened
consumer shape: `source`/`target` become `from`/`to`, type tags are dropped,
and nodes may carry a 3D `position`.
"""

from __future__ import annotations

import json
from typing import Any

from mermaid_graph.ir.model import Edge, GraphData, Member, Node
from mermaid_graph.types import NodeType

Position = tuple[float, float, float]

_NOTE_TYPES = (NodeType.NoteOver, NodeType.NoteBetween)


def _member_dict(member: Member) -> dict[str, str]:
    return {"name": member.name, "visibility": member.visibility.value}


def node_to_dict(node: Node) -> dict[str, Any]:
    data: dict[str, Any] = {"id": node.id, "label": node.label, "type": node.type.value}
    if node.type == NodeType.Class:
        data["attributes"] = [_member_dict(m) for m in node.attributes]
        data["methods"] = [_member_dict(m) for m in node.methods]
    if node.stereotype is not None:
        data["stereotype"] = node.stereotype
    if node.type in _NOTE_TYPES:
        data["participants"] = list(node.participants)
    return data


def edge_to_dict(edge: Edge) -> dict[str, Any]:
    data: dict[str, Any] = {"source": edge.source, "target": edge.target, "type": edge.type.value}
    if edge.label is not None:
        data["label"] = edge.label
    return data


def to_dict(graph: GraphData) -> dict[str, list[dict[str, Any]]]:
    return {
        "nodes": [node_to_dict(n) for n in graph.nodes],
        "edges": [edge_to_dict(e) for e in graph.edges],
    }


def to_wire(graph: GraphData, positions: dict[str, Position] | None = None) -> dict[str, list[dict[str, Any]]]:
    positions = positions or {}
    nodes: list[dict[str, Any]] = []
    for node in graph.nodes:
        data: dict[str, Any] = {"id": node.id, "label": node.label}
        if node.id in positions:
            x, y, z = positions[node.id]
            data["position"] = {"x": x, "y": y, "z": z}
        nodes.append(data)

    edges: list[dict[str, Any]] = []
    for edge in graph.edges:
        data = {"from": edge.source, "to": edge.target}
        if edge.label:
            data["label"] = edge.label
        edges.append(data)

    return {"nodes": nodes, "edges": edges}


class JsonSerializer:
    """Full JSON output: every node and edge field the parser produced."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def serialize(self, graph: GraphData) -> str:
        return json.dumps(to_dict(graph), indent=self.indent, ensure_ascii=False)


class WireJsonSerializer:
    """Simplified `{nodes: [{id, label, position?}], edges: [{from, to, label?}]}` output."""

    def __init__(self, indent: int | None = 2, positions: dict[str, Position] | None = None) -> None:
        self.indent = indent
        self.positions = positions

    def serialize(self, graph: GraphData) -> str:
        return json.dumps(to_wire(graph, self.positions), indent=self.indent, ensure_ascii=False)
