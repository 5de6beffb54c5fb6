"""Graph value types produced by the extractors.

Node and Edge are mutable while a parse is running (the assembler augments
them in place); GraphData is the frozen snapshot handed to callers.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from mermaid_graph.types import EdgeType, NodeType, Visibility


@dataclass
class Member:
    name: str
    visibility: Visibility = field(default_factory=Visibility.default)


@dataclass
class Node:
    id: str
    label: str
    type: NodeType = NodeType.Node
    attributes: list[Member] = field(default_factory=list)
    methods: list[Member] = field(default_factory=list)
    stereotype: str | None = None
    participants: list[str] = field(default_factory=list)

    @classmethod
    def new(cls, id: str, label: str | None, type: NodeType) -> Node:
        return cls(id=id, label=label if label else id, type=type)

    @classmethod
    def bare(cls, id: str, type: NodeType = NodeType.Implicit) -> Node:
        """Create a node whose label is its id."""
        return cls(id=id, label=id, type=type)

    def augment(self, other: Node) -> None:
        """Fold a later declaration of the same id into this node."""
        if self.label == self.id and other.label != other.id:
            self.label = other.label
        self.attributes.extend(other.attributes)
        self.methods.extend(other.methods)
        if other.stereotype:
            self.stereotype = other.stereotype
        for p in other.participants:
            if p not in self.participants:
                self.participants.append(p)


@dataclass
class Edge:
    source: str
    target: str
    type: EdgeType
    label: str | None = None

    @classmethod
    def new(cls, source: str, target: str, type: EdgeType, label: str | None = None) -> Edge:
        return cls(source=source, target=target, type=type, label=label or None)

    @property
    def pair(self) -> tuple[str, str]:
        return (self.source, self.target)


@dataclass(frozen=True)
class GraphData:
    """Immutable result of a parse: nodes and edges in discovery order."""

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    @classmethod
    def empty(cls) -> GraphData:
        return cls()

    @classmethod
    def snapshot(cls, nodes: list[Node], edges: list[Edge]) -> GraphData:
        """Deep-copy live accumulators so callers never share state with a parse."""
        return cls(nodes=tuple(copy.deepcopy(nodes)), edges=tuple(copy.deepcopy(edges)))

    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    def node(self, node_id: str) -> Node | None:
        return next((n for n in self.nodes if n.id == node_id), None)

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]
