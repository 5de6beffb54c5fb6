"""Base serializer protocol."""

from __future__ import annotations

from typing import Protocol

from mermaid_graph.ir.model import GraphData


class Serializer(Protocol):
    """Protocol that all output serializers must implement."""

    def serialize(self, graph: GraphData) -> str:
        """Serialize a parsed graph to an output string."""
        ...
