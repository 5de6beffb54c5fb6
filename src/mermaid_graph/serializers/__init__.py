"""Output serializers for parsed graphs."""

from __future__ import annotations

from mermaid_graph.config import OutputConfig
from mermaid_graph.serializers.base import Serializer
from mermaid_graph.serializers.json import JsonSerializer, WireJsonSerializer, to_dict, to_wire


def serializer_for(config: OutputConfig) -> Serializer:
    """Pick the serializer an OutputConfig asks for."""
    if config.wire:
        return WireJsonSerializer(indent=config.indent, positions=config.positions)
    return JsonSerializer(indent=config.indent)


__all__ = [
    "JsonSerializer",
    "Serializer",
    "WireJsonSerializer",
    "serializer_for",
    "to_dict",
    "to_wire",
]
