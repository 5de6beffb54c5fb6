"""Centralized configuration for mermaid-graph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SourceConfig:
    """How diagram text is read before parsing."""

    encoding: str = "utf-8"
    max_chars: int | None = None


@dataclass
class OutputConfig:
    """Configuration for the serialization layer."""

    wire: bool = False
    indent: int | None = 2
    positions: dict[str, tuple[float, float, float]] | None = None
