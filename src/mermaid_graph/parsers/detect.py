"""Dialect detector: picks the one extractor a source is handed to."""

from __future__ import annotations

from mermaid_graph.parsers.patterns import DIALECT_MARKERS
from mermaid_graph.types import Dialect


def detect_dialect(src: str) -> Dialect | None:
    """Return the highest-priority dialect whose marker occurs anywhere in src.

    Priority is flowchart, then sequenceDiagram, then classDiagram, regardless
    of where each marker appears. Returns None when no marker is present.
    """
    for dialect, marker in DIALECT_MARKERS:
        if marker.search(src):
            return dialect
    return None
