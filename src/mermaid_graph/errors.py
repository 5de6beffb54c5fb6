"""Exceptions raised outside the parser core.

The parser itself never raises for diagram content; these cover the I/O
collaborators that run before it.
"""

from __future__ import annotations


class MermaidGraphError(Exception):
    """Base class for mermaid-graph errors."""


class SourceReadError(MermaidGraphError):
    """The diagram source could not be obtained (missing, unreadable, undecodable, too large)."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"cannot read '{source}': {reason}")
        self.source = source
        self.reason = reason
