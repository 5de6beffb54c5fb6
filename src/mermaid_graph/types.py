"""Shared type definitions for mermaid-graph.

Closed enums used across the pattern library, extractors, IR, and serializers.
"""

from __future__ import annotations

from enum import Enum, auto


class Dialect(Enum):
    Flowchart = "flowchart"
    Sequence = "sequenceDiagram"
    Class = "classDiagram"


class NodeType(Enum):
    Node = "node"  # A[Label]
    Implicit = "implicit"  # only referenced by a relation
    Actor = "actor"
    Participant = "participant"
    ImplicitParticipant = "implicit_participant"
    Class = "class"
    NoteOver = "note_over"
    NoteBetween = "note_between"


class EdgeType(Enum):
    # flowchart
    Solid = "solid"
    Dashed = "dashed"
    Thick = "thick"
    # sequenceDiagram
    Sync = "sync"
    Async = "async"
    Lost = "lost"
    # classDiagram
    Inheritance = "inheritance"
    Composition = "composition"
    Aggregation = "aggregation"
    Dependency = "dependency"
    Association = "association"
    Dotted = "dotted"
    Realization = "realization"


class Visibility(Enum):
    Public = "public"  # +
    Private = "private"  # -
    Protected = "protected"  # #
    Package = "package"  # ~

    @classmethod
    def default(cls) -> Visibility:
        return cls.Public


class ParseFailure(Enum):
    UnsupportedDialect = auto()
    EmptyExtraction = auto()
    ExtractorError = auto()
