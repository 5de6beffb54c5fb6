"""Sequence diagram extractor: declared roles, messages, and notes."""

from __future__ import annotations

import re

from mermaid_graph.ir.model import Edge, Node
from mermaid_graph.parsers.assembler import GraphAssembler
from mermaid_graph.parsers.base import Handler, PatternExtractor, unquote
from mermaid_graph.parsers.patterns import ACTOR_RE, MESSAGE_RE, NOTE_RE, PARTICIPANT_RE, SEQUENCE_ARROWS
from mermaid_graph.types import Dialect, EdgeType, NodeType


def message_type(arrow: str) -> tuple[EdgeType, bool]:
    """Return (message type, swap endpoints) for a sequence arrow."""
    return SEQUENCE_ARROWS.get(arrow, (EdgeType.Sync, False))


class SequenceParser(PatternExtractor):
    """sequenceDiagram extractor."""

    dialect = Dialect.Sequence

    def passes(self) -> list[tuple[re.Pattern[str], Handler]]:
        return [
            (PARTICIPANT_RE, self._declare(NodeType.Participant)),
            (ACTOR_RE, self._declare(NodeType.Actor)),
            (MESSAGE_RE, self._on_message),
            (NOTE_RE, self._on_note),
        ]

    def _declare(self, type: NodeType) -> Handler:
        def handle(match: re.Match[str], ctx: GraphAssembler) -> None:
            name = unquote(match.group("name"))
            alias = match.group("alias")
            ctx.add_node(Node.new(name, unquote(alias) if alias else None, type))

        return handle

    def _on_message(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        source = unquote(match.group("source"))
        target = unquote(match.group("target"))
        for role in (source, target):
            ctx.ensure_node(role, NodeType.ImplicitParticipant)

        edge_type, reverse = message_type(match.group("arrow"))
        if reverse:
            source, target = target, source
        text = (match.group("text") or "").strip()
        ctx.add_edge(Edge.new(source, target, edge_type, text))

    def _on_note(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        participants = [unquote(match.group("first"))]
        if match.group("second"):
            participants.append(unquote(match.group("second")))
        note_type = NodeType.NoteBetween if len(participants) == 2 else NodeType.NoteOver
        node = Node(
            id=ctx.next_note_id(),
            label=match.group("text").strip(),
            type=note_type,
            participants=participants,
        )
        ctx.add_node(node)
