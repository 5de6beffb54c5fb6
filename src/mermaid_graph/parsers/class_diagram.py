"""Class diagram extractor: classes, members, relations, and stereotypes.

Relations are stored in canonical direction: the decorated end of the
operator (arrowhead, diamond) is always the target, so `Base <|-- Derived`
and `Derived --|> Base` produce the same edge.
"""

from __future__ import annotations

import re

from mermaid_graph.ir.model import Edge, Member, Node
from mermaid_graph.parsers.assembler import GraphAssembler
from mermaid_graph.parsers.base import Handler, PatternExtractor, unquote
from mermaid_graph.parsers.patterns import (
    BODY_STEREOTYPE_RE,
    CLASS_DECL_RE,
    CLASS_MEMBER_LINE_RE,
    CLASS_RELATION_RE,
    CLASS_RELATIONS,
    CLASS_STEREOTYPE_LINE_RE,
    CLASS_STEREOTYPE_RE,
    VISIBILITY_SIGILS,
)
from mermaid_graph.types import Dialect, EdgeType, NodeType, Visibility


def parse_member(line: str) -> tuple[Member, bool]:
    """Split a member line into (member, is_method). Visibility defaults to public."""
    line = line.strip()
    visibility = Visibility.default()
    if line[:1] in VISIBILITY_SIGILS:
        visibility = VISIBILITY_SIGILS[line[0]]
        line = line[1:].strip()
    return Member(name=line, visibility=visibility), "(" in line


def relation_type(op: str) -> tuple[EdgeType, bool]:
    """Return (relation type, swap endpoints) for a class relation operator."""
    return CLASS_RELATIONS.get(op, (EdgeType.Association, False))


class ClassDiagramParser(PatternExtractor):
    """classDiagram extractor."""

    dialect = Dialect.Class

    def passes(self) -> list[tuple[re.Pattern[str], Handler]]:
        return [
            (CLASS_DECL_RE, self._on_class),
            (CLASS_MEMBER_LINE_RE, self._on_member_line),
            (CLASS_RELATION_RE, self._on_relation),
            (CLASS_STEREOTYPE_RE, self._on_stereotype),
            (CLASS_STEREOTYPE_LINE_RE, self._on_stereotype),
        ]

    def finish(self, ctx: GraphAssembler) -> None:
        ctx.close_edges(NodeType.Implicit)

    def _on_class(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        name = unquote(match.group("name"))
        label = match.group("label")
        if label:
            label = unquote(label)
        elif match.group("generic"):
            label = f"{name}<{match.group('generic')}>"
        node = Node.new(name, label, NodeType.Class)

        body = match.group("body")
        if body:
            for line in body.split("\n"):
                line = line.strip()
                if not line:
                    continue
                stereo = BODY_STEREOTYPE_RE.match(line)
                if stereo:
                    node.stereotype = stereo.group("stereotype").strip()
                    continue
                member, is_method = parse_member(line)
                if is_method:
                    node.methods.append(member)
                else:
                    node.attributes.append(member)

        ctx.add_node(node)

    def _on_member_line(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        name = unquote(match.group("name"))
        node = ctx.add_node(Node.bare(name, NodeType.Class))
        member, is_method = parse_member(match.group("member"))
        if is_method:
            node.methods.append(member)
        else:
            node.attributes.append(member)

    def _on_relation(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        source = unquote(match.group("source"))
        target = unquote(match.group("target"))
        edge_type, swap = relation_type(match.group("op"))
        if swap:
            source, target = target, source
        label = match.group("label")
        ctx.add_edge(Edge.new(source, target, edge_type, label.strip() if label else None))

    def _on_stereotype(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        ctx.attach_stereotype(unquote(match.group("name")), match.group("stereotype").strip())
