"""Flowchart extractor: a tolerant pattern scan over arrow-and-bracket syntax.

Three passes over the statement-per-line text:

1. declared nodes (`id[Label]` and the other bracket shapes), with edge
   label text blanked out first,
2. relation chains (`A --> B`, `A & B -.-> C`, `A -->|yes| B`),
3. inline text links inside those chains (`A -- text --> B`), merged onto an
   existing edge for the same pair when there is one.

Endpoints that were never declared become implicit nodes at the end.
"""

from __future__ import annotations

import re
from typing import Iterator

from mermaid_graph.ir.model import Edge, Node
from mermaid_graph.parsers.assembler import GraphAssembler
from mermaid_graph.parsers.base import Handler, PatternExtractor, normalize_newlines, strip_comments, unquote
from mermaid_graph.parsers.patterns import (
    FLOW_ARROW_STYLES,
    FLOW_CHAIN_RE,
    FLOW_GROUP_RE,
    FLOW_HEADER_RE,
    FLOW_IGNORED_RE,
    FLOW_LABEL_SPAN_RE,
    FLOW_NODE_RE,
    FLOW_REF_RE,
    FLOW_SEGMENT_RE,
    FLOW_STATEMENT_RE,
)
from mermaid_graph.types import Dialect, EdgeType, NodeType


def arrow_style(arrow: str) -> EdgeType:
    for pattern, style in FLOW_ARROW_STYLES:
        if pattern.search(arrow):
            return style
    return EdgeType.Solid


def _node_label(match: re.Match[str]) -> str:
    label = next((g for g in match.groups()[1:] if g is not None), "")
    label = label.strip()
    if len(label) >= 2 and label[0] == label[-1] == '"':
        label = label[1:-1]
    return label


def _ref_ids(group: str) -> list[str]:
    return [unquote(m.group("id")) for m in FLOW_REF_RE.finditer(group)]


def _links(text: str) -> Iterator[tuple[str, str, EdgeType, str | None, bool]]:
    """Walk a relation chain hop by hop, fanning out over `&` groups.

    Yields (source, target, style, label, inline) where inline marks a
    `-- text -->` hop rather than an arrow.
    """
    head = FLOW_GROUP_RE.match(text)
    if head is None:
        return
    sources = _ref_ids(head.group("sources"))
    pos = head.end()
    while True:
        seg = FLOW_SEGMENT_RE.match(text, pos)
        if seg is None:
            break
        inline = seg.group("arrow") is None
        if inline:
            style = arrow_style(seg.group("open") + seg.group("close"))
            label = seg.group("text")
        else:
            style = arrow_style(seg.group("arrow"))
            label = seg.group("label")
        label = label.strip() if label else None
        targets = _ref_ids(seg.group("targets"))
        for source in sources:
            for target in targets:
                yield source, target, style, label, inline
        sources = targets
        pos = seg.end()


class FlowchartParser(PatternExtractor):
    """Flowchart/graph diagram extractor."""

    dialect = Dialect.Flowchart

    def passes(self) -> list[tuple[re.Pattern[str], Handler]]:
        return [
            (FLOW_STATEMENT_RE, self._on_statement),
            (FLOW_CHAIN_RE, self._on_chain),
            (FLOW_CHAIN_RE, self._on_inline_labels),
        ]

    def prepare(self, src: str) -> str:
        """Reduce the source to one statement per line, without headers or styling."""
        statements: list[str] = []
        for line in strip_comments(normalize_newlines(src)).split("\n"):
            line = FLOW_HEADER_RE.sub("", line, count=1)
            for stmt in line.split(";"):
                stmt = stmt.strip()
                if stmt and not FLOW_IGNORED_RE.match(stmt):
                    statements.append(stmt)
        return "\n".join(statements)

    def finish(self, ctx: GraphAssembler) -> None:
        ctx.close_edges(NodeType.Implicit)

    def succeeded(self, ctx: GraphAssembler) -> bool:
        return ctx.node_count() > 0 or ctx.edge_count() > 0

    def _on_statement(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        for node in FLOW_NODE_RE.finditer(FLOW_LABEL_SPAN_RE.sub(" --> ", match.group(0))):
            ctx.add_node(Node.new(unquote(node.group("id")), _node_label(node), NodeType.Node))

    def _on_chain(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        for source, target, style, label, inline in _links(match.group(0)):
            if not inline:
                ctx.add_edge(Edge.new(source, target, style, label))

    def _on_inline_labels(self, match: re.Match[str], ctx: GraphAssembler) -> None:
        for source, target, style, label, inline in _links(match.group(0)):
            if inline and label:
                ctx.merge_label(source, target, label, style)
