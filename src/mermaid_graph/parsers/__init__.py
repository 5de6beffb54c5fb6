"""Parser registry and facade: detect the dialect and dispatch to its extractor."""

from __future__ import annotations

import logging

from mermaid_graph.ir.model import GraphData
from mermaid_graph.parsers.assembler import GraphAssembler
from mermaid_graph.parsers.base import Extractor
from mermaid_graph.parsers.class_diagram import ClassDiagramParser
from mermaid_graph.parsers.detect import detect_dialect
from mermaid_graph.parsers.flowchart import FlowchartParser
from mermaid_graph.parsers.sequence import SequenceParser
from mermaid_graph.types import Dialect, ParseFailure

logger = logging.getLogger(__name__)

_PARSERS: dict[Dialect, type[Extractor]] = {
    Dialect.Flowchart: FlowchartParser,
    Dialect.Sequence: SequenceParser,
    Dialect.Class: ClassDiagramParser,
}


class MermaidParser:
    """Best-effort diagram text to GraphData.

    Holds no scan state between calls: every parse builds a fresh
    GraphAssembler, so one instance may be shared across threads.
    """

    def parse(self, src: str) -> GraphData:
        """Parse src, returning an empty graph when nothing could be extracted."""
        graph, _ = self.parse_with_reason(src)
        return graph

    def parse_with_reason(self, src: str) -> tuple[GraphData, ParseFailure | None]:
        """Parse src and also report why the result is empty, if it is."""
        if not isinstance(src, str):
            logger.warning("expected diagram text, got %s", type(src).__name__)
            src = ""

        dialect = detect_dialect(src)
        if dialect is None:
            logger.warning("unsupported dialect: no flowchart, sequenceDiagram or classDiagram keyword found")
            return GraphData.empty(), ParseFailure.UnsupportedDialect

        ctx = GraphAssembler()
        extractor = _PARSERS[dialect]()
        try:
            found = extractor.extract(src, ctx)
        except Exception:
            logger.exception("%s extractor failed", dialect.value)
            return GraphData.empty(), ParseFailure.ExtractorError

        if not found:
            logger.warning("%s detected but no entities or relations were extracted", dialect.value)
            return GraphData.empty(), ParseFailure.EmptyExtraction

        graph = ctx.snapshot()
        logger.info("parsed %s: %d nodes, %d edges", dialect.value, len(graph.nodes), len(graph.edges))
        return graph, None


def parse(src: str) -> GraphData:
    """Auto-detect the dialect and parse to GraphData."""
    return MermaidParser().parse(src)


__all__ = [
    "ClassDiagramParser",
    "FlowchartParser",
    "MermaidParser",
    "SequenceParser",
    "detect_dialect",
    "parse",
]
