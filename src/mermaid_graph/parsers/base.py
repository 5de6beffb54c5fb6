"""Base extractor protocol and the ordered pass runner shared by all dialects."""

from __future__ import annotations

import logging
import re
from typing import Callable, Protocol

from mermaid_graph.parsers.assembler import GraphAssembler
from mermaid_graph.parsers.patterns import COMMENT_RE
from mermaid_graph.types import Dialect

logger = logging.getLogger(__name__)

Handler = Callable[[re.Match[str], GraphAssembler], None]

_QUOTES = "\"'`"


class Extractor(Protocol):
    """Protocol that all dialect extractors must implement."""

    dialect: Dialect

    def extract(self, src: str, ctx: GraphAssembler) -> bool:
        """Scan src into ctx. Returns False when nothing usable was found."""
        ...


class PatternExtractor:
    """Runs an ordered list of (matcher, handler) passes over prepared text.

    Each pass walks every match of its pattern before the next pass starts, so
    later passes can rely on what earlier ones recorded in the context.
    """

    dialect: Dialect

    def passes(self) -> list[tuple[re.Pattern[str], Handler]]:
        raise NotImplementedError

    def prepare(self, src: str) -> str:
        return strip_comments(normalize_newlines(src))

    def finish(self, ctx: GraphAssembler) -> None:
        pass

    def succeeded(self, ctx: GraphAssembler) -> bool:
        return ctx.node_count() > 0

    def extract(self, src: str, ctx: GraphAssembler) -> bool:
        text = self.prepare(src)
        for pattern, handler in self.passes():
            for match in pattern.finditer(text):
                handler(match, ctx)
        self.finish(ctx)
        logger.debug(
            "%s: extracted %d nodes, %d edges",
            self.dialect.value,
            ctx.node_count(),
            ctx.edge_count(),
        )
        return self.succeeded(ctx)


def normalize_newlines(src: str) -> str:
    return src.replace("\r\n", "\n").replace("\r", "\n")


def strip_comments(src: str) -> str:
    return COMMENT_RE.sub("", src)


def unquote(s: str) -> str:
    """Strip one pair of surrounding quote characters."""
    s = s.strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in _QUOTES:
        return s[1:-1]
    return s
