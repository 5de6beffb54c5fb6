"""Read diagram source text from a file or stdin."""

from __future__ import annotations

import sys
from typing import TextIO

from mermaid_graph.config import SourceConfig
from mermaid_graph.errors import SourceReadError


def read_source(path: str | None, config: SourceConfig | None = None, stdin: TextIO | None = None) -> str:
    """Return the text at path, or stdin when path is None.

    Raises:
        SourceReadError: If the file cannot be opened or decoded, or exceeds config.max_chars.
    """
    config = config or SourceConfig()
    name = path or "<stdin>"
    try:
        if path:
            with open(path, encoding=config.encoding) as f:
                text = f.read()
        else:
            text = (stdin or sys.stdin).read()
    except OSError as e:
        raise SourceReadError(name, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(name, f"not valid {config.encoding} text") from e

    if config.max_chars is not None and len(text) > config.max_chars:
        raise SourceReadError(name, f"{len(text)} characters exceeds the limit of {config.max_chars}")
    return text
