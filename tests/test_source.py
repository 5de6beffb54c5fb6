"""Tests for mermaid_graph.source: reading diagram text."""

import io

import pytest

from mermaid_graph.config import SourceConfig
from mermaid_graph.errors import MermaidGraphError, SourceReadError
from mermaid_graph.source import read_source


def test_reads_file(tmp_path):
    path = tmp_path / "d.mmd"
    path.write_text("flowchart\nA --> B\n", encoding="utf-8")
    assert read_source(str(path)) == "flowchart\nA --> B\n"


def test_reads_stdin_when_no_path():
    assert read_source(None, stdin=io.StringIO("graph TD\n")) == "graph TD\n"


def test_missing_file(tmp_path):
    with pytest.raises(SourceReadError) as exc:
        read_source(str(tmp_path / "missing.mmd"))
    assert exc.value.source.endswith("missing.mmd")
    assert "cannot read" in str(exc.value)


def test_undecodable_file(tmp_path):
    path = tmp_path / "bad.mmd"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(SourceReadError, match="not valid utf-8 text"):
        read_source(str(path))


def test_max_chars():
    config = SourceConfig(max_chars=3)
    with pytest.raises(MermaidGraphError, match="<stdin>"):
        read_source(None, config, stdin=io.StringIO("flowchart"))
    assert read_source(None, config, stdin=io.StringIO("abc")) == "abc"
