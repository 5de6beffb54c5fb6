"""CLI entry point for mermaid-graph."""

import logging
import sys

import click

from mermaid_graph.config import OutputConfig, SourceConfig
from mermaid_graph.errors import SourceReadError
from mermaid_graph.ir.graph import GraphIR
from mermaid_graph.ir.model import GraphData
from mermaid_graph.parsers import MermaidParser, detect_dialect
from mermaid_graph.serializers import serializer_for
from mermaid_graph.source import read_source


def _summary(src: str, graph: GraphData) -> str:
    gir = GraphIR.from_graph_data(graph)
    dialect = detect_dialect(src)
    lines = [
        f"dialect: {dialect.value if dialect else 'unknown'}",
        f"nodes: {gir.node_count()}",
        f"edges: {gir.edge_count()}",
        f"dag: {'yes' if gir.is_dag() else 'no'}",
        f"isolated: {len(gir.isolated_nodes())}",
    ]
    return "\n".join(lines) + "\n"


def _write(output: str | None, text: str) -> None:
    if output:
        try:
            with open(output, "w") as f:
                f.write(text)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(text, nl=False)


@click.command()
@click.argument("input", required=False, type=click.Path())
@click.option("--wire", "-w", "wire", is_flag=True, help="Emit the flattened {from, to} wire JSON")
@click.option("--summary", "-s", "summary", is_flag=True, help="Print a topology summary instead of JSON")
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation (default 2)")
@click.option("--max-chars", "max_chars", type=int, default=None, help="Refuse sources longer than this")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log parser diagnostics to stderr")
def main(
    input: str | None,
    wire: bool,
    summary: bool,
    indent: int,
    max_chars: int | None,
    output: str | None,
    verbose: bool,
) -> None:
    """Mermaid flowchart, sequence or class diagram to JSON graph output."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        text = read_source(input, SourceConfig(max_chars=max_chars))
    except SourceReadError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    graph = MermaidParser().parse(text)
    if graph.is_empty():
        click.echo("error: no diagram content recognized", err=True)
        sys.exit(1)

    if summary:
        _write(output, _summary(text, graph))
        return

    serializer = serializer_for(OutputConfig(wire=wire, indent=indent))
    _write(output, serializer.serialize(graph) + "\n")


if __name__ == "__main__":
    main()
