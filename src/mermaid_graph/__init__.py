"""mermaid-graph: tolerant Mermaid diagram text to a typed node/edge graph."""

from mermaid_graph.ir.graph import GraphIR
from mermaid_graph.ir.model import Edge, GraphData, Member, Node
from mermaid_graph.parsers import MermaidParser, detect_dialect, parse
from mermaid_graph.serializers import to_dict, to_wire
from mermaid_graph.types import Dialect, EdgeType, NodeType, ParseFailure, Visibility


def parse_json(src: str, wire: bool = False) -> dict:
    """Parse a Mermaid diagram string straight to a JSON-ready dict.

    Args:
        src: Mermaid diagram source.
        wire: True for the flattened `{from, to}` shape; False for the full graph.

    Returns:
        A dict with "nodes" and "edges" lists; both empty if nothing was recognized.
    """
    graph = parse(src)
    return to_wire(graph) if wire else to_dict(graph)


__all__ = [
    "Dialect",
    "Edge",
    "EdgeType",
    "GraphData",
    "GraphIR",
    "Member",
    "MermaidParser",
    "Node",
    "NodeType",
    "ParseFailure",
    "Visibility",
    "detect_dialect",
    "parse",
    "parse_json",
    "to_dict",
    "to_wire",
]
