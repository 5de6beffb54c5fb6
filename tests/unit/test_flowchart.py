"""Tests for the flowchart extractor."""

from mermaid_graph.parsers import parse
from mermaid_graph.serializers import to_dict
from mermaid_graph.types import EdgeType, NodeType


def _edges(graph):
    return [(e.source, e.target, e.type, e.label) for e in graph.edges]


def test_start_process_end_scenario():
    src = "flowchart\nA[Start] --> B[Process]\nB -- ok --> C[End]\n"
    assert to_dict(parse(src)) == {
        "nodes": [
            {"id": "A", "label": "Start", "type": "node"},
            {"id": "B", "label": "Process", "type": "node"},
            {"id": "C", "label": "End", "type": "node"},
        ],
        "edges": [
            {"source": "A", "target": "B", "type": "solid"},
            {"source": "B", "target": "C", "label": "ok", "type": "solid"},
        ],
    }


def test_inline_label_merges_onto_existing_edge():
    graph = parse("flowchart\nA --> B\nA -- hello --> B\n")
    assert _edges(graph) == [("A", "B", EdgeType.Solid, "hello")]


def test_implicit_node_synthesized_once():
    graph = parse("flowchart LR\nA --> X\nB --> X\nC --> X\n")
    xs = [n for n in graph.nodes if n.id == "X"]
    assert len(xs) == 1
    assert xs[0].type == NodeType.Implicit
    assert xs[0].label == "X"
    assert [n.id for n in graph.nodes] == ["A", "X", "B", "C"]


def test_declared_nodes_are_not_implicit():
    graph = parse("flowchart TD\nA[Alpha] --> B\n")
    assert graph.node("A").type == NodeType.Node
    assert graph.node("B").type == NodeType.Implicit


def test_arrow_styles():
    src = "flowchart TD\nA --> B\nC -.-> D\nE ==> F\nG --- H\nI -.- J\nK === L\n"
    graph = parse(src)
    assert [e.type for e in graph.edges] == [
        EdgeType.Solid,
        EdgeType.Dashed,
        EdgeType.Thick,
        EdgeType.Solid,
        EdgeType.Dashed,
        EdgeType.Thick,
    ]


def test_chain_creates_edge_per_segment():
    graph = parse("flowchart TD\nA --> B --> C\n")
    assert [(e.source, e.target) for e in graph.edges] == [("A", "B"), ("B", "C")]


def test_ampersand_fan_out():
    graph = parse("flowchart TD\nA & B --> C\n")
    assert [(e.source, e.target) for e in graph.edges] == [("A", "C"), ("B", "C")]


def test_pipe_label():
    graph = parse("flowchart TD\nA -->|yes| B\n")
    assert graph.edges[0].label == "yes"


def test_dotted_and_thick_inline_labels():
    graph = parse("flowchart TD\nA -. maybe .-> B\nC == big ==> D\n")
    assert _edges(graph) == [
        ("A", "B", EdgeType.Dashed, "maybe"),
        ("C", "D", EdgeType.Thick, "big"),
    ]


def test_inline_label_followed_by_arrow():
    graph = parse("flowchart\nA -- yes --> B --> C\n")
    assert _edges(graph) == [
        ("B", "C", EdgeType.Solid, None),
        ("A", "B", EdgeType.Solid, "yes"),
    ]


def test_consecutive_inline_labels():
    graph = parse("flowchart\nA -- x --> B -- y --> C\n")
    assert _edges(graph) == [
        ("A", "B", EdgeType.Solid, "x"),
        ("B", "C", EdgeType.Solid, "y"),
    ]


def test_inline_label_fan_out():
    graph = parse("flowchart\nA & B -. maybe .-> C\n")
    assert _edges(graph) == [
        ("A", "C", EdgeType.Dashed, "maybe"),
        ("B", "C", EdgeType.Dashed, "maybe"),
    ]


def test_label_text_does_not_declare_nodes():
    graph = parse("flowchart\nA[Start] -- call f(x) --> B[End]\nB -->|g(y)| C\n")
    assert [(n.id, n.label, n.type) for n in graph.nodes] == [
        ("A", "Start", NodeType.Node),
        ("B", "End", NodeType.Node),
        ("C", "C", NodeType.Implicit),
    ]
    assert _edges(graph) == [
        ("B", "C", EdgeType.Solid, "g(y)"),
        ("A", "B", EdgeType.Solid, "call f(x)"),
    ]


def test_shapes_all_become_plain_nodes():
    graph = parse("flowchart TD\nA(Round) --> B{Decide}\nC((Circle)) --> D>Flag]\nE[[Sub]]\n")
    labels = {n.id: n.label for n in graph.nodes}
    assert labels == {"A": "Round", "B": "Decide", "C": "Circle", "D": "Flag", "E": "Sub"}
    assert all(n.type == NodeType.Node for n in graph.nodes)


def test_quoted_label_and_id():
    graph = parse('flowchart TD\nA["Hello World"] --> "B"\n')
    assert graph.node("A").label == "Hello World"
    assert graph.edges[0].target == "B"


def test_first_definition_wins():
    graph = parse("flowchart TD\nA[Hello] --> B\nA[World] --> C\n")
    assert [n.id for n in graph.nodes].count("A") == 1
    assert graph.node("A").label == "Hello"


def test_graph_header_with_semicolons():
    graph = parse("graph TD; A-->B; B-->C")
    assert [(e.source, e.target) for e in graph.edges] == [("A", "B"), ("B", "C")]


def test_subgraph_members_are_flattened():
    graph = parse("flowchart LR\nsubgraph one\nA --> B\nend\nstyle A fill:#f9f\n")
    assert [n.id for n in graph.nodes] == ["A", "B"]
    assert len(graph.edges) == 1


def test_comments_are_ignored():
    graph = parse("flowchart TD\n%% A --> Z\nA --> B\n")
    assert [n.id for n in graph.nodes] == ["A", "B"]


def test_hyphenated_ids():
    graph = parse("flowchart TD\nnode-1-->node-2\n")
    assert [(e.source, e.target) for e in graph.edges] == [("node-1", "node-2")]


def test_nodes_without_edges():
    graph = parse("flowchart TD\nA[Lonely]\n")
    assert len(graph.nodes) == 1
    assert graph.edges == ()


def test_header_only_is_empty():
    graph = parse("flowchart TD\n")
    assert graph.is_empty()
