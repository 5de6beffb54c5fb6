"""Tests for GraphAssembler: dedup, implicit closure, and label merge."""

from mermaid_graph.ir.model import Edge, Member, Node
from mermaid_graph.parsers.assembler import GraphAssembler
from mermaid_graph.types import EdgeType, NodeType


def test_add_node_dedups_and_augments():
    ctx = GraphAssembler()
    first = ctx.add_node(Node.new("A", None, NodeType.Class))
    again = Node.new("A", "Alpha", NodeType.Class)
    again.attributes.append(Member("x"))
    merged = ctx.add_node(again)
    assert merged is first
    assert ctx.node_count() == 1
    assert first.label == "Alpha"
    assert [m.name for m in first.attributes] == ["x"]


def test_augment_keeps_explicit_label():
    ctx = GraphAssembler()
    ctx.add_node(Node.new("A", "Hello", NodeType.Node))
    ctx.add_node(Node.new("A", "World", NodeType.Node))
    assert ctx.snapshot().node("A").label == "Hello"


def test_ensure_node_once():
    ctx = GraphAssembler()
    a = ctx.ensure_node("X")
    b = ctx.ensure_node("X")
    assert a is b
    assert a.type == NodeType.Implicit
    assert a.label == "X"


def test_merge_label_updates_first_matching_edge():
    ctx = GraphAssembler()
    first = ctx.add_edge(Edge.new("A", "B", EdgeType.Solid))
    ctx.add_edge(Edge.new("A", "B", EdgeType.Thick))
    merged = ctx.merge_label("A", "B", "hello", EdgeType.Solid)
    assert merged is first
    assert first.label == "hello"
    assert ctx.edge_count() == 2


def test_merge_label_creates_missing_edge():
    ctx = GraphAssembler()
    edge = ctx.merge_label("A", "B", "new", EdgeType.Dashed)
    assert ctx.edges == [edge]
    assert edge.type == EdgeType.Dashed
    assert ctx.merge_label("A", "B", "newer", EdgeType.Solid) is edge
    assert edge.label == "newer"


def test_close_edges():
    ctx = GraphAssembler()
    ctx.add_node(Node.new("A", "a", NodeType.Node))
    ctx.add_edge(Edge.new("A", "B", EdgeType.Solid))
    ctx.add_edge(Edge.new("B", "C", EdgeType.Solid))
    created = ctx.close_edges()
    assert [n.id for n in created] == ["B", "C"]
    assert ctx.close_edges() == []


def test_attach_stereotype_only_on_existing_class():
    ctx = GraphAssembler()
    ctx.add_node(Node.new("A", None, NodeType.Class))
    ctx.ensure_node("B")
    assert ctx.attach_stereotype("A", "interface")
    assert not ctx.attach_stereotype("B", "interface")
    assert not ctx.attach_stereotype("C", "interface")
    assert "C" not in ctx


def test_next_note_id_skips_taken_ids():
    ctx = GraphAssembler()
    ctx.ensure_node("note_1")
    assert ctx.next_note_id() == "note_2"


def test_snapshot_copies():
    ctx = GraphAssembler()
    ctx.add_node(Node.new("A", None, NodeType.Node))
    graph = ctx.snapshot()
    graph.nodes[0].label = "mutated"
    assert ctx.snapshot().node("A").label == "A"
