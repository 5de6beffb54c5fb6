"""Entity/relationship pattern library.

Pure data: compiled regexes and lookup tables for every dialect. Extractors
pair these matchers with handlers; nothing here holds state.
"""

from __future__ import annotations

import re

from mermaid_graph.types import Dialect, EdgeType, Visibility

# ─── Shared ──────────────────────────────────────────────────────────────────

COMMENT_RE = re.compile(r"%%[^\n]*")

# Checked in priority order; the first dialect with a marker anywhere wins.
DIALECT_MARKERS: list[tuple[Dialect, re.Pattern[str]]] = [
    (Dialect.Flowchart, re.compile(r"flowchart|^[ \t]*graph\b", re.MULTILINE)),
    (Dialect.Sequence, re.compile(r"sequenceDiagram")),
    (Dialect.Class, re.compile(r"classDiagram")),
]

_QUOTED = r'"[^"\n]+"|\'[^\'\n]+\''

# ─── Flowchart ───────────────────────────────────────────────────────────────

# Longer openers first so `((x))` is not read as `(` + `(x)`.
FLOW_SHAPES: list[tuple[str, str]] = [
    ("(((", ")))"),
    ("((", "))"),
    ("([", "])"),
    ("[(", ")]"),
    ("[[", "]]"),
    ("{{", "}}"),
    ("[/", "/]"),
    ("[/", "\\]"),
    ("[\\", "\\]"),
    ("[\\", "/]"),
    ("[", "]"),
    ("(", ")"),
    ("{", "}"),
    (">", "]"),  # asymmetric
]

FLOW_ID = rf"(?:{_QUOTED}|\w+(?:-\w+)*)"


def _flow_shapes(capture: bool) -> str:
    body = "(.*?)" if capture else "(?:.*?)"
    return "|".join(re.escape(o) + body + re.escape(c) for o, c in FLOW_SHAPES)


def _flow_ref(name: str | None = None) -> str:
    ident = rf"(?P<{name}>{FLOW_ID})" if name else FLOW_ID
    return rf"{ident}(?:{_flow_shapes(False)})?(?::::[\w-]+)?"


# id immediately followed by a shape: A[Label], B((Label)), C{Label} ...
FLOW_NODE_RE = re.compile(rf"(?<!\w)(?P<id>{FLOW_ID})(?:{_flow_shapes(True)})(?::::[\w-]+)?")

# A reference inside a relation, with or without a shape.
FLOW_REF_RE = re.compile(_flow_ref("id"))

# Heads: > arrow, x cross, o circle. Bodies: -- solid, -.- dotted, == thick.
FLOW_ARROW = r"<?(?:-{2,}|-\.+-|={2,})(?:>|[xo](?!\w))|-{3,}|-\.+-|={3,}"

# Inline text links: A -- text --> B, A -. text .-> B, A == text ==> B
_FLOW_TEXT_OPEN = r"(?<![-.=<])(?:--|-\.|==)(?![-.=>])"
_FLOW_TEXT = r"[^\s\-=.>|][^\n]*?"
_FLOW_TEXT_CLOSE = r"-{2,}>|-{3,}|\.+-+>|={2,}>"

_FLOW_GROUP = rf"{_flow_ref()}(?:[ \t]*&[ \t]*{_flow_ref()})*"

_FLOW_LINK = (
    rf"(?:{FLOW_ARROW})[ \t]*(?:\|[^|\n]*\|[ \t]*)?"
    rf"|{_FLOW_TEXT_OPEN}[ \t]*{_FLOW_TEXT}[ \t]*(?:{_FLOW_TEXT_CLOSE})[ \t]*"
)

# One hop of a chain: an arrow with an optional |pipe label|, or an inline text link.
FLOW_SEGMENT_RE = re.compile(
    rf"[ \t]*(?:(?P<arrow>{FLOW_ARROW})[ \t]*(?:\|(?P<label>[^|\n]*)\|[ \t]*)?"
    rf"|(?P<open>{_FLOW_TEXT_OPEN})[ \t]*(?P<text>{_FLOW_TEXT})[ \t]*(?P<close>{_FLOW_TEXT_CLOSE})[ \t]*)"
    rf"(?P<targets>{_FLOW_GROUP})"
)
FLOW_GROUP_RE = re.compile(rf"[ \t]*(?P<sources>{_FLOW_GROUP})")

# A whole relation statement: A --> B, A & B -->|x| C --> D, A -- text --> B --> C ...
FLOW_CHAIN_RE = re.compile(rf"^[ \t]*{_FLOW_GROUP}(?:[ \t]*(?:{_FLOW_LINK}){_FLOW_GROUP})+", re.MULTILINE)

# Edge label text, blanked out before node declarations are scanned.
FLOW_LABEL_SPAN_RE = re.compile(
    rf"(?:{FLOW_ARROW})[ \t]*\|[^|\n]*\||{_FLOW_TEXT_OPEN}[ \t]*{_FLOW_TEXT}[ \t]*(?:{_FLOW_TEXT_CLOSE})"
)

FLOW_STATEMENT_RE = re.compile(r"^[^\n]+$", re.MULTILINE)

# First matching style wins.
FLOW_ARROW_STYLES: list[tuple[re.Pattern[str], EdgeType]] = [
    (re.compile(r"\."), EdgeType.Dashed),
    (re.compile(r"=="), EdgeType.Thick),
    (re.compile(r""), EdgeType.Solid),
]

FLOW_HEADER_RE = re.compile(r"^[ \t]*(?:flowchart|graph)(?:-v2)?\b[^;\n]*;?")

# Statements that carry styling or scoping only.
FLOW_IGNORED_RE = re.compile(r"^(?:subgraph|end|style|classDef|class|click|linkStyle|direction)\b")

# ─── Sequence ────────────────────────────────────────────────────────────────

SEQUENCE_ROLE = rf"(?:{_QUOTED}|\w+)"

PARTICIPANT_RE = re.compile(
    rf"^[ \t]*(?:create[ \t]+)?participant[ \t]+(?P<name>{SEQUENCE_ROLE})(?:[ \t]+as[ \t]+(?P<alias>[^\n]+))?",
    re.MULTILINE,
)
ACTOR_RE = re.compile(
    rf"^[ \t]*(?:create[ \t]+)?actor[ \t]+(?P<name>{SEQUENCE_ROLE})(?:[ \t]+as[ \t]+(?P<alias>[^\n]+))?",
    re.MULTILINE,
)

# arrow -> (message type, written right-to-left)
SEQUENCE_ARROWS: dict[str, tuple[EdgeType, bool]] = {
    "-->>": (EdgeType.Async, False),
    "==>>": (EdgeType.Async, False),
    "<<--": (EdgeType.Async, True),
    "->>": (EdgeType.Async, False),
    "<<-": (EdgeType.Async, True),
    "--)": (EdgeType.Async, False),
    "-)": (EdgeType.Async, False),
    "-->": (EdgeType.Sync, False),
    "==>": (EdgeType.Sync, False),
    "<--": (EdgeType.Sync, True),
    "->": (EdgeType.Sync, False),
    "<-": (EdgeType.Sync, True),
    "--x": (EdgeType.Lost, False),
    "--X": (EdgeType.Lost, False),
    "-x": (EdgeType.Lost, False),
    "-X": (EdgeType.Lost, False),
}

_SEQUENCE_ARROW_ALT = "|".join(re.escape(a) for a in sorted(SEQUENCE_ARROWS, key=len, reverse=True))

MESSAGE_RE = re.compile(
    rf"^[ \t]*(?P<source>{SEQUENCE_ROLE})[ \t]*(?P<arrow>{_SEQUENCE_ARROW_ALT})[ \t]*[+-]?[ \t]*"
    rf"(?P<target>{SEQUENCE_ROLE})[ \t]*(?::[ \t]*(?P<text>[^\n]*))?$",
    re.MULTILINE,
)

NOTE_RE = re.compile(
    rf"^[ \t]*[Nn]ote[ \t]+(?P<position>over|left of|right of)[ \t]+(?P<first>{SEQUENCE_ROLE})"
    rf"(?:[ \t]*,[ \t]*(?P<second>{SEQUENCE_ROLE}))?[ \t]*:[ \t]*(?P<text>[^\n]*)",
    re.MULTILINE,
)

# ─── Class ───────────────────────────────────────────────────────────────────

CLASS_ID = r"(?:`[^`\n]+`|\w+)"
_GENERIC = r"~[^~\n]+~"

# Rejects matches that sit inside an open `{ ... }` body.
_OUTSIDE_BODY = r"(?![^{]*\})"

CLASS_DECL_RE = re.compile(
    rf"^[ \t]*class[ \t]+(?P<name>{CLASS_ID})(?:~(?P<generic>[^~\n]+)~)?"
    rf"(?:[ \t]*\[(?P<label>[^\]\n]*)\])?(?:[ \t]*:::[\w-]+)?(?:[ \t]*<<[^>\n]*>>)?"
    rf"(?:[ \t]*\{{(?P<body>[^}}]*)\}})?",
    re.MULTILINE,
)

CLASS_MEMBER_LINE_RE = re.compile(
    rf"^[ \t]*(?P<name>{CLASS_ID})(?:{_GENERIC})?[ \t]*:[ \t]*(?P<member>[^\n]*\S)[ \t]*${_OUTSIDE_BODY}",
    re.MULTILINE,
)

CLASS_STEREOTYPE_RE = re.compile(
    rf"^[ \t]*class[ \t]+(?P<name>{CLASS_ID})(?:{_GENERIC})?[ \t]*<<(?P<stereotype>[^>\n]*)>>",
    re.MULTILINE,
)
CLASS_STEREOTYPE_LINE_RE = re.compile(
    rf"^[ \t]*<<(?P<stereotype>[^>\n]*)>>[ \t]*(?P<name>{CLASS_ID})[ \t]*${_OUTSIDE_BODY}",
    re.MULTILINE,
)
BODY_STEREOTYPE_RE = re.compile(r"^<<(?P<stereotype>[^>]*)>>$")

# operator -> (relation type, written whole/parent first so endpoints swap)
CLASS_RELATIONS: dict[str, tuple[EdgeType, bool]] = {
    "<|--": (EdgeType.Inheritance, True),
    "--|>": (EdgeType.Inheritance, False),
    "<|..": (EdgeType.Realization, True),
    "..|>": (EdgeType.Realization, False),
    "*--": (EdgeType.Composition, True),
    "--*": (EdgeType.Composition, False),
    "o--": (EdgeType.Aggregation, True),
    "--o": (EdgeType.Aggregation, False),
    "<--": (EdgeType.Dependency, True),
    "-->": (EdgeType.Association, False),
    "<..": (EdgeType.Dependency, True),
    "..>": (EdgeType.Dependency, False),
    "--": (EdgeType.Association, False),
    "..": (EdgeType.Dotted, False),
}


def _class_operator(op: str) -> str:
    pattern = re.escape(op)
    if op[0].isalnum():
        pattern = r"(?<!\w)" + pattern
    if op[-1].isalnum():
        pattern += r"(?!\w)"
    return pattern


_CLASS_OP_ALT = "|".join(_class_operator(op) for op in sorted(CLASS_RELATIONS, key=len, reverse=True))

CLASS_RELATION_RE = re.compile(
    rf"^[ \t]*(?P<source>{CLASS_ID})(?:{_GENERIC})?[ \t]*(?:\"[^\"\n]*\"[ \t]*)?"
    rf"(?P<op>{_CLASS_OP_ALT})[ \t]*(?:\"[^\"\n]*\"[ \t]*)?"
    rf"(?P<target>{CLASS_ID})(?:{_GENERIC})?[ \t]*(?::[ \t]*(?P<label>[^\n]*))?$",
    re.MULTILINE,
)

VISIBILITY_SIGILS: dict[str, Visibility] = {
    "+": Visibility.Public,
    "-": Visibility.Private,
    "#": Visibility.Protected,
    "~": Visibility.Package,
}
