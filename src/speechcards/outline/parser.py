"""Outline text parser.

Two grammars are accepted in the same document:

- Indentation: each line's leading whitespace sets its depth, and an
  optional leading ``-`` or ``*`` list marker is dropped.
- Markdown headers: ``#`` lines open sections, and every content line that
  follows nests under the most recent header, with its own indentation only
  ordering it among the other content lines of that section.

Header depths are offset far below zero so a header is always shallower than
any indentation depth.
"""

from dataclasses import dataclass, field
from typing import Optional

from speechcards.outline.document import Outline
from speechcards.outline.node import OutlineNode, count_leaves, count_nodes


HEADER_DEPTH_BASE = -1000
LIST_MARKERS = ("-", "*")


@dataclass
class ParseResult:
    """Parser output.

    Attributes:
        nodes: Root nodes in document order
        total_nodes: Count of every node produced
        leaf_count: Count of nodes without children (one card each)
    """

    nodes: list[OutlineNode]
    total_nodes: int = field(init=False)
    leaf_count: int = field(init=False)

    def __post_init__(self):
        self.total_nodes = count_nodes(self.nodes)
        self.leaf_count = count_leaves(self.nodes)

    @property
    def status(self) -> str:
        return format_status(self.total_nodes, self.leaf_count)


def format_status(total_nodes: int, leaf_count: int) -> str:
    return f"{total_nodes} items, {leaf_count} cards"


@dataclass
class _ParseState:
    """Accumulator threaded through the line loop."""

    roots: list[OutlineNode] = field(default_factory=list)
    stack: list[tuple[int, OutlineNode]] = field(default_factory=list)
    has_headers: bool = False
    last_header_depth: int = 0


def _classify_line(line: str, state: _ParseState) -> Optional[tuple[int, str]]:
    """Compute (depth, title) for a line, or None if the line yields no node.

    Header lines update the header tracking in ``state``.
    """
    stripped = line.lstrip()

    if stripped.startswith("#"):
        hash_count = len(stripped) - len(stripped.lstrip("#"))
        title = stripped[hash_count:].strip()
        if not title:
            return None

        depth = HEADER_DEPTH_BASE + hash_count
        state.has_headers = True
        state.last_header_depth = depth
        return depth, title

    indent = len(line) - len(stripped)
    title = stripped
    if title.startswith(LIST_MARKERS):
        title = title[1:]
    title = title.strip()
    if not title:
        return None

    if state.has_headers:
        return state.last_header_depth + 1 + indent, title
    return indent, title


def _place(node: OutlineNode, depth: int, state: _ParseState) -> None:
    """Attach ``node`` under the nearest shallower entry on the stack."""
    while state.stack and state.stack[-1][0] >= depth:
        state.stack.pop()

    if state.stack:
        state.stack[-1][1].attach(node)
    else:
        state.roots.append(node)

    state.stack.append((depth, node))


def parse(text: str) -> ParseResult:
    """Parse outline text into a tree.

    Blank lines are ignored, as are lines that reduce to an empty title
    (bare ``#`` runs, bare list markers). Never raises on malformed input.

    Args:
        text: Outline text, lines separated by ``\\n``

    Returns:
        ParseResult with root nodes and counts

    Examples:
        >>> result = parse("Speech\\n   Intro\\n   Body")
        >>> [child.title for child in result.nodes[0].children]
        ['Intro', 'Body']
    """
    state = _ParseState()

    if not text or not text.strip():
        return ParseResult(nodes=state.roots)

    for line in text.split("\n"):
        if not line.strip():
            continue

        classified = _classify_line(line, state)
        if classified is None:
            continue

        depth, title = classified
        _place(OutlineNode(title=title), depth, state)

    return ParseResult(nodes=state.roots)


def extract_title(text: str) -> str:
    """Return the title of the first top-level ``# `` header, or "".

    ``##`` and deeper headers are ignored.
    """
    for line in text.split("\n"):
        stripped = line.lstrip()
        if stripped.startswith("# "):
            return stripped[2:].strip()
    return ""


def parse_to_outline(text: str, name: str = "Untitled Outline") -> Outline:
    """Parse text straight into a named Outline document."""
    return Outline(name=name, roots=parse(text).nodes)


class OutlineParser:
    """Object wrapper for collaborators that hold a parser instance."""

    def parse(self, text: str) -> ParseResult:
        return parse(text)

    def parse_to_outline(self, text: str, name: str = "Untitled Outline") -> Outline:
        return parse_to_outline(text, name)

    @staticmethod
    def extract_title(text: str) -> str:
        return extract_title(text)
