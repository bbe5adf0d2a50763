"""Outline tree serializer.

Renders a tree back to plain indented text: one line per node, no list
markers and no headers. This is the inverse of the parser's indentation
grammar only; a header document comes back as an indentation document.
"""

from typing import Iterable

from speechcards.outline.node import OutlineNode


DEFAULT_INDENT_WIDTH = 3


def to_text(roots: Iterable[OutlineNode], indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """Render root nodes and their subtrees as indented text.

    Args:
        roots: Root nodes in document order
        indent_width: Spaces per depth level

    Returns:
        Lines joined with ``\\n`` (no trailing newline)
    """
    lines: list[str] = []

    def render_node(node: OutlineNode, depth: int) -> None:
        lines.append(" " * (depth * indent_width) + node.title)
        for child in node.children:
            render_node(child, depth + 1)

    for root in roots:
        render_node(root, 0)

    return "\n".join(lines)
