"""Outline tree model, parser and serializer.

Example:
    >>> from speechcards.outline import parse, to_text
    >>> result = parse("- Speech\\n   - Intro")
    >>> result.nodes[0].children[0].title
    'Intro'
    >>> to_text(result.nodes)
    'Speech\\n   Intro'
"""

from speechcards.outline.document import Outline
from speechcards.outline.node import OutlineNode, count_leaves, count_nodes, relink_parents
from speechcards.outline.parser import OutlineParser, ParseResult, extract_title, parse, parse_to_outline
from speechcards.outline.serializer import to_text

__all__ = [
    "Outline",
    "OutlineNode",
    "OutlineParser",
    "ParseResult",
    "count_leaves",
    "count_nodes",
    "extract_title",
    "parse",
    "parse_to_outline",
    "relink_parents",
    "to_text",
]
