"""Card generation from an outline tree.

Depths 0 and 1 are structure: they only contribute breadcrumb entries.
Every leaf becomes a card. A node at depth 2 (or deeper) that still has
children becomes one card whose bullets are its whole subtree.
"""

from typing import Iterable

from speechcards.models.card import BulletItem, SpeechCard
from speechcards.outline.node import OutlineNode


MAX_STRUCTURAL_DEPTH = 3


def generate_cards(
    roots: Iterable[OutlineNode],
    max_structural_depth: int = MAX_STRUCTURAL_DEPTH,
) -> list[SpeechCard]:
    """Turn an outline into a numbered card list.

    Args:
        roots: Root nodes in document order
        max_structural_depth: First depth that collapses into bullets

    Returns:
        Cards in document order, numbered 1..N

    Examples:
        >>> from speechcards.outline.parser import parse
        >>> cards = generate_cards(parse("Speech\\n   Intro\\n   Body").nodes)
        >>> [(card.breadcrumb, card.topic) for card in cards]
        [(('Speech',), 'Intro'), (('Speech',), 'Body')]
    """
    cards: list[SpeechCard] = []
    breadcrumb: list[str] = []

    def collect(node: OutlineNode, depth: int) -> None:
        if depth >= max_structural_depth - 1 and not node.is_leaf:
            cards.append(
                SpeechCard(
                    breadcrumb=tuple(breadcrumb),
                    topic=node.title,
                    bullets=tuple(flatten_bullets(node)),
                )
            )
        elif node.is_leaf:
            cards.append(SpeechCard(breadcrumb=tuple(breadcrumb), topic=node.title))
        else:
            breadcrumb.append(node.title)
            for child in node.children:
                collect(child, depth + 1)
            breadcrumb.pop()

    for root in roots:
        collect(root, 0)

    return number_cards(cards)


def flatten_bullets(node: OutlineNode) -> list[BulletItem]:
    """Every descendant of ``node`` as a bullet, in document order.

    Direct children get indent level 0, grandchildren 1, and so on.
    """
    bullets: list[BulletItem] = []

    def visit(current: OutlineNode, indent: int) -> None:
        for child in current.children:
            bullets.append(BulletItem(text=child.title, indent_level=indent))
            visit(child, indent + 1)

    visit(node, 0)
    return bullets


def number_cards(cards: Iterable[SpeechCard]) -> list[SpeechCard]:
    """Return copies of ``cards`` with ordinal 1..N and total N assigned."""
    cards = list(cards)
    total = len(cards)
    return [
        card.model_copy(update={"ordinal": i, "total": total})
        for i, card in enumerate(cards, start=1)
    ]


class CardGenerator:
    """Object wrapper carrying a configured structural depth."""

    def __init__(self, max_structural_depth: int = MAX_STRUCTURAL_DEPTH):
        self.max_structural_depth = max_structural_depth

    def generate(self, roots: Iterable[OutlineNode]) -> list[SpeechCard]:
        return generate_cards(roots, self.max_structural_depth)
