"""Practice session state over a generated card list.

Tracks the current card, card-by-card and chapter-by-chapter movement, and
keeps the outline's highlighted/expanded flags in step with the current card.
"""

from typing import Iterable, Optional

from speechcards.cards.navigator import ChapterNavigator
from speechcards.models.card import SpeechCard
from speechcards.outline.node import OutlineNode, walk_all


def find_card_for_node(cards: list[SpeechCard], node: OutlineNode) -> Optional[int]:
    """Index of the card that best represents ``node``.

    Matches, in card order, the first card whose path equals the node's
    path, starts with it (the node is a section heading), or is a prefix of
    it (the node was collapsed into that card's bullets).

    Returns:
        Card index, or None if no card matches
    """
    node_path = node.breadcrumb()

    for i, card in enumerate(cards):
        card_path = card.path()
        shared = min(len(card_path), len(node_path))
        if card_path[:shared] == node_path[:shared]:
            return i

    return None


class PracticeSession:
    """
    Card-by-card walk through a speech.

    Example:
        >>> session = PracticeSession(generate_cards(roots), roots)
        >>> session.next_chapter()
        >>> session.position
        'Card 3 of 8'
    """

    def __init__(
        self,
        cards: Iterable[SpeechCard],
        nodes: Optional[Iterable[OutlineNode]] = None,
        start_index: int = 0,
    ):
        """
        Initialize the session.

        Args:
            cards: Generated card list
            nodes: Outline roots the cards came from (for highlighting)
            start_index: Initial card, clamped into range
        """
        self.nodes: list[OutlineNode] = list(nodes or [])
        self.current_index = 0
        self.load_cards(cards, start_index)

    def load_cards(self, cards: Iterable[SpeechCard], start_index: int = 0) -> None:
        """Replace the card list; the chapter cache starts over."""
        self.cards: list[SpeechCard] = list(cards)
        self.navigator = ChapterNavigator(self.cards)

        if self.cards:
            self.go_to(max(0, min(start_index, len(self.cards) - 1)))
        else:
            self.current_index = 0
            self.highlight_current_node()

    @property
    def total_cards(self) -> int:
        return len(self.cards)

    @property
    def current_card(self) -> Optional[SpeechCard]:
        return self.cards[self.current_index] if self.cards else None

    @property
    def position(self) -> str:
        if not self.cards:
            return "No cards"
        return f"Card {self.current_index + 1} of {len(self.cards)}"

    @property
    def can_go_next(self) -> bool:
        return self.current_index < len(self.cards) - 1

    @property
    def can_go_previous(self) -> bool:
        return self.current_index > 0

    @property
    def can_go_next_chapter(self) -> bool:
        return bool(self.cards) and self.navigator.can_go_next_chapter(self.current_index)

    @property
    def can_go_previous_chapter(self) -> bool:
        return bool(self.cards) and self.navigator.can_go_previous_chapter(self.current_index)

    def go_to(self, index: int) -> SpeechCard:
        """Jump to the card at ``index``.

        Raises:
            IndexError: If ``index`` is out of range
        """
        if not 0 <= index < len(self.cards):
            raise IndexError(f"Card index {index} out of range for {len(self.cards)} cards")

        self.current_index = index
        self.highlight_current_node()
        return self.cards[index]

    def next_card(self) -> None:
        if self.can_go_next:
            self.go_to(self.current_index + 1)

    def previous_card(self) -> None:
        if self.can_go_previous:
            self.go_to(self.current_index - 1)

    def next_chapter(self) -> None:
        if not self.cards:
            return
        target = self.navigator.next_chapter_index(self.current_index)
        if target is not None:
            self.go_to(target)

    def previous_chapter(self) -> None:
        if not self.cards:
            return
        target = self.navigator.previous_chapter_index(self.current_index)
        if target != self.current_index:
            self.go_to(target)

    def navigate_to_node(self, node: OutlineNode) -> None:
        """Show the card for ``node``; no-op when nothing matches."""
        index = find_card_for_node(self.cards, node)
        if index is not None:
            self.go_to(index)

    # Outline flags

    def highlight_current_node(self) -> None:
        """Highlight the node of the current card and expand its ancestors."""
        for node in walk_all(self.nodes):
            node.highlighted = False

        card = self.current_card
        if card is None:
            return

        target = card.path()
        for node in walk_all(self.nodes):
            if node.breadcrumb() == target:
                node.highlighted = True
                ancestor = node.parent
                while ancestor is not None:
                    ancestor.expanded = True
                    ancestor = ancestor.parent
                return

    def expand_all(self) -> None:
        for node in walk_all(self.nodes):
            node.expanded = True

    def collapse_all(self) -> None:
        for node in walk_all(self.nodes):
            node.expanded = False
