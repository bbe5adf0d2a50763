"""Chapter detection and chapter-wise navigation over a card list.

A chapter is a run of consecutive cards that share the same breadcrumb entry
at the chapter level. The level is the shallowest breadcrumb depth at which
the cards disagree; when they never disagree, each card's topic is used.
"""

from functools import cached_property
from typing import Iterable, Optional

from speechcards.models.card import SpeechCard


class ChapterNavigator:
    """
    Chapter lookups for one card list.

    The chapter level is computed on first use and cached for the lifetime of
    the navigator. A regenerated card list needs a new navigator.

    Example:
        >>> navigator = ChapterNavigator(cards)
        >>> navigator.next_chapter_index(0)
        2
    """

    def __init__(self, cards: Iterable[SpeechCard]):
        self.cards: tuple[SpeechCard, ...] = tuple(cards)

    def __len__(self) -> int:
        return len(self.cards)

    @cached_property
    def chapter_level(self) -> int:
        """Breadcrumb depth used as the chapter key."""
        max_depth = max((len(card.breadcrumb) for card in self.cards), default=0)

        for level in range(max_depth):
            values = {card.breadcrumb[level] for card in self.cards if len(card.breadcrumb) > level}
            if len(values) > 1:
                return level

        return max_depth

    def chapter_key(self, index: int) -> str:
        """Chapter key of the card at ``index``.

        Raises:
            IndexError: If ``index`` is out of range
        """
        if not 0 <= index < len(self.cards):
            raise IndexError(f"Card index {index} out of range for {len(self.cards)} cards")

        card = self.cards[index]
        if self.chapter_level < len(card.breadcrumb):
            return card.breadcrumb[self.chapter_level]
        return card.topic

    def chapter_start(self, index: int) -> int:
        """Index of the first card of the chapter containing ``index``."""
        key = self.chapter_key(index)
        start = index
        while start > 0 and self.chapter_key(start - 1) == key:
            start -= 1
        return start

    def next_chapter_index(self, current: int) -> Optional[int]:
        """First card after ``current`` in a different chapter, or None."""
        key = self.chapter_key(current)
        for i in range(current + 1, len(self.cards)):
            if self.chapter_key(i) != key:
                return i
        return None

    def previous_chapter_index(self, current: int) -> int:
        """Where a "previous chapter" jump from ``current`` lands.

        Inside a chapter this is the chapter's first card; on a chapter's
        first card it is the first card of the previous chapter. On the very
        first card it is ``current`` itself.
        """
        start = self.chapter_start(current)
        if current > start:
            return start
        if start > 0:
            return self.chapter_start(start - 1)
        return current

    def can_go_next_chapter(self, current: int) -> bool:
        return self.next_chapter_index(current) is not None

    def can_go_previous_chapter(self, current: int) -> bool:
        return current > 0

    def chapters(self) -> list[tuple[str, list[int]]]:
        """Group card indices into consecutive chapters.

        Returns:
            (chapter key, card indices) pairs in card order
        """
        groups: list[tuple[str, list[int]]] = []
        for i in range(len(self.cards)):
            key = self.chapter_key(i)
            if groups and groups[-1][0] == key:
                groups[-1][1].append(i)
            else:
                groups.append((key, [i]))
        return groups
