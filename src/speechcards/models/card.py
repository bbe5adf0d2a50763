"""Speech card models."""

from pydantic import BaseModel, Field


class BulletItem(BaseModel):
    """One line of a card's collapsed subtree."""

    text: str = Field(..., description="Bullet text, taken verbatim from the node title")

    indent_level: int = Field(
        default=0,
        ge=0,
        description="Nesting below the card topic (direct children = 0)"
    )

    model_config = {"frozen": True}

    @property
    def indent(self) -> int:
        """Horizontal offset in points for renderers."""
        return self.indent_level * 12


class SpeechCard(BaseModel):
    """A single presentation card.

    Cards are generated fresh from the outline and never edited afterwards;
    numbering produces new copies.
    """

    breadcrumb: tuple[str, ...] = Field(
        default=(),
        description="Ancestor titles from the root down to the topic's parent"
    )

    topic: str = Field(..., description="Title of the node this card is about")

    ordinal: int = Field(default=0, ge=0, description="1-based position in the card list")

    total: int = Field(default=0, ge=0, description="Number of cards in the list")

    bullets: tuple[BulletItem, ...] = Field(
        default=(),
        description="Flattened descendants of the topic node in document order"
    )

    model_config = {"frozen": True}

    @property
    def has_bullets(self) -> bool:
        return len(self.bullets) > 0

    @property
    def full_path(self) -> str:
        """Breadcrumb and topic joined with " > "."""
        return " > ".join((*self.breadcrumb, self.topic))

    def path(self) -> list[str]:
        """Breadcrumb plus topic as a list of titles."""
        return [*self.breadcrumb, self.topic]
