"""Configuration models for speechcards."""

from pydantic import BaseModel, Field, field_validator


class EditorConfig(BaseModel):
    """Configuration for structural editing."""

    new_item_title: str = Field(
        default="New item",
        description="Title given to nodes inserted without an explicit title"
    )

    @field_validator('new_item_title')
    @classmethod
    def validate_new_item_title(cls, v: str) -> str:
        """Reject titles that the parser would drop on the next round-trip."""
        if not v.strip():
            raise ValueError("new_item_title must not be blank")
        return v

    model_config = {"frozen": True}


class OutlineConfig(BaseModel):
    """Configuration for outline text output."""

    indent_width: int = Field(
        default=3,
        ge=1,
        le=16,
        description="Spaces per depth level when serializing a tree to text"
    )

    model_config = {"frozen": True}


class CardsConfig(BaseModel):
    """Configuration for card generation."""

    max_structural_depth: int = Field(
        default=3,
        ge=1,
        description="First outline depth that collapses into bullets"
    )

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for speechcards."""

    editor: EditorConfig = Field(default_factory=EditorConfig, description="Editing settings")
    outline: OutlineConfig = Field(default_factory=OutlineConfig, description="Text output settings")
    cards: CardsConfig = Field(default_factory=CardsConfig, description="Card generation settings")

    model_config = {"frozen": True}
