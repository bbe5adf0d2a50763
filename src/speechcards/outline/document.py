"""Named outline document."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from speechcards.outline.node import OutlineNode


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Outline:
    """A named collection of root nodes.

    Attributes:
        name: Display name
        roots: Top-level nodes in document order
        file_path: Where the outline was last saved or loaded from
        created_at: Creation timestamp (UTC)
        modified_at: Last modification timestamp (UTC)
    """

    name: str = "Untitled Outline"
    roots: list[OutlineNode] = field(default_factory=list)
    file_path: Optional[Path] = None
    created_at: datetime = field(default_factory=utcnow)
    modified_at: datetime = field(default_factory=utcnow)

    def touch(self) -> None:
        self.modified_at = utcnow()
