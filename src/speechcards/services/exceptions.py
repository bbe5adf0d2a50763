"""Custom exceptions for speechcards."""

from pathlib import Path
from typing import Union


class ForeignNodeError(ValueError):
    """Raised when an edit targets a node that is not part of the edited tree.

    This is a caller bug, not a user-facing failure. It is always raised
    before the tree is touched.

    Attributes:
        title: Title of the offending node
    """

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Node {title!r} does not belong to this outline")


class OutlineFileError(Exception):
    """Raised when a stored outline cannot be read or decoded.

    Attributes:
        path: Path of the outline file
        message: Human-readable error message
    """

    def __init__(self, path: Union[str, Path], message: str = "Could not read outline file"):
        self.path = str(path)
        self.message = message
        super().__init__(f"{message}: {self.path}")
