"""Outline document storage.

Outlines are stored as camelCase JSON in which every node carries only its
``title`` and ``children``. Parent links are rebuilt from ``children`` after
loading.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from speechcards.outline.document import Outline, utcnow
from speechcards.outline.node import OutlineNode, relink_parents
from speechcards.outline.parser import parse_to_outline
from speechcards.services.exceptions import OutlineFileError
from speechcards.utils.logging import get_logger


logger = get_logger(__name__)

TEXT_SUFFIXES = {".md", ".txt"}


class NodeRecord(BaseModel):
    """Stored form of an outline node."""

    title: str = ""
    children: list["NodeRecord"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: OutlineNode) -> "NodeRecord":
        return cls(title=node.title, children=[cls.from_node(child) for child in node.children])

    def to_node(self) -> OutlineNode:
        """Build a node tree; parent links are left for relink_parents()."""
        node = OutlineNode(title=self.title)
        node.children = [child.to_node() for child in self.children]
        return node


class OutlineRecord(BaseModel):
    """Stored form of an outline document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = "Untitled Outline"
    file_path: Optional[str] = None
    root_nodes: list[NodeRecord] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    modified_at: datetime = Field(default_factory=utcnow)


def outline_to_dict(outline: Outline) -> dict[str, Any]:
    """Convert an outline to a JSON-compatible camelCase dict."""
    record = OutlineRecord(
        name=outline.name,
        file_path=str(outline.file_path) if outline.file_path else None,
        root_nodes=[NodeRecord.from_node(root) for root in outline.roots],
        created_at=outline.created_at,
        modified_at=outline.modified_at,
    )
    return record.model_dump(mode="json", by_alias=True)


def outline_from_dict(data: dict[str, Any]) -> Outline:
    """Rebuild an outline from its stored dict, restoring parent links.

    Raises:
        pydantic.ValidationError: If the data does not match the schema
    """
    record = OutlineRecord.model_validate(data)
    roots = [node.to_node() for node in record.root_nodes]
    relink_parents(roots)
    return Outline(
        name=record.name,
        roots=roots,
        file_path=Path(record.file_path) if record.file_path else None,
        created_at=record.created_at,
        modified_at=record.modified_at,
    )


class OutlineStore:
    """Reads and writes outline JSON files."""

    def save(self, outline: Outline, path: Path) -> None:
        """
        Write ``outline`` to ``path`` as indented JSON.

        Updates the outline's modified_at and file_path.

        Args:
            outline: Outline to save
            path: Destination file
        """
        path = Path(path)
        outline.touch()
        outline.file_path = path
        path.write_text(json.dumps(outline_to_dict(outline), indent=2), encoding="utf-8")
        logger.info("outline_saved", path=str(path), roots=len(outline.roots))

    def load(self, path: Path) -> Outline:
        """
        Read an outline JSON file.

        Args:
            path: Source file

        Returns:
            Outline with parent links restored

        Raises:
            FileNotFoundError: If the file does not exist
            OutlineFileError: If the file is not a valid outline
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")

        try:
            outline = outline_from_dict(json.loads(text))
        except json.JSONDecodeError as e:
            logger.error("outline_json_invalid", path=str(path), error=str(e))
            raise OutlineFileError(path, f"Invalid JSON ({e.msg})") from e
        except ValidationError as e:
            logger.error("outline_schema_invalid", path=str(path), error=str(e))
            raise OutlineFileError(path, "Not an outline file") from e

        outline.file_path = path
        logger.info("outline_loaded", path=str(path), roots=len(outline.roots))
        return outline


def open_outline(path: Path, store: Optional[OutlineStore] = None) -> Outline:
    """Open an outline from a text import (.md/.txt) or a stored JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        OutlineFileError: If a JSON file is not a valid outline
    """
    path = Path(path)
    if path.suffix.lower() in TEXT_SUFFIXES:
        outline = parse_to_outline(path.read_text(encoding="utf-8"), name=path.stem)
        outline.file_path = path
        logger.info("outline_imported", path=str(path), roots=len(outline.roots))
        return outline

    return (store or OutlineStore()).load(path)
