"""Structural editing of an outline tree.

The editor owns the root list and the current selection. Every operation
keeps ``parent``/``children`` in agreement, and returns the new selection.
Operations whose precondition does not hold (promote a root, move the first
sibling up, remove with nothing selected) leave the tree alone and return
the unchanged selection, so callers never need to check first.
"""

from typing import Iterable, Optional

from speechcards.models.config import Config
from speechcards.outline.node import OutlineNode, count_leaves, count_nodes, index_of
from speechcards.outline.parser import format_status, parse
from speechcards.outline.serializer import DEFAULT_INDENT_WIDTH, to_text
from speechcards.services.exceptions import ForeignNodeError


DEFAULT_NEW_ITEM_TITLE = "New item"


class TreeEditor:
    """
    Single-writer editor over a list of root nodes.

    Example:
        >>> editor = TreeEditor()
        >>> speech = editor.add_item("Speech")
        >>> intro = editor.add_child("Intro")
        >>> editor.to_text()
        'Speech\\n   Intro'
    """

    def __init__(
        self,
        nodes: Optional[Iterable[OutlineNode]] = None,
        new_item_title: str = DEFAULT_NEW_ITEM_TITLE,
        indent_width: int = DEFAULT_INDENT_WIDTH,
    ):
        """
        Initialize the editor.

        Args:
            nodes: Root nodes to edit (the list is copied, the nodes are not)
            new_item_title: Title given to inserted nodes when none is passed
            indent_width: Spaces per level used by to_text()

        Raises:
            ValueError: If a passed node is still attached to a parent
        """
        self.nodes: list[OutlineNode] = list(nodes or [])
        for node in self.nodes:
            if node.parent is not None:
                raise ValueError(f"Root {node.title!r} is still attached to {node.parent.title!r}")
        self.selected: Optional[OutlineNode] = None
        self.new_item_title = new_item_title
        self.indent_width = indent_width

    @classmethod
    def from_config(cls, config: Config, nodes: Optional[Iterable[OutlineNode]] = None) -> "TreeEditor":
        """Create an editor using the editor and outline settings of ``config``."""
        return cls(
            nodes,
            new_item_title=config.editor.new_item_title,
            indent_width=config.outline.indent_width,
        )

    # Selection

    def select(self, node: Optional[OutlineNode]) -> Optional[OutlineNode]:
        """Select ``node`` (or clear the selection with None).

        Raises:
            ForeignNodeError: If the node is not part of this tree
        """
        if node is not None:
            self._require_member(node)
        self.selected = node
        return node

    def _require_member(self, node: OutlineNode) -> None:
        current = node
        while current.parent is not None:
            if not any(child is current for child in current.parent.children):
                raise ForeignNodeError(node.title)
            current = current.parent
        if not any(root is current for root in self.nodes):
            raise ForeignNodeError(node.title)

    def _current(self) -> Optional[OutlineNode]:
        if self.selected is not None:
            self._require_member(self.selected)
        return self.selected

    def _siblings(self, node: OutlineNode) -> list[OutlineNode]:
        return node.parent.children if node.parent is not None else self.nodes

    # Insertion

    def add_item(self, title: Optional[str] = None) -> OutlineNode:
        """Insert a new node right after the selection at the same level.

        With nothing selected the node is appended as a new root.
        """
        selected = self._current()
        node = OutlineNode(title=self.new_item_title if title is None else title)

        if selected is None:
            self.nodes.append(node)
        else:
            siblings = self._siblings(selected)
            position = index_of(siblings, selected) + 1
            node.parent = selected.parent
            siblings.insert(position, node)

        self.selected = node
        return node

    def add_child(self, title: Optional[str] = None) -> OutlineNode:
        """Append a new node as the selection's last child.

        With nothing selected this behaves like add_item().
        """
        selected = self._current()
        if selected is None:
            return self.add_item(title)

        node = selected.add_child(self.new_item_title if title is None else title)
        self.selected = node
        return node

    # Removal

    def remove(self) -> Optional[OutlineNode]:
        """Remove the selection together with its whole subtree.

        The new selection is the previous sibling, else the next sibling,
        else the parent, else nothing.
        """
        node = self._current()
        if node is None:
            return None

        siblings = self._siblings(node)
        position = index_of(siblings, node)

        if position > 0:
            next_selection = siblings[position - 1]
        elif len(siblings) > 1:
            next_selection = siblings[1]
        else:
            next_selection = node.parent

        del siblings[position]
        node.parent = None

        self.selected = next_selection
        return next_selection

    # Reparenting

    def promote(self) -> Optional[OutlineNode]:
        """Move the selection up one level, right after its former parent.

        Siblings that followed the selection become its children, appended
        after any children it already had.
        """
        node = self._current()
        if node is None or node.parent is None:
            return node

        parent = node.parent
        outer = self._siblings(parent)
        parent_position = index_of(outer, parent)
        position = index_of(parent.children, node)

        trailing = parent.children[position + 1:]
        del parent.children[position:]

        for sibling in trailing:
            node.attach(sibling)

        node.parent = parent.parent
        outer.insert(parent_position + 1, node)

        self.selected = node
        return node

    def demote(self) -> Optional[OutlineNode]:
        """Make the selection the last child of its previous sibling."""
        node = self._current()
        if node is None:
            return node

        siblings = self._siblings(node)
        position = index_of(siblings, node)
        if position == 0:
            return node

        new_parent = siblings[position - 1]
        del siblings[position]
        new_parent.attach(node)

        self.selected = node
        return node

    # Reordering

    def move_up(self) -> Optional[OutlineNode]:
        """Swap the selection with its previous sibling."""
        return self._swap(-1)

    def move_down(self) -> Optional[OutlineNode]:
        """Swap the selection with its next sibling."""
        return self._swap(1)

    def _swap(self, offset: int) -> Optional[OutlineNode]:
        node = self._current()
        if node is None:
            return node

        siblings = self._siblings(node)
        position = index_of(siblings, node)
        target = position + offset
        if not 0 <= target < len(siblings):
            return node

        siblings[position], siblings[target] = siblings[target], siblings[position]
        return node

    def rename(self, title: str) -> Optional[OutlineNode]:
        """Change the selection's title."""
        node = self._current()
        if node is not None:
            node.title = title
        return node

    # Text round-trip

    def load_text(self, text: str) -> None:
        """Replace the tree with the parse of ``text`` and clear the selection."""
        self.nodes = parse(text).nodes
        self.selected = None

    def to_text(self) -> str:
        return to_text(self.nodes, self.indent_width)

    @property
    def total_nodes(self) -> int:
        return count_nodes(self.nodes)

    @property
    def leaf_count(self) -> int:
        return count_leaves(self.nodes)

    @property
    def status(self) -> str:
        return format_status(self.total_nodes, self.leaf_count)
