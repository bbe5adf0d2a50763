"""Outline tree model.

Nodes own their children top-down. The ``parent`` attribute is a back-link
used only for traversal (depth, breadcrumbs) and is never persisted.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


BULLET_DEPTH = 3


@dataclass(eq=False)
class OutlineNode:
    """Single outline entry with ordered children.

    Nodes compare by identity: two siblings with the same title are still
    distinct entries in the document.

    Attributes:
        title: Entry text (may be empty only while being edited)
        children: Child nodes in document order
        parent: Back-link to the owning node (None for roots)
        highlighted: Presentation flag, carried along when the node moves
        expanded: Presentation flag, carried along when the node moves
    """

    title: str = ""
    children: list["OutlineNode"] = field(default_factory=list)
    parent: Optional["OutlineNode"] = field(default=None, repr=False)
    highlighted: bool = field(default=False, repr=False)
    expanded: bool = field(default=True, repr=False)

    def __post_init__(self):
        """Link any children passed to the constructor back to this node."""
        for child in self.children:
            child.parent = self

    @property
    def depth(self) -> int:
        """Distance from the root (root = 0)."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_bullet(self) -> bool:
        return self.depth >= BULLET_DEPTH

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def breadcrumb(self) -> list[str]:
        """Titles from the root down to and including this node.

        Examples:
            >>> root = OutlineNode("Speech")
            >>> intro = root.add_child("Intro")
            >>> intro.breadcrumb()
            ['Speech', 'Intro']
        """
        path = []
        current: Optional[OutlineNode] = self
        while current is not None:
            path.append(current.title)
            current = current.parent
        path.reverse()
        return path

    def add_child(self, title: str, position: Optional[int] = None) -> "OutlineNode":
        """Create a child node and link it in.

        Args:
            title: Title of the new child
            position: Optional index to insert at (None = append to end)

        Returns:
            The created child node
        """
        child = OutlineNode(title=title)
        self.attach(child, position)
        return child

    def attach(self, child: "OutlineNode", position: Optional[int] = None) -> None:
        """Link an existing detached node in as a child."""
        child.parent = self
        if position is None:
            self.children.append(child)
        else:
            self.children.insert(position, child)

    def walk(self) -> Iterator["OutlineNode"]:
        """Yield this node and every descendant in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


def walk_all(roots: Iterable[OutlineNode]) -> Iterator[OutlineNode]:
    """Yield every node of a forest in document order."""
    for root in roots:
        yield from root.walk()


def count_nodes(roots: Iterable[OutlineNode]) -> int:
    return sum(1 for _ in walk_all(roots))


def count_leaves(roots: Iterable[OutlineNode]) -> int:
    return sum(1 for node in walk_all(roots) if node.is_leaf)


def index_of(nodes: list[OutlineNode], node: OutlineNode) -> int:
    """Position of ``node`` in ``nodes`` by identity.

    Raises:
        ValueError: If ``node`` is not in the list
    """
    for i, candidate in enumerate(nodes):
        if candidate is node:
            return i
    raise ValueError(f"{node.title!r} is not in the sibling list")


def relink_parents(nodes: Iterable[OutlineNode], parent: Optional[OutlineNode] = None) -> None:
    """Restore ``parent`` back-links from ``children`` membership.

    Used after loading a tree that was stored without parent links.
    """
    for node in nodes:
        node.parent = parent
        relink_parents(node.children, node)
