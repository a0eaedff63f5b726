from __future__ import annotations

import weakref
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .selector import query
from .serialize import format_start_tag, to_html, to_text

if TYPE_CHECKING:
    from .selector import Selector


class Element:
    """One parsed tag.

    Children are owned by their parent; ``parent`` is a weak reference, so keep
    the root (or the MiniHTML document) alive while walking upwards.
    """

    __slots__ = ("__weakref__", "_name", "_parent_ref", "attributes", "children", "classes", "id", "self_closing", "text")

    id: int
    _name: str
    attributes: dict[str, str]
    classes: list[str]
    text: str
    children: list[Element]
    self_closing: bool
    _parent_ref: weakref.ref[Element] | None

    def __init__(
        self,
        element_id: int,
        name: str,
        attributes: dict[str, str] | None = None,
        classes: list[str] | None = None,
        self_closing: bool = False,
    ) -> None:
        self.id = element_id
        self._name = name.lower()
        self.attributes = attributes if attributes is not None else {}
        self.classes = classes if classes is not None else []
        self.text = ""
        self.children = []
        self.self_closing = bool(self_closing)
        self._parent_ref = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Element | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def depth(self) -> int:
        """Number of ancestors; 0 for the root."""
        return sum(1 for _ in self.ancestors())

    def _append_child(self, node: Element) -> None:
        # Only the tree builder attaches nodes.
        self.children.append(node)
        node._parent_ref = weakref.ref(self)

    def _append_text(self, data: str) -> None:
        self.text = f"{self.text} {data}" if self.text else data

    def descendants(self) -> Iterator[Element]:
        """Yield every node below this one, breadth-first."""
        queue = deque(self.children)
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def ancestors(self) -> Iterator[Element]:
        """Yield the parent, grandparent, ... up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def iter(self) -> Iterator[Element]:
        """Yield this node and its descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def has_child_nodes(self) -> bool:
        return bool(self.children)

    def query(self, selector: str | Selector) -> set[Element]:
        """
        Query this subtree using a descendant selector.

        Args:
            selector: A selector string such as ``"div#main p span.item"``

        Returns:
            The set of matching elements

        Raises:
            SelectorError: If the selector string is empty
        """
        return query(self, selector)

    def to_html(self, indent: int = 0, indent_size: int = 2, pretty: bool = True) -> str:
        return to_html(self, indent, indent_size, pretty=pretty)

    def to_text(self, separator: str = " ") -> str:
        """Return this node's text followed by its descendants' text, in document order."""
        return to_text(self, separator=separator)

    def __str__(self) -> str:
        return format_start_tag(self.name, self.attributes)

    def __repr__(self) -> str:
        return f"<Element #{self.id} {self.name}>"
