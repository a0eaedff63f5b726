# Descendant selector implementation for minihtml
# Supports chains of tag/#id/.class compounds separated by whitespace

from __future__ import annotations

import re
import weakref
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Element


class SelectorError(ValueError):
    """Raised when a selector string is invalid."""


# tag? ('#' id)? ('.' class)*, matched as a prefix; trailing characters are ignored
_COMPOUND_PATTERN = re.compile(r"(?P<tag>[\w-]*)(?:#(?P<id>[\w-]+))?(?P<classes>(?:\.[\w-]+)*)")


class Selector:
    """One compound step of a descendant chain (e.g. ``div#main.big``)."""

    __slots__ = ("__weakref__", "_previous_ref", "classes", "id", "next", "tag")

    tag: str | None
    id: str | None
    classes: frozenset[str]
    next: Selector | None
    _previous_ref: weakref.ref[Selector] | None

    def __init__(
        self,
        tag: str | None = None,
        selector_id: str | None = None,
        classes: Iterable[str] = (),
    ) -> None:
        self.tag = tag.lower() if tag else None
        self.id = selector_id or None
        self.classes = frozenset(c for c in classes if c)
        self.next = None
        self._previous_ref = None

    @property
    def previous(self) -> Selector | None:
        if self._previous_ref is None:
            return None
        return self._previous_ref()

    def _link(self, following: Selector) -> None:
        self.next = following
        following._previous_ref = weakref.ref(self)

    def matches(self, node: Element) -> bool:
        """Check this step's own constraints against a single element."""
        if self.tag is not None and node.name != self.tag:
            return False
        if self.id is not None and node.attributes.get("id") != self.id:
            return False
        return self.classes.issubset(node.classes)

    def __iter__(self) -> Iterator[Selector]:
        step: Selector | None = self
        while step is not None:
            yield step
            step = step.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return " ".join(step._compound_text() for step in self)

    def _compound_text(self) -> str:
        parts = [self.tag or ""]
        if self.id:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in sorted(self.classes))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Selector({str(self)!r})"


def _parse_compound(text: str) -> Selector:
    match = _COMPOUND_PATTERN.match(text)
    # The pattern can match the empty string, so match is never None
    assert match is not None
    classes = match.group("classes").split(".")
    return Selector(match.group("tag"), match.group("id"), classes)


def parse_selector(selector_string: str) -> Selector:
    """Parse a selector string into a chain and return its first (outermost) step."""
    if not selector_string or not selector_string.strip():
        raise SelectorError("Empty selector")

    first: Selector | None = None
    current: Selector | None = None
    for part in selector_string.split():
        step = _parse_compound(part)
        if current is None:
            first = step
        else:
            current._link(step)
        current = step

    assert first is not None
    return first


class SelectorMatcher:
    """Matches selector chains against element trees."""

    __slots__ = ()

    def select(self, root: Element, selector: Selector) -> set[Element]:
        """Run a chain against a tree.

        A node matching a non-final step hands every one of its descendants to
        the next step and is not searched again for the same step. A node
        matching the final step is recorded and not searched further.
        """
        results: set[Element] = set()
        seen: set[tuple[int, int]] = set()
        stack: list[tuple[Element, Selector]] = [(root, selector)]

        while stack:
            node, step = stack.pop()
            key = (id(node), id(step))
            if key in seen:
                continue
            seen.add(key)

            if step.matches(node):
                following = step.next
                if following is None:
                    results.add(node)
                else:
                    stack.extend((descendant, following) for descendant in node.descendants())
                continue

            stack.extend((child, step) for child in node.children)

        return results

    def matches(self, node: Element, selector: Selector) -> bool:
        """Check whether node matches the last step, with earlier steps satisfied by its ancestors in order."""
        steps = list(selector)
        if not steps[-1].matches(node):
            return False

        current = node
        for step in reversed(steps[:-1]):
            ancestor = current.parent
            while ancestor is not None and not step.matches(ancestor):
                ancestor = ancestor.parent
            if ancestor is None:
                return False
            current = ancestor
        return True


# Global matcher instance
_matcher: SelectorMatcher = SelectorMatcher()


def _compile(selector: str | Selector) -> Selector:
    if isinstance(selector, Selector):
        return selector
    return parse_selector(selector)


def query(root: Element | None, selector: str | Selector) -> set[Element]:
    """
    Query the tree starting from root (root itself included), returning all matching elements.

    Args:
        root: The root element, or None for an empty document
        selector: A selector string or an already parsed chain

    Returns:
        A set of matching elements, unordered and without duplicates
    """
    chain = _compile(selector)
    if root is None:
        return set()
    return _matcher.select(root, chain)


def matches(node: Element, selector: str | Selector) -> bool:
    """
    Check if a node matches a selector.

    Args:
        node: The element to check
        selector: A selector string or an already parsed chain

    Returns:
        True if the node matches, False otherwise
    """
    return _matcher.matches(node, _compile(selector))
