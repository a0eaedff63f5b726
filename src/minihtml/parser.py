"""Minimal minihtml parser entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .encoding import decode_html
from .fetch import DEFAULT_TIMEOUT, fetch_markup
from .metadata import HTML_METADATA, TagMetadata
from .selector import query
from .treebuilder import TreeBuilder

if TYPE_CHECKING:
    from .node import Element
    from .selector import Selector


class MiniHTML:
    __slots__ = ("encoding", "metadata", "root", "tree_builder")

    encoding: str | None
    metadata: TagMetadata
    root: Element | None
    tree_builder: TreeBuilder

    def __init__(
        self,
        html: str | bytes | bytearray | memoryview | None,
        *,
        metadata: TagMetadata | None = None,
        encoding: str | None = None,
        tree_builder: TreeBuilder | None = None,
    ) -> None:
        self.encoding = None

        html_str: str
        if isinstance(html, (bytes, bytearray, memoryview)):
            html_str, chosen = decode_html(bytes(html), transport_encoding=encoding)
            self.encoding = chosen
        elif html is not None:
            html_str = str(html)
        else:
            html_str = ""

        if tree_builder is not None:
            self.tree_builder = tree_builder
            self.metadata = tree_builder.metadata
        else:
            self.metadata = metadata if metadata is not None else HTML_METADATA
            self.tree_builder = TreeBuilder(self.metadata)

        self.root = self.tree_builder.build(html_str)

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        metadata: TagMetadata | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> MiniHTML:
        """Fetch a page and parse it. Raises FetchError if the fetch fails."""
        return cls(fetch_markup(url, timeout=timeout), metadata=metadata)

    def query(self, selector: str | Selector) -> set[Element]:
        """Query the document. Returns an empty set when there is no root element."""
        return query(self.root, selector)

    def to_html(self, pretty: bool = True, indent_size: int = 2) -> str:
        if self.root is None:
            return ""
        return self.root.to_html(indent=0, indent_size=indent_size, pretty=pretty)

    def to_text(self, separator: str = " ") -> str:
        if self.root is None:
            return ""
        return self.root.to_text(separator=separator)


def parse(html: str, metadata: TagMetadata | None = None) -> Element | None:
    """Parse markup and return the root element, or None if it contains no tags."""
    return TreeBuilder(metadata).build(html)
