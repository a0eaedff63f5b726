from __future__ import annotations

import logging

from .attributes import parse_attributes, parse_classes
from .metadata import HTML_METADATA, TagMetadata
from .node import Element
from .tokenizer import Tokenizer
from .tokens import CharacterTokens, Tag

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds an Element tree from tokenizer output using a stack of open elements.

    Element ids come from a counter owned by the builder, so separate
    builders never share or skip ids.
    """

    __slots__ = ("metadata", "next_id", "open_elements", "root", "tokenizer")

    metadata: TagMetadata
    next_id: int
    open_elements: list[Element]
    root: Element | None
    tokenizer: Tokenizer

    def __init__(self, metadata: TagMetadata | None = None) -> None:
        self.metadata = metadata if metadata is not None else HTML_METADATA
        self.tokenizer = Tokenizer(self.metadata)
        self.next_id = 1
        self.open_elements = []
        self.root = None

    def reset(self) -> None:
        """Forget the current tree; the id counter keeps running."""
        self.open_elements = []
        self.root = None

    @property
    def current_node(self) -> Element | None:
        return self.open_elements[-1] if self.open_elements else None

    def _create_element(self, tag: Tag) -> Element:
        node = Element(
            self.next_id,
            tag.name,
            parse_attributes(tag.attr_text),
            parse_classes(tag.attr_text),
            tag.self_closing,
        )
        self.next_id += 1
        return node

    def process_tag(self, tag: Tag) -> None:
        if tag.kind == Tag.END:
            if not self.open_elements:
                logger.debug("Ignoring </%s> with no open element", tag.name)
                return
            popped = self.open_elements.pop()
            if popped.name != tag.name:
                logger.debug("</%s> closed <%s>", tag.name, popped.name)
            return

        node = self._create_element(tag)
        parent = self.current_node
        if parent is None:
            if self.root is None:
                self.root = node
            else:
                # A second top-level tree after the root closed is not attached anywhere
                logger.debug("Dropping <%s> opened after the root was closed", tag.name)
        else:
            parent._append_child(node)

        if not tag.self_closing:
            self.open_elements.append(node)

    def process_characters(self, data: str) -> None:
        node = self.current_node
        if node is None:
            return
        node._append_text(data)

    def process_token(self, token: Tag | CharacterTokens) -> None:
        if isinstance(token, Tag):
            self.process_tag(token)
        else:
            self.process_characters(token.data)

    def build(self, html: str) -> Element | None:
        """Parse markup and return the root element, or None when it has no tags."""
        self.reset()
        for token in self.tokenizer.tokenize(html):
            self.process_token(token)
        root = self.root
        self.reset()
        return root
