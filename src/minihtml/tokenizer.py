"""Regex-based tag scanner.

This is a purely lexical pass: it does not validate nesting or attribute
syntax. Known limitations, kept on purpose because changing them changes
the resulting trees:

- attribute values containing ``>`` end the tag early
- ``script``/``style`` contents are scanned for tags like any other text
- CDATA sections and doctypes are not recognized (a doctype before the first
  tag is discarded as text with no open element)
- text after the last tag is dropped
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from .metadata import HTML_METADATA, TagMetadata
from .tokens import CharacterTokens, Tag

_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_PATTERN = re.compile(r"<(/)?([a-zA-Z0-9]+)([^>]*)>")


def strip_comments(html: str) -> str:
    """Remove every ``<!-- ... -->`` span, including multi-line ones."""
    return _COMMENT_PATTERN.sub("", html)


class Tokenizer:
    __slots__ = ("metadata",)

    metadata: TagMetadata

    def __init__(self, metadata: TagMetadata | None = None) -> None:
        self.metadata = metadata if metadata is not None else HTML_METADATA

    def tokenize(self, html: str) -> Iterator[Tag | CharacterTokens]:
        """Yield text runs and tags in document order."""
        html = strip_comments(html)
        void_tags = self.metadata.void_tags
        last_index = 0

        for match in _TAG_PATTERN.finditer(html):
            text = html[last_index : match.start()].strip()
            if text:
                yield CharacterTokens(text)
            last_index = match.end()

            name = match.group(2).lower()
            attr_text = match.group(3)
            self_closing = attr_text.endswith("/") or name in void_tags
            kind = Tag.END if match.group(1) else Tag.START
            yield Tag(kind, name, attr_text, self_closing)
