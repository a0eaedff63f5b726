"""Attribute and class extraction from the raw text of a start tag."""

from __future__ import annotations

import re

# word, optionally followed by ="value". Hyphenated names split into separate keys
# (data-id="5" gives data="" and id="5") and a class="..." span is found
# anywhere, including inside data-class; unquoted and single-quoted values
# are not recognized.
_ATTRIBUTE_PATTERN = re.compile(r'(\w+)(="([^"]*)")?')
_CLASS_PATTERN = re.compile(r'class="([^"]+)"')


def parse_attributes(attr_text: str) -> dict[str, str]:
    """Parse ``key="value"`` pairs; bare keys map to "" and the last duplicate wins."""
    attrs: dict[str, str] = {}
    for match in _ATTRIBUTE_PATTERN.finditer(attr_text):
        value = match.group(3)
        attrs[match.group(1)] = value if value is not None else ""
    return attrs


def parse_classes(attr_text: str) -> list[str]:
    """Return the tokens of the first class="..." span, in order."""
    match = _CLASS_PATTERN.search(attr_text)
    if not match:
        return []
    return match.group(1).split()
