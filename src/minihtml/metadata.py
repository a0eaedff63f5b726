"""Tag metadata: the known-tag and void-tag name sets.

Both sets come from JSON files holding a flat array of tag names. The files
bundled with the package live in ``minihtml/data``. Loading never fails: a
missing or unreadable file gives an empty set and a logged warning.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
TAGS_FILE = _DATA_DIR / "html_tags.json"
VOID_TAGS_FILE = _DATA_DIR / "html_void_tags.json"


class TagMetadata:
    """Immutable pair of lowercase tag-name sets."""

    __slots__ = ("tags", "void_tags")

    tags: frozenset[str]
    void_tags: frozenset[str]

    def __init__(self, tags: Iterable[str] = (), void_tags: Iterable[str] = ()) -> None:
        object.__setattr__(self, "tags", frozenset(name.lower() for name in tags))
        object.__setattr__(self, "void_tags", frozenset(name.lower() for name in void_tags))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"TagMetadata(tags={len(self.tags)}, void_tags={len(self.void_tags)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagMetadata):
            return NotImplemented
        return self.tags == other.tags and self.void_tags == other.void_tags

    def __hash__(self) -> int:
        return hash((self.tags, self.void_tags))

    def is_void(self, name: str) -> bool:
        return name.lower() in self.void_tags

    def is_known(self, name: str) -> bool:
        return name.lower() in self.tags


def _read_name_list(path: Path) -> list[str]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Could not read tag metadata from %s: %s", path, e)
        return []

    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning("Invalid JSON in tag metadata file %s: %s", path, e)
        return []

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        logger.warning("Tag metadata file %s is not a JSON array of strings", path)
        return []

    return data


def load_tag_metadata(
    tags_path: str | Path | None = None,
    void_tags_path: str | Path | None = None,
) -> TagMetadata:
    """Load tag metadata from JSON files.

    Args:
        tags_path: JSON array of known tag names (defaults to the bundled file)
        void_tags_path: JSON array of void tag names (defaults to the bundled file)

    Returns:
        A TagMetadata value. Files that cannot be loaded contribute an empty set.
    """
    tags = _read_name_list(Path(tags_path) if tags_path is not None else TAGS_FILE)
    void_tags = _read_name_list(Path(void_tags_path) if void_tags_path is not None else VOID_TAGS_FILE)
    metadata = TagMetadata(tags, void_tags)
    logger.debug("Loaded %r", metadata)
    return metadata


# Built once at import and shared; pass another TagMetadata to override.
HTML_METADATA: TagMetadata = load_tag_metadata()

EMPTY_METADATA: TagMetadata = TagMetadata()
