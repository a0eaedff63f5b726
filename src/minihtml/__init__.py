from .fetch import FetchError, fetch_markup
from .metadata import HTML_METADATA, TagMetadata, load_tag_metadata
from .node import Element
from .parser import MiniHTML, parse
from .selector import Selector, SelectorError, matches, parse_selector, query
from .serialize import to_html, to_text
from .treebuilder import TreeBuilder

__all__ = [
    "HTML_METADATA",
    "Element",
    "FetchError",
    "MiniHTML",
    "Selector",
    "SelectorError",
    "TagMetadata",
    "TreeBuilder",
    "fetch_markup",
    "load_tag_metadata",
    "matches",
    "parse",
    "parse_selector",
    "query",
    "to_html",
    "to_text",
]
