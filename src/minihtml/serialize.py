"""Serialization utilities for minihtml elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Element


def _escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr_value(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def format_start_tag(name: str, attributes: dict[str, str] | None) -> str:
    """Short display form, e.g. ``<a href='x' id='y'>``."""
    if not attributes:
        return f"<{name}>"
    attrs = " ".join(f"{key}='{value}'" for key, value in attributes.items())
    return f"<{name} {attrs}>"


def serialize_start_tag(name: str, attributes: dict[str, str] | None) -> str:
    attributes = attributes or {}
    parts: list[str] = ["<", name]
    for key, value in attributes.items():
        if value == "":
            parts.extend([" ", key])
        else:
            parts.extend([" ", key, '="', _escape_attr_value(value), '"'])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def to_html(node: Element, indent: int = 0, indent_size: int = 2, pretty: bool = True) -> str:
    """Convert an element subtree back to markup.

    Text is emitted before the children because the tree does not record
    where text runs sat between child tags.
    """
    prefix = " " * (indent * indent_size) if pretty else ""
    start = serialize_start_tag(node.name, node.attributes)

    # Self-closing and void elements never hold children or text
    if node.self_closing:
        return f"{prefix}{start}"

    if not node.has_child_nodes():
        return f"{prefix}{start}{_escape_text(node.text)}{serialize_end_tag(node.name)}"

    if not pretty:
        inner = "".join(to_html(child, 0, indent_size, pretty=False) for child in node.children)
        return f"{start}{_escape_text(node.text)}{inner}{serialize_end_tag(node.name)}"

    lines = [f"{prefix}{start}"]
    if node.text:
        lines.append(f"{' ' * ((indent + 1) * indent_size)}{_escape_text(node.text)}")
    for child in node.children:
        lines.append(to_html(child, indent + 1, indent_size, pretty=True))
    lines.append(f"{prefix}{serialize_end_tag(node.name)}")
    return "\n".join(lines)


def to_text(node: Element, separator: str = " ") -> str:
    """Join the text of node and its descendants in document order."""
    parts = [element.text for element in node.iter() if element.text]
    return separator.join(parts)
