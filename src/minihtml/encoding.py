"""Decoding of markup bytes.

A byte order mark wins, then a usable transport label (for example the
charset of an HTTP Content-Type header), then UTF-8. Invalid byte sequences
are replaced rather than raising.
"""

from __future__ import annotations

import codecs

_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16le"),
    (codecs.BOM_UTF16_BE, "utf-16be"),
)

# HTML treats these as windows-1252.
_LATIN1_LABELS = {"iso-8859-1", "iso8859-1", "latin1", "latin-1", "l1", "cp819", "ibm819", "us-ascii", "ascii"}


def normalize_encoding_label(label: str | bytes | None) -> str | None:
    """Map an encoding label to a Python codec name, or None if it is unusable."""
    if not label:
        return None

    if isinstance(label, bytes):
        label = label.decode("ascii", "ignore")

    s = label.strip().strip("\"'").lower()
    if not s:
        return None

    # Security: never allow utf-7.
    if s in {"utf-7", "utf7", "x-utf-7"}:
        return None

    if s in _LATIN1_LABELS:
        return "windows-1252"

    try:
        name = codecs.lookup(s).name
    except LookupError:
        return None

    if name == "utf-7":
        return None
    return {"utf-8": "utf-8", "cp1252": "windows-1252"}.get(name, name)


def sniff_bom(data: bytes) -> tuple[str | None, int]:
    for bom, name in _BOMS:
        if data.startswith(bom):
            return name, len(bom)
    return None, 0


def decode_html(data: bytes, transport_encoding: str | None = None) -> tuple[str, str]:
    """Decode markup bytes.

    Returns (text, encoding_name).
    """
    enc, bom_len = sniff_bom(data)
    if enc is None:
        enc = normalize_encoding_label(transport_encoding) or "utf-8"

    payload = data[bom_len:] if bom_len else data
    return payload.decode(enc, "replace"), enc
