#!/usr/bin/env python3
"""Command-line interface for minihtml."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

from . import MiniHTML
from .fetch import FetchError
from .metadata import load_tag_metadata
from .selector import SelectorError

logger = logging.getLogger("minihtml")


def _get_version() -> str:
    try:
        return version("minihtml")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="minihtml",
        description="Parse HTML into an element tree and query it with descendant selectors.",
        epilog=(
            "Examples:\n"
            "  minihtml page.html --selector 'div p span.item'\n"
            "  curl -s https://example.com | minihtml - --selector 'div#main'\n"
            "  minihtml --url https://example.com --selector 'ul li' --format text\n"
            "\n"
            "If you don't have the 'minihtml' command available, use:\n"
            "  python -m minihtml ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="HTML file to parse, or '-' to read from stdin",
    )
    parser.add_argument(
        "--url",
        help="Fetch the HTML from this URL instead of reading a file",
    )
    parser.add_argument(
        "--selector",
        help="Descendant selector for choosing elements (defaults to the root element)",
    )
    parser.add_argument(
        "--format",
        choices=["summary", "html", "text"],
        default="summary",
        help="Output format (default: summary)",
    )
    parser.add_argument(
        "--tags",
        help="JSON array of known tag names (defaults to the bundled list)",
    )
    parser.add_argument(
        "--void-tags",
        help="JSON array of void tag names (defaults to the bundled list)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="Timeout in seconds for --url (default: 10)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"minihtml {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path and not args.url:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_html(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    return Path(path).read_text()


def _summary(node) -> str:
    ancestors = " > ".join(a.name for a in node.ancestors())
    return f"{node}  | text: {node.text!r}  | ancestors: {ancestors or '-'}"


def main(argv: list[str] | None = None) -> NoReturn | None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    metadata = load_tag_metadata(args.tags, args.void_tags)

    if args.url:
        try:
            doc = MiniHTML.from_url(args.url, metadata=metadata, timeout=args.timeout)
        except FetchError as e:
            print(str(e), file=sys.stderr)
            raise SystemExit(3) from e
    else:
        try:
            html = _read_html(args.path)
        except OSError as e:
            print(str(e), file=sys.stderr)
            raise SystemExit(1) from e
        doc = MiniHTML(html, metadata=metadata)

    if doc.root is None:
        logger.warning("No elements found in input")
        raise SystemExit(1)

    try:
        nodes = sorted(doc.query(args.selector), key=lambda n: n.id) if args.selector else [doc.root]
    except SelectorError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    if not nodes:
        raise SystemExit(1)

    if args.format == "html":
        outputs = [node.to_html() for node in nodes]
    elif args.format == "text":
        outputs = [node.to_text() for node in nodes]
    else:
        outputs = [_summary(node) for node in nodes]

    sys.stdout.write("\n".join(outputs))
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
