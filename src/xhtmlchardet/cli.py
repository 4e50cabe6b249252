"""Command-line interface for xhtmlchardet."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import xhtmlchardet
from xhtmlchardet._utils import DEFAULT_MAX_BYTES


def _format(label: str, charsets: list[str], minimal: bool) -> str:
    if minimal:
        return charsets[0] if charsets else ""
    if not charsets:
        return f"{label}: no charset detected"
    return f"{label}: {', '.join(charsets)}"


def main(argv: list[str] | None = None) -> None:
    """Run the ``xhtmlchardetect`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the character encoding of XML and HTML files."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--hint", default=None, help="Charset declared outside the document"
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the most likely charset"
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help="Number of leading bytes to inspect",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection steps to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"xhtmlchardet {xhtmlchardet.__version__}",
    )

    args = parser.parse_args(argv)
    if args.max_bytes < 1:
        parser.error("--max-bytes must be a positive integer")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args.files:
        charsets = xhtmlchardet.detect(
            sys.stdin.buffer, args.hint, max_bytes=args.max_bytes
        )
        print(_format("stdin", charsets, args.minimal))
        return

    failed = False
    for filepath in args.files:
        try:
            with Path(filepath).open("rb") as f:
                charsets = xhtmlchardet.detect(f, args.hint, max_bytes=args.max_bytes)
        except OSError as e:
            print(f"xhtmlchardetect: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        print(_format(filepath, charsets, args.minimal))
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
