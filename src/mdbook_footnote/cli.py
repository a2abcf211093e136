"""Command-line entry point used by mdbook.

mdbook calls a preprocessor in two ways:

    mdbook-footnote supports <renderer>   # exit 0 if supported, 1 if not
    mdbook-footnote < input.json          # [context, book] in, book out

Book JSON goes to stdout; warnings and errors go to stderr.

"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import BinaryIO

from mdbook_footnote import __version__
from mdbook_footnote.errors import BookFormatError, FootnoteError
from mdbook_footnote.preprocessor import FootnotePreprocessor, check_mdbook_version
from mdbook_footnote.serialization import book_to_json, parse_input


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-footnote",
        description="An mdbook preprocessor which expands {{footnote: ...}} markers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command")
    supports = subparsers.add_parser(
        "supports", help="Check whether a renderer is supported by this preprocessor"
    )
    supports.add_argument("renderer")
    return parser


def handle_supports(pre: FootnotePreprocessor, renderer: str) -> int:
    """Exit status for ``supports``: 0 if supported, 1 otherwise."""
    return 0 if pre.supports_renderer(renderer) else 1


def handle_preprocessing(
    pre: FootnotePreprocessor,
    stdin: BinaryIO,
    stdout: BinaryIO,
) -> None:
    """Read ``[context, book]``, expand footnotes, write the book.

    mdbook always speaks UTF-8, so both streams are binary and decoded
    here rather than with the locale encoding.
    """
    try:
        text = stdin.read().decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"input is not valid UTF-8 at byte {e.start}"
        raise BookFormatError(msg) from e
    ctx, book = parse_input(text)
    check_mdbook_version(ctx.mdbook_version)
    processed = pre.run(ctx, book)
    stdout.write(book_to_json(processed).encode("utf-8"))
    stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s]: %(message)s",
        stream=sys.stderr,
    )

    pre = FootnotePreprocessor()
    if args.command == "supports":
        return handle_supports(pre, args.renderer)

    try:
        handle_preprocessing(pre, sys.stdin.buffer, sys.stdout.buffer)
    except FootnoteError as e:
        print(e, file=sys.stderr)
        return 1
    return 0
