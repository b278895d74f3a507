"""Command-line driver: lex a file and write the tokens back out.

Usage:
    p3lex INPUT OUTPUT [--json] [--print-tokens] [--indent-width N] [-v]

Reads INPUT as UTF-8, scans it to exhaustion, and writes each token to
OUTPUT as it is produced (canonical source text, or a JSON dump with
``--json``). Exit status is 0 on success and 1 when the input cannot be
lexed or a file cannot be read or written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from p3lex import __version__
from p3lex.config import LexConfig
from p3lex.errors import LexError
from p3lex.lexer import Lexer
from p3lex.serialization import to_json, write_token
from p3lex.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="p3lex",
        description="Tokenize a source file and write the token stream back out",
    )
    parser.add_argument("input", type=Path, help="Path to the source file")
    parser.add_argument("output", type=Path, help="Path to write the tokens to")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write a JSON token dump instead of source text",
    )
    parser.add_argument(
        "--print-tokens",
        action="store_true",
        help="Print every token to stdout as it is scanned",
    )
    parser.add_argument(
        "--indent-width",
        type=int,
        default=LexConfig().indent_width,
        help="Spaces per indentation level (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> int:
    """Run the read → scan → write pipeline for parsed arguments."""
    try:
        config = LexConfig(indent_width=args.indent_width)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        logger.info("Reading %s", args.input)
        source = args.input.read_text(encoding="utf-8")
    except OSError as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    lexer = Lexer(source, config=config)
    count = 0
    try:
        with args.output.open("w", encoding="utf-8", newline="") as out:
            if args.json:
                tokens = []
                for token in lexer:
                    _report(token, args.print_tokens)
                    tokens.append(token)
                out.write(to_json(tokens, indent=2))
                out.write("\n")
                count = len(tokens)
            else:
                for token in lexer:
                    _report(token, args.print_tokens)
                    write_token(token, out, config)
                    count += 1
    except LexError as e:
        print(f"error: {args.input}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot write {args.output}: {e}", file=sys.stderr)
        return 1

    logger.info("Wrote %d tokens to %s", count, args.output)
    return 0


def _report(token: object, echo: bool) -> None:
    logger.debug("%r", token)
    if echo:
        print(repr(token))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
