"""Command that prints every token of a source file."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .lexer import Lexer

DEFAULT_SOURCE = "../main.ctt"


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize a source file and print one token per line."""
    parser = argparse.ArgumentParser(description="Print the tokens of a source file.")
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_SOURCE,
        help=f"source file to read (default: {DEFAULT_SOURCE})",
    )
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8", newline="") as handle:
            code = handle.read()
    except OSError as error:
        print(f"cannot read {args.path}: {error}", file=sys.stderr)
        return 1

    for token in Lexer(code):
        print(token)
    return 0