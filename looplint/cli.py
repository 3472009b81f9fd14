"""Command-line entry point: ``looplint [file] --dialect c``."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import dump_tokens
from .dialects import SUPPORTED_DIALECTS, resolve_dialect_name
from .run import run
from . import constants


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="looplint",
        description="Lexical, loop-syntax and semantic checks for toy JS, C and Java",
    )
    parser.add_argument("file", nargs="?", type=argparse.FileType("r", encoding="utf-8"),
                        help="Source file to analyse (default: built-in demo)")
    parser.add_argument("--dialect", "-d", default=constants.DEFAULT_DIALECT,
                        type=resolve_dialect_name, choices=SUPPORTED_DIALECTS,
                        help=f"Source dialect (default: {constants.DEFAULT_DIALECT})")
    parser.add_argument("--tokens", action="store_true",
                        help="Print the token stream before the result")
    parser.add_argument("--stats", action="store_true",
                        help="Print per-stage timings after the result")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log pipeline stages")
    parser.add_argument("--compact", action="store_true",
                        help="Print the JSON result on a single line")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if args.file is None:
        # Demo mode: use a built-in example
        source = constants.DEMO_SOURCES[args.dialect]
        print(f"No file provided. Using built-in {args.dialect} demo:\n")
        print(source)
    else:
        with args.file as f:
            source = f.read()

    if args.tokens:
        print("═══ Tokens ═══")
        print(dump_tokens(source, args.dialect))
        print()

    result, stats = run(source, dialect=args.dialect)
    indent = None if args.compact else 2
    print(json.dumps(result.to_dict(), indent=indent, ensure_ascii=False))

    if args.stats:
        print()
        print(stats.report())

    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
