#!/usr/bin/env python3
"""
Print a random quote from all quote CSV files under a folder.

Usage:
    quote-random data/quotes
    quote-random --json data/quotes
    quote-random --seed 42 data/quotes
"""

import argparse
import random
import sys

from config import QUOTES_DIR
from quotebook.sampler.random_quote import (
    SamplerError,
    format_quote_json,
    format_quote_text,
    get_random_quote,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Random quote from CSV files")
    parser.add_argument("root_dir", nargs="?", default=str(QUOTES_DIR),
                        help=f"Folder with quote CSV files, searched recursively (default: {QUOTES_DIR})")
    parser.add_argument("--json", action="store_true", help="Print the quote as JSON")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible pick")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        quote = get_random_quote(args.root_dir, rng=rng)
    except SamplerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(format_quote_json(quote))
    else:
        print(format_quote_text(quote))
    return 0


if __name__ == "__main__":
    sys.exit(main())
