#!/usr/bin/env python3
"""
Extract notable quotes from a text file via LLM.

Usage:
    quote-extract book.txt "Лев Толстой"
    quote-extract book.txt "Лев Толстой" --output quotes/tolstoy.csv
    AI_PROVIDER=openai quote-extract book.txt "Лев Толстой"

Result is written next to the input: book.txt -> book.csv
"""

import argparse
import sys

from config import BLOCK_SIZE, REQUEST_DELAY_SECONDS
from quotebook.generators.core_ai import provider_has_credentials, required_key_name
from quotebook.parsers.block_processor import process_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract quotes from a text file into CSV")
    parser.add_argument("input_file", help="Path to the text file (UTF-8)")
    parser.add_argument("author", help="Author name written to every quote")
    parser.add_argument("--output", help="CSV path (default: input file with .csv extension)")
    parser.add_argument("--block-size", type=int, default=BLOCK_SIZE,
                        help=f"Characters per LLM request (default: {BLOCK_SIZE})")
    parser.add_argument("--delay", type=float, default=REQUEST_DELAY_SECONDS,
                        help=f"Pause after each LLM request, seconds (default: {REQUEST_DELAY_SECONDS})")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if not provider_has_credentials():
        print(f"Error: {required_key_name()} не найден в окружении.", file=sys.stderr)
        return 1

    try:
        result = process_file(
            args.input_file,
            args.author,
            output_path=args.output,
            block_size=args.block_size,
            delay=args.delay,
        )
    except (OSError, ValueError) as e:
        print(f"Error: ошибка обработки файла: {e}", file=sys.stderr)
        return 1

    print(f"\nBlocks: {result.blocks_processed} (failed: {result.blocks_failed}), "
          f"candidates: {result.candidates_total}, saved: {len(result.quotes)}, "
          f"{result.duration_ms}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
