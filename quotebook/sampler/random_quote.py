"""
Random quote from a collection of quote CSV files.

Recursively finds *.csv under a root folder, pools every quote and picks
one uniformly at random.
"""

import csv
import json
import random
import sys
from pathlib import Path
from typing import List, Optional

from quotebook.storage.csv_store import read_quotes_from_csv
from quotebook.validators.quotes import Quote


class SamplerError(Exception):
    """No CSV files or no quotes to sample from."""


def find_csv_files(root_dir) -> List[Path]:
    """Рекурсивно ищет все CSV-файлы в папке и подпапках"""
    root = Path(root_dir)
    if not root.is_dir():
        raise SamplerError(f"Папка не найдена: {root}")

    return sorted(
        p for p in root.rglob("*")
        if p.is_file() and p.suffix.lower() == ".csv"
    )


def collect_quotes(csv_files: List[Path]) -> List[Quote]:
    """Read quotes from all files; a file that can't be read is skipped."""
    all_quotes: List[Quote] = []
    for file_path in csv_files:
        try:
            quotes = read_quotes_from_csv(file_path)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            print(f"⚠ Ошибка при чтении файла {file_path}: {e}", file=sys.stderr)
            continue
        all_quotes.extend(quotes)
    return all_quotes


def get_random_quote(root_dir, rng: Optional[random.Random] = None) -> Quote:
    """
    Pick one quote uniformly from all CSV files under root_dir.

    Args:
        root_dir: Folder to search recursively
        rng: Random source (a fresh one seeded from the OS if None)

    Raises:
        SamplerError: no CSV files found or no quotes in them
    """
    csv_files = find_csv_files(root_dir)
    if not csv_files:
        raise SamplerError(f"В папке {root_dir} не найдено CSV-файлов")

    all_quotes = collect_quotes(csv_files)
    if not all_quotes:
        raise SamplerError("Не найдено цитат в CSV-файлах")

    rng = rng or random.Random()
    return rng.choice(all_quotes)


def format_quote_text(quote: Quote) -> str:
    return "\n".join([
        f"Цитата: {quote.text}",
        f"Автор: {quote.author}",
        f"Контекст (До): {quote.context_before}",
        f"Контекст (После): {quote.context_after}",
    ])


def format_quote_json(quote: Quote) -> str:
    return json.dumps(quote.to_dict(), ensure_ascii=False, indent=2)
