"""
CSV storage for verified quotes.

Format (Excel-friendly):
    - UTF-8 with BOM
    - delimiter ';'
    - header: Цитата;Автор;Контекст (До);Контекст (После)
    - one quote per line: ';' inside fields becomes ',', newlines become spaces
    - data rows are fully quoted so leading spaces survive a re-read
"""

import csv
import sys
from pathlib import Path
from typing import Iterable, List

from config import CSV_DELIMITER, CSV_ENCODING, CSV_FIELD_COUNT, CSV_HEADER
from quotebook.validators.quotes import Quote


def sanitize_field(value: str) -> str:
    """Экранируем ';' (заменяем на ',') и переносы строк, чтобы не ломать CSV"""
    value = (value or "").replace(";", ",")
    return value.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def quote_to_row(quote: Quote) -> List[str]:
    return [
        sanitize_field(quote.text),
        sanitize_field(quote.author),
        sanitize_field(quote.context_before),
        sanitize_field(quote.context_after),
    ]


def _writer(f, quoting=csv.QUOTE_MINIMAL):
    return csv.writer(f, delimiter=CSV_DELIMITER, lineterminator="\n", quoting=quoting)


def init_csv(file_path: Path) -> None:
    """Create (or truncate) the CSV file with BOM and header"""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding=CSV_ENCODING, newline="") as f:
        _writer(f).writerow(CSV_HEADER)


def append_to_csv(file_path: Path, quotes: Iterable[Quote]) -> int:
    """
    Append quotes to an existing CSV file.

    The file is flushed before returning so already saved quotes
    survive a crash later in the run.

    Returns:
        Number of rows written
    """
    count = 0
    # plain utf-8: the BOM is written once by init_csv
    with open(file_path, "a", encoding="utf-8", newline="") as f:
        # quoted fields keep leading spaces under skipinitialspace on read
        writer = _writer(f, quoting=csv.QUOTE_ALL)
        for quote in quotes:
            writer.writerow(quote_to_row(quote))
            count += 1
        f.flush()
    return count


def read_quotes_from_csv(file_path: Path) -> List[Quote]:
    """
    Read all quotes from one CSV file.

    The first row is the header. Rows with fewer than 4 fields are skipped
    with a warning; the rest of the file is still read.
    """
    quotes: List[Quote] = []

    with open(file_path, "r", encoding=CSV_ENCODING, newline="") as f:
        reader = csv.reader(f, delimiter=CSV_DELIMITER, skipinitialspace=True)

        for i, row in enumerate(reader):
            if i == 0:
                continue  # header
            if not row:
                continue

            if len(row) < CSV_FIELD_COUNT:
                print(
                    f"⚠ Warning: line {reader.line_num} in {file_path} has too few fields "
                    f"({len(row)} < {CSV_FIELD_COUNT}), skipped",
                    file=sys.stderr
                )
                continue

            quotes.append(Quote(
                text=row[0],
                author=row[1],
                context_before=row[2],
                context_after=row[3],
            ))

    return quotes
