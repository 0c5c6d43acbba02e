"""
Block Processor - text file -> verified quotes in CSV.

Pipeline for one file:
    lines → SentenceBuffer (whole file) + text block (~3000 chars)
          → LLM (candidate quotes)
          → verification against ALL sentences read so far
          → append to CSV immediately

Блоки обрабатываются строго последовательно; после каждого вызова модели
выдерживается фиксированная пауза (rate limit). Ошибка модели не прерывает
обработку файла, блок просто не даёт цитат.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

from config import BLOCK_SIZE, REQUEST_DELAY_SECONDS, output_path_for
from quotebook.generators.quote_extractor import extract_quotes_from_ai
from quotebook.storage.csv_store import append_to_csv, init_csv
from quotebook.validators.quotes import Quote, verify_quotes
from quotebook.validators.sentences import split_sentences


ExtractFn = Callable[[str], List[str]]


class SentenceBuffer:
    """Append-only list of all sentences read from the current file."""

    def __init__(self):
        self._sentences: List[str] = []

    def extend_from_text(self, text: str) -> int:
        """Split text and append its sentences. Returns how many were added."""
        new = split_sentences(text)
        self._sentences.extend(new)
        return len(new)

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self._sentences)

    def __len__(self):
        return len(self._sentences)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sentences)


@dataclass
class BlockResult:
    """Result of one LLM dispatch."""
    block_chars: int
    candidates: List[str] = field(default_factory=list)
    quotes: List[Quote] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class FileResult:
    """Result of processing one text file."""
    input_path: Path
    output_path: Path
    blocks_processed: int = 0
    blocks_failed: int = 0
    candidates_total: int = 0
    quotes: List[Quote] = field(default_factory=list)
    duration_ms: int = 0


def process_block(
    text: str,
    sentences: SentenceBuffer,
    author: str,
    csv_path: Path,
    extract_fn: ExtractFn = None,
    delay: float = REQUEST_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep
) -> BlockResult:
    """
    Send one text block to the LLM and save the verified quotes.

    Candidates are checked against every sentence in the buffer, not only
    the ones from this block.
    """
    extract_fn = extract_fn or extract_quotes_from_ai
    result = BlockResult(block_chars=len(text))
    print(f"⚙️ Обработка блока ({len(text)} символов)...")

    try:
        result.candidates = extract_fn(text) or []
    except Exception as e:
        result.error = str(e)
        print(f"!!! Ошибка AI: {e}")
        return result
    finally:
        if delay > 0:
            sleep(delay)

    if not result.candidates:
        return result

    result.quotes = verify_quotes(sentences.snapshot(), result.candidates, author)

    if result.quotes:
        append_to_csv(csv_path, result.quotes)
        print(f"✅ Сохранено {len(result.quotes)} цитат (из {len(result.candidates)} кандидатов)")

    return result


def _read_lines(input_path: Path) -> Iterator[str]:
    # split on "\n" only; a lone "\r" stays inside the line
    with open(input_path, "r", encoding="utf-8", newline="\n") as f:
        for line in f:
            yield line.rstrip("\r\n")


def process_file(
    input_path,
    author: str,
    extract_fn: ExtractFn = None,
    output_path=None,
    block_size: int = BLOCK_SIZE,
    delay: float = REQUEST_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep
) -> FileResult:
    """
    Extract quotes from a text file into a CSV next to it.

    Args:
        input_path: Text file (UTF-8)
        author: Author name written to every row
        extract_fn: text block -> candidate quotes (defaults to the LLM call)
        output_path: CSV path (defaults to input with .csv suffix)
        block_size: Block is sent once it grows beyond this many characters
        delay: Pause after every LLM call, seconds

    Raises:
        OSError: input can't be read or output can't be written
        ValueError: output path would overwrite the input
    """
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = Path(output_path) if output_path else output_path_for(input_path)
    if output_path.resolve() == input_path.resolve():
        raise ValueError(f"Output path {output_path} would overwrite the input file")

    start_time = time.time()
    result = FileResult(input_path=input_path, output_path=output_path)

    init_csv(output_path)

    sentences = SentenceBuffer()
    block: List[str] = []
    block_len = 0

    def dispatch():
        block_result = process_block(
            "".join(block), sentences, author, output_path,
            extract_fn=extract_fn, delay=delay, sleep=sleep
        )
        result.blocks_processed += 1
        if block_result.error is not None:
            result.blocks_failed += 1
        result.candidates_total += len(block_result.candidates)
        result.quotes.extend(block_result.quotes)

    for line in _read_lines(input_path):
        sentences.extend_from_text(line)
        block.append(line + "\n")
        block_len += len(line) + 1

        if block_len > block_size:
            dispatch()
            block = []
            block_len = 0

    if block_len > 0:
        dispatch()

    result.duration_ms = int((time.time() - start_time) * 1000)
    print(f"✅ Всего сохранено цитат: {len(result.quotes)} → {output_path}")
    return result
