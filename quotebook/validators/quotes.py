"""
quotes.py — Quote verification against the source sentences

Верификация цитат для защиты от галлюцинаций LLM: цитата принимается только
если она дословно (с учётом регистра) входит в одно из предложений исходного
текста. Для найденной цитаты берётся контекст: до 2 предложений до и после.

Usage:
    from quotebook.validators import split_sentences, verify_and_extract

    sentences = split_sentences(text)
    quote = verify_and_extract(sentences, "яркая фраза", "Автор")
"""

from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Sequence

from config import CONTEXT_WINDOW


@dataclass
class Quote:
    """A verified quote with its surrounding context."""
    text: str
    author: str
    context_before: str = ""
    context_after: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def find_sentence_index(sentences: Sequence[str], quote: str) -> Optional[int]:
    """Index of the first sentence containing quote, or None."""
    for i, sentence in enumerate(sentences):
        if quote in sentence:
            return i
    return None


def verify_and_extract(
    sentences: Sequence[str],
    quote: str,
    author: str,
    window: int = CONTEXT_WINDOW
) -> Optional[Quote]:
    """
    Find the quote in the sentences and build a Quote with context.

    The first matching sentence wins. Context never includes the matched
    sentence and is clamped at the document boundaries.

    Returns:
        Quote, or None when no sentence contains the quote
    """
    i = find_sentence_index(sentences, quote)
    if i is None:
        return None

    start = max(0, i - window)
    end = min(len(sentences), i + window + 1)

    return Quote(
        text=quote,
        author=author,
        context_before=" ".join(sentences[start:i]),
        context_after=" ".join(sentences[i + 1:end]),
    )


def verify_quotes(
    sentences: Sequence[str],
    candidates: Iterable[str],
    author: str
) -> List[Quote]:
    """Verify candidates in order; quotes not found in the text are dropped."""
    verified = []
    for candidate in candidates:
        quote = verify_and_extract(sentences, candidate, author)
        if quote is not None:
            verified.append(quote)
    return verified
