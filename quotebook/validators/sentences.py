"""
sentences.py — Sentence splitting for quote verification

Разбивает текст на предложения, игнорируя точки в скобках и в сокращениях.

Rules:
    - Sentence ends at '.', '!' or '?' when bracket depth is zero
    - '.' followed by anything except space/newline is not an end ("т.е.", "3.14")
    - Unbalanced brackets keep the depth non-zero until the end of the text,
      so no further sentence ends are detected
"""

from typing import List

OPEN_BRACKETS = "([{"
CLOSE_BRACKETS = ")]}"
SENTENCE_ENDINGS = ".!?"


def split_sentences(text: str) -> List[str]:
    """
    Split text into trimmed, non-empty sentences in document order.

    >>> split_sentences("Он сказал (это. правда.) всё. Да!")
    ['Он сказал (это. правда.) всё.', 'Да!']
    """
    sentences: List[str] = []
    buf: List[str] = []
    depth = 0

    for i, ch in enumerate(text):
        buf.append(ch)

        if ch in OPEN_BRACKETS:
            depth += 1
        elif ch in CLOSE_BRACKETS:
            depth -= 1

        if ch in SENTENCE_ENDINGS and depth == 0:
            # Abbreviation: the period is glued to the next character
            if ch == "." and i + 1 < len(text) and text[i + 1] not in (" ", "\n"):
                continue
            sentence = "".join(buf).strip()
            if sentence:
                sentences.append(sentence)
            buf = []

    tail = "".join(buf).strip()
    if tail:
        sentences.append(tail)

    return sentences
