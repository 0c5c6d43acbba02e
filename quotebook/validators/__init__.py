# Quote Validation Module
#
# Verification of LLM quotes against the source text:
#   - Sentence splitting (brackets + abbreviation heuristic)
#   - Exact substring match, first sentence wins
#   - Context window: up to 2 sentences before/after

from .sentences import split_sentences
from .quotes import (
    Quote,
    find_sentence_index,
    verify_and_extract,
    verify_quotes,
)

__all__ = [
    'split_sentences',
    'Quote',
    'find_sentence_index',
    'verify_and_extract',
    'verify_quotes',
]
