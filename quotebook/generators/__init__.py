# Quote Extraction (LLM side)
#
# Modules:
#   - core_ai.py: LLM calls (Gemini/OpenAI)
#   - prompts.py: Quote extraction prompt
#   - quote_extractor.py: Block -> candidate quotes (JSON array parsing)

from .core_ai import call_model, call_gemini_model, call_openai_model
from .prompts import build_quote_prompt
from .quote_extractor import (
    extract_quotes_from_ai,
    parse_quotes_response,
    strip_json_fences,
)

__all__ = [
    # Core AI
    'call_model',
    'call_gemini_model',
    'call_openai_model',

    # Prompts
    'build_quote_prompt',

    # Quote Extractor
    'extract_quotes_from_ai',
    'parse_quotes_response',
    'strip_json_fences',
]
