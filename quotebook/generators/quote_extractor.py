"""
Quote extraction step: text block -> candidate quotes from the LLM.

Кандидаты не проверены: модель может перефразировать или выдумать цитату,
поэтому каждый кандидат затем проверяется по исходному тексту
(см. quotebook.validators.quotes).
"""

import json
from typing import List

from .core_ai import call_model
from .prompts import build_quote_prompt


def strip_json_fences(text: str) -> str:
    """Strip markdown code fences from JSON output.

    Models often return JSON wrapped in ```json ... ``` markers.
    This function removes them to get clean JSON.
    """
    text = text.strip()
    # Remove ```json ... ``` or ``` ... ```
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def parse_quotes_response(text: str) -> List[str]:
    """
    Parse the model answer into a list of candidate quotes.

    Anything other than a JSON array of strings yields [] (the block is skipped).
    """
    cleaned = strip_json_fences(text or "")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        print(f"⚠️ Ответ не JSON, пропускаю блок. Ответ: {cleaned}")
        return []

    if not isinstance(data, list) or not all(isinstance(q, str) for q in data):
        print(f"⚠️ Ответ не является массивом строк, пропускаю блок. Ответ: {cleaned}")
        return []

    return [q for q in data if q.strip()]


def extract_quotes_from_ai(text: str) -> List[str]:
    """
    Ask the model for 3-10 notable quotes from the text block.

    Provider errors (network, auth, quota) propagate to the caller.
    """
    response = call_model(build_quote_prompt(text))
    return parse_quotes_response(response)
