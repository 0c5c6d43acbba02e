"""
prompts.py — Prompt for quote extraction

Модель возвращает JSON-массив строк: ["цитата1", "цитата2"]
"""

from string import Template

# ---------------------------------------------------------
# QUOTE EXTRACTION
# ---------------------------------------------------------
QUOTE_EXTRACTION_INSTRUCTION = '''Извлеки из текста 3-10 ярких, выразительных цитат.
Ответ верни строго в формате JSON массива строк. Пример: ["цитата1", "цитата2"].
Не добавляй лишних символов, обратных кавычек или пояснений.'''

PROMPT_QUOTE_EXTRACTION = Template('''$instruction

Текст:
$text''')


def build_quote_prompt(text: str) -> str:
    return PROMPT_QUOTE_EXTRACTION.substitute(
        instruction=QUOTE_EXTRACTION_INSTRUCTION,
        text=text,
    )
