"""
Конфигурация путей и настроек проекта
"""
from pathlib import Path
import os

from dotenv import load_dotenv

load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"

# Quote collections (input for quote-random)
QUOTES_DIR = Path(os.getenv("QUOTES_DIR", str(DATA_DIR / "quotes")))

# Output file for a processed text: book.txt -> book.csv
OUTPUT_SUFFIX = ".csv"

# Block processing
BLOCK_SIZE = 3000  # characters accumulated before an AI call
REQUEST_DELAY_SECONDS = float(os.getenv("REQUEST_DELAY_SECONDS", "1"))
CONTEXT_WINDOW = 2  # sentences before/after the matched one

# CSV format (Excel-friendly: BOM + ';')
CSV_DELIMITER = ";"
CSV_ENCODING = "utf-8-sig"
CSV_HEADER = ["Цитата", "Автор", "Контекст (До)", "Контекст (После)"]
CSV_FIELD_COUNT = len(CSV_HEADER)

# LLM Settings
AI_PROVIDER = os.getenv("AI_PROVIDER", "google").lower()
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
GOOGLE_MODEL_NAME = os.getenv("GOOGLE_MODEL_NAME", "gemini-2.5-flash")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL_NAME = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")
TEMPERATURE = 0.1


def output_path_for(input_path) -> Path:
    """book.txt -> book.csv (рядом с исходным файлом)"""
    return Path(input_path).with_suffix(OUTPUT_SUFFIX)


def ensure_dirs():
    """Create all required directories"""
    for d in [DATA_DIR, QUOTES_DIR]:
        d.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":
    ensure_dirs()

    print("=== Settings ===\n")
    print(f"  Provider:       {AI_PROVIDER}")
    print(f"  Gemini model:   {GOOGLE_MODEL_NAME} {'✅' if GOOGLE_API_KEY else '❌ (no GOOGLE_API_KEY)'}")
    print(f"  OpenAI model:   {OPENAI_MODEL_NAME} {'✅' if OPENAI_API_KEY else '❌ (no OPENAI_API_KEY)'}")
    print(f"  Block size:     {BLOCK_SIZE} chars")
    print(f"  Request delay:  {REQUEST_DELAY_SECONDS}s")
    print(f"  Quotes dir:     {QUOTES_DIR}")
