# Random quote sampler over quote CSV collections

from .random_quote import (
    SamplerError,
    find_csv_files,
    collect_quotes,
    get_random_quote,
    format_quote_text,
    format_quote_json,
)

__all__ = [
    'SamplerError',
    'find_csv_files',
    'collect_quotes',
    'get_random_quote',
    'format_quote_text',
    'format_quote_json',
]
