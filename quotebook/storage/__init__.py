# Quote Storage (semicolon-delimited CSV with BOM)

from .csv_store import (
    init_csv,
    append_to_csv,
    read_quotes_from_csv,
    sanitize_field,
    quote_to_row,
)

__all__ = [
    'init_csv',
    'append_to_csv',
    'read_quotes_from_csv',
    'sanitize_field',
    'quote_to_row',
]
