# Command-line tools
#
#   - extract_quotes.py: quote-extract <file> <author>
#   - random_quote.py: quote-random [--json] <folder>
