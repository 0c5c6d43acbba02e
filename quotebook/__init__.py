"""
Quotebook: AI-assisted quote extraction with source verification.
"""

__version__ = "0.1.0"
