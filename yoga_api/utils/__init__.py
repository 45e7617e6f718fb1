"""
Utility helpers.
"""

from .validation import parse_identifier, MAX_IDENTIFIER

__all__ = ["parse_identifier", "MAX_IDENTIFIER"]
