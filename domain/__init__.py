"""
Domain layer for the string map.

This package contains pure models and converters that are independent of
storage concerns.
"""

from domain.converters import reverse_text, to_text
from domain.models import StringEntry

__all__ = [
    "StringEntry",
    "reverse_text",
    "to_text",
]
