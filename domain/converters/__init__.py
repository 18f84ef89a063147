"""
Domain converters for the string map.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import reverse_text, to_text
    >>> reverse_text(to_text(123))
    '321'
"""

from domain.converters.text import ABSENT_TEXT, reverse_text, to_text

__all__ = [
    "ABSENT_TEXT",
    "reverse_text",
    "to_text",
]
