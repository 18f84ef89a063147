"""
Converters: arbitrary values <-> map key/value text.

Provides the two pure projections the string map is built on:
- reverse_text: value string -> key string
- to_text: any element handed to a bulk reset -> value string
"""

from typing import Any

# Text used for an absent element during a bulk reset
ABSENT_TEXT = "null"


def reverse_text(text: str) -> str:
    """
    Reverse a string code point by code point.

    Examples:
        >>> reverse_text("abc")
        'cba'
        >>> reverse_text("")
        ''
    """
    return text[::-1]


def to_text(value: Any) -> str:
    """
    Project any value onto the text stored as a map value.

    Strings pass through untouched, None becomes ABSENT_TEXT and
    everything else goes through str().

    Examples:
        >>> to_text(12)
        '12'
        >>> to_text(None)
        'null'
    """
    if value is None:
        return ABSENT_TEXT
    if isinstance(value, str):
        return value
    return str(value)
