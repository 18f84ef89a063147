"""
Domain models for the string map.

This package contains pure domain models that are independent of
storage concerns.

Usage:
    >>> from domain.models import StringEntry

    >>> entry = StringEntry.from_value("hello")
    >>> entry.model_dump()
    {'key': 'olleh', 'value': 'hello'}
"""

from domain.models.string_entry import StringEntry

__all__ = [
    "StringEntry",
]
