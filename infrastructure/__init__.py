"""
Infrastructure Layer for the string map.

This package contains concrete implementations of storage interfaces:
- memory/: dict-backed implementations
"""

from infrastructure.memory import InMemoryStringMapStore

__all__ = [
    "InMemoryStringMapStore",
]
