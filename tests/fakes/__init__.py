"""
Fake Store Implementations for Testing.

This package provides in-memory fake implementations of the storage
interfaces for fast, isolated testing.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeStringMapStore, create_string_map_store

    # Direct instantiation
    store = FakeStringMapStore()
    store.seed({"cba": "abc"})

    # Factory function with pre-populated data
    store = create_string_map_store(values=["abc", "hello"])
"""
from typing import Optional, Dict, List

from domain.converters.text import reverse_text
from tests.fakes.string_map_store import FakeStringMapStore


# =============================================================================
# Factory Functions
# =============================================================================


def create_string_map_store(
    *,
    values: Optional[List[str]] = None,
    raw: Optional[Dict[Optional[str], Optional[str]]] = None,
) -> FakeStringMapStore:
    """
    Create a FakeStringMapStore with optional pre-populated entries.

    Args:
        values: Strings stored canonically (key = reversed value)
        raw: Entries stored as given, after `values`

    Returns:
        Pre-populated FakeStringMapStore
    """
    store = FakeStringMapStore()

    if values:
        store.seed({reverse_text(value): value for value in values})

    if raw:
        store.seed(raw)

    return store


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeStringMapStore",
    # Factory functions
    "create_string_map_store",
]
