"""
In-memory String Map Store Implementation.

This module implements the StringMapStore protocol on top of a plain dict.
Iteration follows dict insertion order, which is what decides the winner
when a StringMap re-keys two entries onto the same key.
"""
from typing import Optional, Dict, Iterator, Tuple


class InMemoryStringMapStore:
    """
    Dict-backed implementation of StringMapStore.

    Usage:
        store = InMemoryStringMapStore()
        store.put("cba", "abc")
        store.seed({"x": None})
        store.get("cba")  # "abc"
    """

    def __init__(self, mapping: Optional[Dict[Optional[str], Optional[str]]] = None):
        """Initialize with optional initial content."""
        self._entries: Dict[Optional[str], Optional[str]] = dict(mapping or {})

    def reset(self) -> None:
        """Clear all stored entries."""
        self._entries.clear()

    def seed(self, mapping: Dict[Optional[str], Optional[str]]) -> None:
        """
        Seed the store with raw entries.

        No reversal is applied, so seeding is the way to get entries that
        break the key/value relation (or hold None) into a map.

        Args:
            mapping: Dict of key -> value entries
        """
        self._entries.update(mapping)

    def get_all(self) -> Dict[Optional[str], Optional[str]]:
        """Get a copy of all stored entries."""
        return dict(self._entries)

    # =========================================================================
    # StringMapStore Protocol Methods
    # =========================================================================

    def get(
        self,
        key: Optional[str],
    ) -> Optional[str]:
        """Get the value stored under a key."""
        return self._entries.get(key)

    def put(
        self,
        key: Optional[str],
        value: Optional[str],
    ) -> None:
        """Add or overwrite the entry for a key."""
        self._entries[key] = value

    def remove(
        self,
        key: Optional[str],
    ) -> bool:
        """Remove the entry for a key."""
        if key in self._entries:
            del self._entries[key]
            return True
        return False

    def contains(
        self,
        key: Optional[str],
    ) -> bool:
        """Check whether a key is present."""
        return key in self._entries

    def items(self) -> Iterator[Tuple[Optional[str], Optional[str]]]:
        """Iterate over a snapshot of (key, value) pairs."""
        return iter(list(self._entries.items()))

    def size(self) -> int:
        """Get the number of entries."""
        return len(self._entries)

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def replace(
        self,
        mapping: Dict[Optional[str], Optional[str]],
    ) -> None:
        """Replace the whole content with the given mapping."""
        self._entries = dict(mapping)
