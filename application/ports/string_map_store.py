"""
String Map Store Interface (Port).

This module defines the abstract interface for the mapping owned by a
StringMap. Only these operations may be used on the underlying mapping,
so any adapter that supports key lookup, iteration and removal can back
a StringMap.
"""
from typing import Protocol, Optional, Dict, Iterator, Tuple


class StringMapStore(Protocol):
    """
    Abstract interface for key -> value string storage.

    Keys and values are strings; None is accepted for both and stands
    for an absent key or value.
    """

    def get(
        self,
        key: Optional[str],
    ) -> Optional[str]:
        """
        Get the value stored under a key.

        Args:
            key: Key to look up

        Returns:
            The stored value, or None if the key is not present
        """
        ...

    def put(
        self,
        key: Optional[str],
        value: Optional[str],
    ) -> None:
        """
        Add or overwrite the entry for a key.

        Args:
            key: Entry key
            value: Entry value
        """
        ...

    def remove(
        self,
        key: Optional[str],
    ) -> bool:
        """
        Remove the entry for a key.

        Args:
            key: Key to remove

        Returns:
            True if an entry was removed, False if not found
        """
        ...

    def contains(
        self,
        key: Optional[str],
    ) -> bool:
        """
        Check whether a key is present.

        Args:
            key: Key to check

        Returns:
            True if the key is present
        """
        ...

    def items(self) -> Iterator[Tuple[Optional[str], Optional[str]]]:
        """
        Iterate over (key, value) pairs in store order.

        Returns:
            Iterator over a snapshot of the entries, safe to use while
            mutating the store
        """
        ...

    def size(self) -> int:
        """
        Get the number of entries.

        Returns:
            Entry count
        """
        ...

    def clear(self) -> None:
        """
        Remove every entry.
        """
        ...

    def replace(
        self,
        mapping: Dict[Optional[str], Optional[str]],
    ) -> None:
        """
        Replace the whole content with the given mapping.

        Args:
            mapping: New key -> value content, in iteration order
        """
        ...
