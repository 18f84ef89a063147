"""
String map utility.

Maintains a mapping from reversed strings (keys) to the original strings
(values) and exposes the query and mutation operations over it. The
mapping itself lives behind the StringMapStore port, so only lookup,
iteration and removal are ever used on it.

Absent input (None) is never an error: it is either a no-op or yields an
empty result, operation by operation.

Usage:
    from backend.core.string_map import StringMap

    string_map = StringMap()
    string_map.add_string("abc")
    string_map.get_all()            # {"cba": "abc"}
    string_map.values_sorted()      # ["abc"]
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from application.exceptions import InvalidStringError
from application.ports.string_map_store import StringMapStore
from domain.converters.text import to_text
from domain.models.string_entry import StringEntry
from infrastructure.memory.dict_store import InMemoryStringMapStore

logger = logging.getLogger(__name__)


def _absent_first(text: Optional[str]) -> Tuple[bool, str]:
    """Sort key that orders None before every string."""
    return (text is not None, text or "")


def _upper(text: Optional[str]) -> Optional[str]:
    return text.upper() if text is not None else None


class StringMap:
    """
    Mapping of reversed strings to original strings.

    The reversal invariant (key == reversed value) holds for entries added
    through add_string() or reset_from(). uppercase_all_keys() re-keys
    entries and deliberately leaves it broken; reversal_violations()
    lists the affected entries.
    """

    def __init__(
        self,
        store: Optional[StringMapStore] = None,
        *,
        log_mutations: bool = False,
        warn_on_key_collision: bool = True,
    ):
        """
        Initialize with an empty store unless one is injected.

        Args:
            store: Storage for the entries (default: new in-memory store)
            log_mutations: Emit a DEBUG record per mutation
            warn_on_key_collision: Log a WARNING when uppercasing merges keys
        """
        self._store: StringMapStore = store if store is not None else InMemoryStringMapStore()
        self._log_mutations = log_mutations
        self._warn_on_key_collision = warn_on_key_collision

    def _trace(self, message: str, *args: Any) -> None:
        if self._log_mutations:
            logger.debug(message, *args)

    def _values(self) -> List[Optional[str]]:
        return [value for _, value in self._store.items()]

    # =========================================================================
    # Queries
    # =========================================================================

    def values_sorted(self) -> List[Optional[str]]:
        """Distinct values in ascending lexicographic order."""
        return sorted(set(self._values()), key=_absent_first)

    def keys_sorted_descending(self) -> List[Optional[str]]:
        """All keys in descending lexicographic order."""
        keys = [key for key, _ in self._store.items()]
        return sorted(keys, key=_absent_first, reverse=True)

    def first_value(self) -> Optional[str]:
        """
        Get the lexicographically smallest value.

        Returns:
            The smallest present value, or None if there is none
        """
        present = [value for value in self._values() if value is not None]
        return min(present) if present else None

    def last_value(self) -> Optional[str]:
        """
        Get the lexicographically largest value.

        Returns:
            The largest present value, or None if there is none
        """
        present = [value for value in self._values() if value is not None]
        return max(present) if present else None

    def keys_uppercased(self) -> List[Optional[str]]:
        """
        Get every key converted to uppercase.

        Order is not meaningful. One element per entry; a None key yields
        a None element.
        """
        return [_upper(key) for key, _ in self._store.items()]

    def distinct_value_count(self) -> int:
        """Number of different values in the map."""
        return len(set(self._values()))

    def contains_all_values(self, candidates: Optional[Iterable[Optional[str]]]) -> bool:
        """
        Check whether every candidate is one of the current values.

        Args:
            candidates: Strings to look for; None or empty always matches

        Returns:
            True if all candidates are present among the values
        """
        wanted = list(candidates) if candidates is not None else []
        if not wanted:
            return True
        if self._store.size() == 0:
            return False
        values = set(self._values())
        return all(candidate in values for candidate in wanted)

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_string(self, text: Optional[str]) -> None:
        """
        Add a string under its reversed form.

        Overwrites an existing entry with the same key, so the map does not
        always grow.

        Args:
            text: String to add; None is ignored

        Raises:
            InvalidStringError: If text is neither a str nor None
        """
        if text is None:
            return
        if not isinstance(text, str):
            raise InvalidStringError("add_string", text)

        entry = StringEntry.from_value(text)
        self._store.put(entry.key, entry.value)
        self._trace("Added %s", entry)

    def remove_by_key(self, key: Optional[str]) -> None:
        """Remove the entry with exactly this key, if any."""
        if self._store.remove(key):
            self._trace("Removed key %r", key)

    def remove_by_value(self, value: Optional[str]) -> None:
        """
        Remove every entry holding this value.

        None matches entries whose value is None.
        """
        doomed = [key for key, current in self._store.items() if current == value]
        for key in doomed:
            self._store.remove(key)
        if doomed:
            self._trace("Removed %d entries with value %r", len(doomed), value)

    def reset_from(self, objects: Optional[Iterable[Any]]) -> None:
        """
        Rebuild the map from the text form of each object.

        The map is always cleared first. Each object is converted with
        to_text() and stored under its reversed text; later objects win
        over earlier ones with the same key.

        Args:
            objects: Objects to load, or None to just clear the map
        """
        self._store.clear()
        if objects is None:
            self._trace("Reset to empty map")
            return

        for obj in objects:
            entry = StringEntry.from_value(to_text(obj))
            self._store.put(entry.key, entry.value)
        self._trace("Reset map with %d entries", self._store.size())

    def uppercase_all_keys(self) -> None:
        """
        Re-key every entry with its uppercased key, keeping the values.

        When two keys uppercase to the same string, the entry visited last
        in store order keeps its value.
        """
        rekeyed: Dict[Optional[str], Optional[str]] = {}
        for key, value in self._store.items():
            new_key = _upper(key)
            if new_key in rekeyed and self._warn_on_key_collision:
                logger.warning(
                    f"Key collision on {new_key!r}: value {rekeyed[new_key]!r} "
                    f"replaced by {value!r}"
                )
            rekeyed[new_key] = value

        self._store.replace(rekeyed)
        self._trace("Uppercased keys, %d entries remain", len(rekeyed))

    def clear(self) -> None:
        """Remove every entry."""
        self._store.clear()
        self._trace("Cleared map")

    # =========================================================================
    # Container helpers
    # =========================================================================

    def size(self) -> int:
        """Number of entries."""
        return self._store.size()

    def get(self, key: Optional[str]) -> Optional[str]:
        """Value stored under key, or None."""
        return self._store.get(key)

    def get_all(self) -> Dict[Optional[str], Optional[str]]:
        """Copy of the whole map as a plain dict."""
        return dict(self._store.items())

    def entries(self) -> List[StringEntry]:
        """All entries as value objects, in store order."""
        return [StringEntry(key=key, value=value) for key, value in self._store.items()]

    def reversal_violations(self) -> List[StringEntry]:
        """Entries whose key is not the reversed value."""
        return [entry for entry in self.entries() if not entry.is_reversal]

    def __len__(self) -> int:
        return self._store.size()

    def __contains__(self, key: object) -> bool:
        return self._store.contains(key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"StringMap({self.get_all()!r})"
