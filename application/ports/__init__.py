"""
Storage Interfaces (Ports) for the string map.

This package defines abstract interfaces that decouple the string map
logic from the container that actually holds the entries.
Implementations are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the core needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import StringMapStore

    class StringMap:
        def __init__(self, store: StringMapStore):
            self._store = store
"""

from application.ports.string_map_store import StringMapStore

__all__ = [
    "StringMapStore",
]
