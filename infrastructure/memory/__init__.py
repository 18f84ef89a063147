"""
Infrastructure In-Memory Layer.

Provides dict-backed implementations of the storage interfaces defined in
application.ports.

Usage:
    from infrastructure.memory import InMemoryStringMapStore
    from backend.core.string_map import StringMap

    string_map = StringMap(store=InMemoryStringMapStore())
"""

from infrastructure.memory.dict_store import InMemoryStringMapStore

__all__ = [
    "InMemoryStringMapStore",
]
