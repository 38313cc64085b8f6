"""Durable storage for the city cache.

A :class:`KeyValueSlot` holds one opaque blob; :class:`CityStore`
serializes the full set of cached cities into it.
"""

from glasscast.storage.slot import FileSlot, KeyValueSlot, MemorySlot
from glasscast.storage.store import CityStore, StoreLoadResult, StoreLoadStatus

__all__ = [
    "CityStore",
    "FileSlot",
    "KeyValueSlot",
    "MemorySlot",
    "StoreLoadResult",
    "StoreLoadStatus",
]
