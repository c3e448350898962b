"""A small least-recently-used cache and cache key helper."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Holds at most ``capacity`` entries, evicting the least recently used."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._entries: OrderedDict[K, V] = OrderedDict()

    def put(self, key: K, value: V) -> V:
        """Store ``value`` under ``key``, mark it most recent and return it."""
        if key in self._entries:
            del self._entries[key]
        else:
            while self._entries and len(self._entries) >= self._capacity:
                self._entries.popitem(last=False)
        self._entries[key] = value
        return value

    def get(self, key: K) -> V | None:
        """Return the value for ``key`` and mark it most recent, or ``None``."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def make_hash_key(obj: Any, *args: Any) -> str:
    """Build a key from the type and identity of ``obj`` and extra values."""
    parts = [type(obj).__name__, str(id(obj))]
    parts.extend(str(arg) for arg in args)
    return " ".join(parts)