"""A least-recently-used cache with a fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Hashable


class LRUCache:
    """Cache that evicts the least recently used key once full.

    ``get`` returns -1 for a missing key.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, int] = OrderedDict()

    def get(self, key: Hashable) -> int:
        """Return the value for ``key`` and mark it most recently used, or -1."""
        try:
            self._entries.move_to_end(key)
        except KeyError:
            return -1
        return self._entries[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries