"""Insertion-ordered hash table with separate chaining over entry indices."""

from __future__ import annotations

import random
from typing import Any, Hashable, Iterator, Optional

_MISSING = object()


class OrderedHashMap:
    """A hash map that keeps its entries in insertion order.

    Entries live in parallel lists addressed by index; each bucket holds the
    indices of the entries whose hash falls into it. The table doubles when
    the number of entries reaches its capacity.
    """

    def __init__(self, capacity: int = 8) -> None:
        if capacity < 1:
            raise ValueError("map capacity must be at least 1")
        self._seed = random.getrandbits(32)
        self._keys: list[Hashable] = []
        self._values: list[Any] = []
        self._hashes: list[int] = []
        self._cap = capacity
        self._buckets: list[list[int]] = [[] for _ in range(capacity)]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: Hashable) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Hashable) -> Any:
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return self._values[index]

    def __setitem__(self, key: Hashable, value: Any) -> None:
        index = self._find(key)
        if index is None:
            self.insert(key, value)
        else:
            self._values[index] = value

    def __delitem__(self, key: Hashable) -> None:
        self.remove_at(self.index_of(key))

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._keys))

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"OrderedHashMap({{{body}}})"

    @property
    def capacity(self) -> int:
        return self._cap

    def insert(self, key: Hashable, value: Any) -> bool:
        """Add a new entry; return False and change nothing if the key exists."""
        if self._find(key) is not None:
            return False
        if len(self._keys) >= self._cap:
            self.rehash(self._cap * 2)
        hashed = self._hash(key)
        index = len(self._keys)
        self._keys.append(key)
        self._values.append(value)
        self._hashes.append(hashed)
        self._bucket(hashed).append(index)
        return True

    def get(self, key: Hashable, default: Any = None) -> Any:
        index = self._find(key)
        return default if index is None else self._values[index]

    def index_of(self, key: Hashable) -> int:
        """Position of ``key`` in insertion order."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return index

    def index_of_value(self, value: Any) -> int:
        """Position of the first entry whose value equals ``value``."""
        for index, stored in enumerate(self._values):
            if stored == value:
                return index
        raise ValueError(f"{value!r} is not in the map")

    def key_of(self, value: Any) -> Hashable:
        """Key of the first entry whose value equals ``value``."""
        return self._keys[self.index_of_value(value)]

    def get_at(self, index: int) -> Any:
        self._check_index(index)
        return self._values[index]

    def set_at(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._values[index] = value

    def remove_at(self, index: int) -> tuple[Hashable, Any]:
        """Remove the entry at ``index`` and return its key and value."""
        self._check_index(index)
        self._bucket(self._hashes[index]).remove(index)
        key = self._keys.pop(index)
        value = self._values.pop(index)
        self._hashes.pop(index)
        for bucket in self._buckets:
            bucket[:] = [i - 1 if i > index else i for i in bucket]
        return key, value

    def rehash(self, new_size: int) -> None:
        """Rebuild the buckets for a table of ``new_size`` slots."""
        if new_size < max(len(self._keys), 1):
            raise ValueError("new size cannot hold the current entries")
        self._cap = new_size
        self._buckets = [[] for _ in range(new_size)]
        for index, hashed in enumerate(self._hashes):
            self._bucket(hashed).append(index)

    def keys(self) -> list[Hashable]:
        return list(self._keys)

    def values(self) -> list[Any]:
        return list(self._values)

    def items(self) -> list[tuple[Hashable, Any]]:
        return list(zip(self._keys, self._values))

    def clear(self) -> None:
        """Remove every entry, keeping the current capacity."""
        self._keys.clear()
        self._values.clear()
        self._hashes.clear()
        self._buckets = [[] for _ in range(self._cap)]

    def _hash(self, key: Hashable) -> int:
        return hash((self._seed, key))

    def _bucket(self, hashed: int) -> list[int]:
        return self._buckets[hashed & (self._cap - 1)]

    def _find(self, key: Hashable) -> Optional[int]:
        hashed = self._hash(key)
        for index in self._bucket(hashed):
            if self._hashes[index] == hashed and self._keys[index] == key:
                return index
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._keys):
            raise IndexError(f"entry index {index} out of range")