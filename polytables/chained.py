"""A hash table with separate chaining and doubling growth."""

from __future__ import annotations

from polytables.base import Table
from polytables.polynom import Polynom

_HASH_MASK = (1 << 64) - 1


def _djb2(key: str) -> int:
    """64-bit djb2 hash over the UTF-8 bytes of ``key``, read as signed chars."""
    value = 5381
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = (value * 33 + char) & _HASH_MASK
    return value


class ChainedHashTable(Table):
    """Hash table whose buckets are lists; it doubles when the load exceeds 0.75."""

    def __init__(self, initial_capacity: int = 16) -> None:
        super().__init__()
        if initial_capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = initial_capacity
        self._size = 0
        self._buckets: list[list[tuple[str, Polynom]]] = [
            [] for _ in range(initial_capacity)
        ]
        self._operations += initial_capacity

    def _index(self, key: str) -> int:
        return _djb2(key) % self._capacity

    def _rehash(self) -> None:
        new_capacity = self._capacity * 2
        new_buckets: list[list[tuple[str, Polynom]]] = [
            [] for _ in range(new_capacity)
        ]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[_djb2(entry[0]) % new_capacity].append(entry)
                self._operations += 3
        self._buckets = new_buckets
        self._capacity = new_capacity
        self._operations += self._capacity + self._size

    def _locate(self, key: str) -> tuple[list[tuple[str, Polynom]], int | None]:
        bucket = self._buckets[self._index(key)]
        self._operations += 1
        for position, (stored, _) in enumerate(bucket):
            if self._equal(stored, key):
                return bucket, position
            self._operations += 1
        return bucket, None

    def insert(self, key: str, value: Polynom) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if self.load_factor() > 0.75:
            self._rehash()
        bucket, position = self._locate(key)
        if position is not None:
            bucket[position] = (key, Polynom(value))
            self._operations += 2
            return
        bucket.append((key, Polynom(value)))
        self._size += 1
        self._operations += 3

    def contains(self, key: str) -> bool:
        """Whether ``key`` is present."""
        return self._locate(key)[1] is not None

    def get(self, key: str) -> Polynom:
        """Return a copy of the value stored under ``key``."""
        bucket, position = self._locate(key)
        if position is None:
            raise KeyError("Key not found")
        return Polynom(bucket[position][1])

    def remove(self, key: str) -> None:
        """Remove ``key`` if present."""
        bucket, position = self._locate(key)
        if position is None:
            return
        del bucket[position]
        self._size -= 1
        self._operations += 3

    def load_factor(self) -> float:
        """Stored entries per bucket."""
        return self._size / self._capacity

    def size(self) -> int:
        """Number of stored keys."""
        return self._size

    def capacity(self) -> int:
        """Number of buckets."""
        return self._capacity