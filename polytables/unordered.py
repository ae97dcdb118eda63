"""A table kept as an unsorted array of key-value pairs."""

from __future__ import annotations

from polytables.base import Table
from polytables.polynom import Polynom
from polytables.vector import CountingVector


class UnorderedArrayTable(Table):
    """Linear-search table over a counting dynamic array.

    Inserting never checks for an existing key; lookups and removals act on
    the first matching entry.
    """

    def __init__(self) -> None:
        super().__init__()
        self._data: CountingVector[tuple[str, Polynom]] = CountingVector()

    def _absorb_vector_operations(self) -> None:
        self._operations += self._data.operations_count()
        self._data.reset_operations_count()

    def _find(self, key: str) -> int | None:
        # Indexed access is deliberate: every element read is counted.
        for index in range(len(self._data)):
            if self._equal(self._data[index][0], key):
                return index
        return None

    def insert(self, key: str, value: Polynom) -> None:
        """Append ``value`` under ``key``."""
        self._data.append((key, Polynom(value)))
        self._absorb_vector_operations()
        self._operations += 1

    def contains(self, key: str) -> bool:
        """Whether ``key`` is present."""
        return self._find(key) is not None

    def get(self, key: str) -> Polynom:
        """Return a copy of the first value stored under ``key``."""
        index = self._find(key)
        if index is None:
            raise KeyError("Key not found")
        return Polynom(self._data[index][1])

    def remove(self, key: str) -> None:
        """Remove the first entry for ``key``; do nothing if it is absent."""
        index = self._find(key)
        if index is None:
            return
        self._data.erase(index)
        self._absorb_vector_operations()