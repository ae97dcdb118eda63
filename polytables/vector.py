"""A growable array that counts the elementary operations it performs."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class CountingVector(Generic[T]):
    """Dynamic array with doubling growth and an operation counter."""

    def __init__(self, size: int = 0, value: T | None = None) -> None:
        self._data: list[T | None] = [value] * size
        self._capacity = size
        self._operations = 0
        if size:
            self._operations += size + 2

    def _grow(self, new_capacity: int) -> None:
        self._operations += 2 * len(self._data) + 3
        self._capacity = new_capacity

    def __getitem__(self, index: int) -> T:
        self._operations += 1
        return self._data[index]  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CountingVector({self._data!r})"

    def at(self, index: int) -> T:
        """Return the element at ``index``, checking the bounds."""
        if not 0 <= index < len(self._data):
            raise IndexError("Index out of range")
        self._operations += 1
        return self._data[index]  # type: ignore[return-value]

    def append(self, value: T) -> None:
        """Add ``value`` at the end, doubling the capacity when full."""
        if len(self._data) >= self._capacity:
            self._grow(1 if self._capacity == 0 else self._capacity * 2)
        self._data.append(value)
        self._operations += 2

    def erase(self, index: int) -> None:
        """Remove the element at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < len(self._data):
            return
        self._operations += len(self._data) - 1 - index
        del self._data[index]
        self._operations += 2

    def operations_count(self) -> int:
        """Number of operations counted since the last reset."""
        return self._operations

    def reset_operations_count(self) -> None:
        """Set the operation counter back to zero."""
        self._operations = 0