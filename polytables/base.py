"""The common interface of the tables, with operation counting."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from polytables.polynom import Polynom


class Table(ABC):
    """A map from string keys to polynomials that counts its work."""

    def __init__(self) -> None:
        self._operations = 0

    @abstractmethod
    def insert(self, key: str, value: Polynom) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Whether ``key`` is present."""

    @abstractmethod
    def get(self, key: str) -> Polynom:
        """Return the value for ``key``; raise KeyError if it is absent."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove ``key`` if present."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def log_operation(self, name: str, out: TextIO | None = None) -> None:
        """Write the operation count for ``name`` and reset the counter."""
        stream = sys.stdout if out is None else out
        stream.write(
            f"[{type(self).__name__}] {name} operations: {self._operations}\n"
        )
        self.reset_operations_count()

    def operations_count(self) -> int:
        """Number of operations counted since the last reset."""
        return self._operations

    def reset_operations_count(self) -> None:
        """Set the operation counter back to zero."""
        self._operations = 0

    def _less(self, a: str, b: str) -> bool:
        self._operations += 1
        return a < b

    def _less_or_equal(self, a: str, b: str) -> bool:
        self._operations += 1
        return a <= b

    def _greater(self, a: str, b: str) -> bool:
        self._operations += 1
        return a > b

    def _greater_or_equal(self, a: str, b: str) -> bool:
        self._operations += 1
        return a >= b

    def _equal(self, a: str, b: str) -> bool:
        self._operations += 1
        return a == b

    def _not_equal(self, a: str, b: str) -> bool:
        self._operations += 1
        return a != b