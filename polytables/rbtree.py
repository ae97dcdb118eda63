"""A red-black search tree table."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from polytables.base import Table
from polytables.polynom import Polynom


class _Color(Enum):
    RED = "red"
    BLACK = "black"


class _Node:
    __slots__ = ("key", "value", "color", "left", "right", "parent")

    def __init__(self, key: str, value: Polynom, color: _Color) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.left: _Node = self
        self.right: _Node = self
        self.parent: _Node = self


class RBTreeTable(Table):
    """Red-black tree keyed by strings; duplicate keys are stored separately."""

    def __init__(self) -> None:
        super().__init__()
        self._nil = _Node("", Polynom(), _Color.BLACK)
        self._root = self._nil

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y
        self._operations += 8

    def _rotate_right(self, y: _Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self._nil:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x
        self._operations += 8

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
            self._operations += 1
        return node

    def _transplant(self, u: _Node, v: _Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent
        self._operations += 4

    def _find(self, key: str) -> _Node | None:
        current = self._root
        while current is not self._nil:
            if self._equal(key, current.key):
                return current
            current = current.left if self._less(key, current.key) else current.right
            self._operations += 1
        return None

    def _fix_insert(self, z: _Node) -> None:
        red, black = _Color.RED, _Color.BLACK
        while z.parent.color is red:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is red:
                    z.parent.color = black
                    uncle.color = black
                    grand.color = red
                    z = grand
                    self._operations += 4
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = black
                    z.parent.parent.color = red
                    self._rotate_right(z.parent.parent)
                    self._operations += 3
            else:
                uncle = grand.left
                if uncle.color is red:
                    z.parent.color = black
                    uncle.color = black
                    grand.color = red
                    z = grand
                    self._operations += 4
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = black
                    z.parent.parent.color = red
                    self._rotate_left(z.parent.parent)
                    self._operations += 3
        self._root.color = black

    def _fix_delete(self, x: _Node) -> None:
        red, black = _Color.RED, _Color.BLACK
        while x is not self._root and x.color is black:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is red:
                    w.color = black
                    x.parent.color = red
                    self._rotate_left(x.parent)
                    w = x.parent.right
                    self._operations += 4
                if w.left.color is black and w.right.color is black:
                    w.color = red
                    x = x.parent
                    self._operations += 2
                else:
                    if w.right.color is black:
                        w.left.color = black
                        w.color = red
                        self._rotate_right(w)
                        w = x.parent.right
                        self._operations += 4
                    w.color = x.parent.color
                    x.parent.color = black
                    w.right.color = black
                    self._rotate_left(x.parent)
                    x = self._root
                    self._operations += 5
            else:
                w = x.parent.left
                if w.color is red:
                    w.color = black
                    x.parent.color = red
                    self._rotate_right(x.parent)
                    w = x.parent.left
                    self._operations += 4
                if w.right.color is black and w.left.color is black:
                    w.color = red
                    x = x.parent
                    self._operations += 2
                else:
                    if w.left.color is black:
                        w.right.color = black
                        w.color = red
                        self._rotate_left(w)
                        w = x.parent.left
                        self._operations += 4
                    w.color = x.parent.color
                    x.parent.color = black
                    w.left.color = black
                    self._rotate_right(x.parent)
                    x = self._root
                    self._operations += 5
        x.color = black

    def insert(self, key: str, value: Polynom) -> None:
        """Add ``value`` under ``key``; an existing key is not replaced."""
        nil = self._nil
        z = _Node(key, Polynom(value), _Color.RED)
        z.left = z.right = nil
        parent = nil
        current = self._root
        while current is not nil:
            parent = current
            current = current.left if self._less(z.key, current.key) else current.right
            self._operations += 1
        z.parent = parent
        if parent is nil:
            self._root = z
        elif self._less(z.key, parent.key):
            parent.left = z
        else:
            parent.right = z
        self._fix_insert(z)

    def contains(self, key: str) -> bool:
        """Whether ``key`` is present."""
        return self._find(key) is not None

    def get(self, key: str) -> Polynom:
        """Return a copy of a value stored under ``key``."""
        node = self._find(key)
        if node is None:
            raise KeyError("Key not found")
        return Polynom(node.value)

    def remove(self, key: str) -> None:
        """Remove one entry for ``key``; do nothing if it is absent."""
        z = self._find(key)
        if z is None:
            return
        nil = self._nil
        y = z
        original_color = y.color
        if z.left is nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            original_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        self._operations += 10
        if original_color is _Color.BLACK:
            self._fix_delete(x)

    def _keys(self) -> Iterator[str]:
        def walk(node: _Node) -> Iterator[str]:
            if node is self._nil:
                return
            yield from walk(node.left)
            yield node.key
            yield from walk(node.right)

        return walk(self._root)

    def _height(self) -> int:
        def depth(node: _Node) -> int:
            if node is self._nil:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self._root)

    def _validate(self) -> int:
        """Check the red-black rules and return the black height."""
        if self._root.color is not _Color.BLACK:
            raise ValueError("root is red")

        def black_height(node: _Node) -> int:
            if node is self._nil:
                return 1
            if node.color is _Color.RED and (
                node.left.color is _Color.RED or node.right.color is _Color.RED
            ):
                raise ValueError("red node with red child")
            left = black_height(node.left)
            if left != black_height(node.right):
                raise ValueError("unequal black heights")
            return left + (1 if node.color is _Color.BLACK else 0)

        return black_height(self._root)