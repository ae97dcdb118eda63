"""Polynomial symbol tables (array, chained hash, red-black tree) with operation counting."""

__version__ = "0.1.0"
__all__ = ["polynom", "vector", "base", "unordered", "chained", "rbtree"]