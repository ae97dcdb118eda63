# polytables

Symbol tables that map string names to polynomials in three variables
(x, y, z). Every table counts the elementary operations it performs, so the
same workload can be run against different table structures and the counts
compared.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Polynomials (`polytables.polynom`)

A `Monom` is a frozen dataclass holding a packed `degree` and a coefficient
`k`. The hundreds digit of the degree is the power of x, the tens digit the
power of y and the units digit the power of z. Each power may be at most
`Monom.MAX_DEG` (9); a negative or out-of-range degree raises `DegreeError`,
a subclass of `ValueError`.

```python
from polytables.polynom import Monom, Polynom

m = Monom(321, 2.0)                 # 2 * x^3 * y^2 * z
m.x_deg(), m.y_deg(), m.z_deg()     # (3, 2, 1)

Monom(10, 3.0) + Monom(10, 1.0)     # Monom(degree=10, k=4.0)
Monom(10, 3.0) - Monom(10, 3.0)     # Monom(degree=0, k=0.0)
Monom(100, 2.0) * Monom(11, 3.0)    # Monom(degree=111, k=6.0)
2 * Monom(5, 1.5)                   # Monom(degree=5, k=3.0)
```

- Adding or subtracting monomials of different degrees raises `ValueError`.
- Multiplying two monomials whose combined power of any variable would
  exceed 9 raises `DegreeError`.
- Any result with a zero coefficient becomes `Monom(0, 0.0)`.

A `Polynom` is an ordered sequence of monomials, expected to run from the
highest degree to the lowest. It supports `len()`, iteration, `append()` and
equality (monomial by monomial). It is not hashable.

```python
p = Polynom([Monom(200, 1.0), Monom(10, 3.0)])   # x^2 + 3y
q = Polynom([Monom(10, -3.0), Monom(0, 5.0)])    # -3y + 5

p + q               # merge by degree; equal degrees are added
p * 2.0             # scale every coefficient
p * Monom(1, 1.0)   # multiply every term by a monomial
p * q               # full product, built by repeated addition
```

Addition merges the two sequences by degree; terms that cancel are kept as
`Monom(0, 0.0)` rather than dropped.

## Counting vector (`polytables.vector`)

`CountingVector(size=0, value=None)` is a growable array with doubling
capacity that counts its work:

- `append(value)`, `v[index]`, `len(v)`
- `at(index)` raises `IndexError` when the index is out of range
- `erase(index)` removes an element and ignores out-of-range indices
- `operations_count()` and `reset_operations_count()`

## Tables

All tables derive from `polytables.base.Table` and share this interface:

- `insert(key, value)`
- `contains(key)` and `key in table`
- `get(key)` returns a copy of the stored polynomial; raises `KeyError` when
  the key is absent
- `remove(key)` does nothing when the key is absent
- `operations_count()` and `reset_operations_count()`
- `log_operation(name, out=None)` writes a line such as
  `[RBTreeTable] insert operations: 12` to `out` (standard output by default)
  and resets the counter

```python
import sys
from polytables.unordered import UnorderedArrayTable
from polytables.chained import ChainedHashTable
from polytables.rbtree import RBTreeTable

for table in (UnorderedArrayTable(), ChainedHashTable(16), RBTreeTable()):
    table.insert("p", p)
    table.insert("q", q)
    assert "p" in table
    table.log_operation("insert", sys.stdout)
    table.remove("q")
```

The tables differ in how they treat a key that is inserted twice:

- `UnorderedArrayTable` (`polytables.unordered`) appends pairs to a
  `CountingVector` and searches linearly. Inserting never checks for an
  existing key; `get` and `remove` act on the first matching entry.
- `ChainedHashTable` (`polytables.chained`) hashes the UTF-8 bytes of the key
  with 64-bit djb2 and chains entries in per-bucket lists. Inserting an
  existing key replaces its value. Before each insert, if the load factor
  exceeds 0.75 the capacity doubles. `size()`, `capacity()` and
  `load_factor()` report its state; an initial capacity below 1 raises
  `ValueError`.
- `RBTreeTable` (`polytables.rbtree`) is a red-black tree ordered by key.
  Inserting an existing key adds a second entry rather than replacing the
  first; `remove` removes one entry at a time.

## What this package does not do

It is a library only: there is no command-line program, and tables live in
memory only, with no saving to or loading from files.