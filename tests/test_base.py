import io
import operator

import pytest

from polytables.base import Table
from polytables.polynom import Monom, Polynom


class ListTable(Table):
    def __init__(self):
        super().__init__()
        self._items = []

    def insert(self, key, value):
        self._items.append((key, value))

    def contains(self, key):
        return any(self._equal(k, key) for k, _ in self._items)

    def get(self, key):
        for k, v in self._items:
            if self._equal(k, key):
                return v
        raise KeyError(key)

    def remove(self, key):
        self._items = [(k, v) for k, v in self._items if not self._equal(k, key)]


def test_table_is_abstract():
    with pytest.raises(TypeError):
        Table()


def test_counter_starts_at_zero():
    t = ListTable()
    assert Table.operations_count(t) == 0


def test_contains_counts_comparisons():
    t = ListTable()
    keys = ["a", "b", "c", "d"]
    for k in keys:
        t.insert(k, Polynom())
    assert t.contains("zzz") is False
    assert t.operations_count() == len(keys)


def test_dunder_contains_uses_contains():
    t = ListTable()
    t.insert("p", Polynom([Monom(1, 1.0)]))
    assert "p" in t
    assert "q" not in t
    assert 5 not in t


def test_get_round_trip_and_missing():
    t = ListTable()
    value = Polynom([Monom(12, 3.0)])
    t.insert("p", value)
    assert t.get("p") == value
    with pytest.raises(KeyError):
        t.get("missing")


@pytest.mark.parametrize(
    "method, op",
    [
        ("_less", operator.lt),
        ("_less_or_equal", operator.le),
        ("_greater", operator.gt),
        ("_greater_or_equal", operator.ge),
        ("_equal", operator.eq),
        ("_not_equal", operator.ne),
    ],
)
@pytest.mark.parametrize("a, b", [("a", "b"), ("b", "a"), ("x", "x")])
def test_comparisons_count_one_each(method, op, a, b):
    t = ListTable()
    compare = getattr(Table, method)
    assert compare(t, a, b) == op(a, b)
    assert Table.operations_count(t) == 1


def test_log_operation_format_and_reset():
    t = ListTable()
    t.insert("a", Polynom())
    t.contains("b")
    count = t.operations_count()
    out = io.StringIO()
    t.log_operation("search", out)
    assert out.getvalue() == f"[ListTable] search operations: {count}\n"
    assert t.operations_count() == 0


def test_log_operation_defaults_to_stdout(capsys):
    t = ListTable()
    Table.log_operation(t, "insert")
    assert capsys.readouterr().out == "[ListTable] insert operations: 0\n"


def test_reset_operations_count():
    t = ListTable()
    t.insert("a", Polynom())
    t.contains("a")
    t.reset_operations_count()
    assert t.operations_count() == 0