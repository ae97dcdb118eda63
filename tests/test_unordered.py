import io

import pytest
from hypothesis import given, strategies as st

from polytables.polynom import Monom, Polynom
from polytables.unordered import UnorderedArrayTable


def poly(*terms):
    return Polynom(Monom(d, k) for d, k in terms)


def test_get_returns_inserted_value():
    table = UnorderedArrayTable()
    table.insert("a", poly((100, 2.0)))
    table.insert("b", poly((10, 3.0), (1, 1.0)))
    assert table.get("a") == poly((100, 2.0))
    assert table.get("b") == poly((10, 3.0), (1, 1.0))


def test_get_returns_independent_copy():
    table = UnorderedArrayTable()
    original = poly((100, 2.0))
    table.insert("a", original)
    original.append(Monom(1, 5.0))
    fetched = table.get("a")
    fetched.append(Monom(2, 7.0))
    assert table.get("a") == poly((100, 2.0))


def test_missing_key_raises_key_error():
    table = UnorderedArrayTable()
    table.insert("a", poly((1, 1.0)))
    with pytest.raises(KeyError):
        table.get("z")


def test_contains_and_in_operator():
    table = UnorderedArrayTable()
    table.insert("key", Polynom())
    assert table.contains("key")
    assert "key" in table
    assert not table.contains("other")
    assert "other" not in table
    assert 5 not in table


def test_remove_deletes_only_that_key():
    table = UnorderedArrayTable()
    table.insert("a", poly((1, 1.0)))
    table.insert("b", poly((2, 2.0)))
    table.remove("a")
    assert not table.contains("a")
    assert table.get("b") == poly((2, 2.0))


def test_remove_missing_key_is_ignored():
    table = UnorderedArrayTable()
    table.insert("a", poly((1, 1.0)))
    table.remove("missing")
    assert table.get("a") == poly((1, 1.0))


def test_duplicate_keys_resolve_to_first_entry():
    table = UnorderedArrayTable()
    table.insert("k", poly((1, 1.0)))
    table.insert("k", poly((2, 2.0)))
    assert table.get("k") == poly((1, 1.0))
    table.remove("k")
    assert table.get("k") == poly((2, 2.0))
    table.remove("k")
    assert not table.contains("k")


def test_operation_count_grows_and_resets():
    table = UnorderedArrayTable()
    assert table.operations_count() == 0
    table.insert("a", Polynom())
    after_one = table.operations_count()
    assert after_one > 0
    table.insert("b", Polynom())
    assert table.operations_count() > after_one
    table.reset_operations_count()
    assert table.operations_count() == 0


def test_search_counts_one_comparison_per_entry_scanned():
    table = UnorderedArrayTable()
    for key in ["a", "b", "c", "d"]:
        table.insert(key, Polynom())
    table.reset_operations_count()
    table.contains("zzz")
    assert table.operations_count() == 4


def test_log_operation_writes_count_and_resets():
    table = UnorderedArrayTable()
    table.insert("a", Polynom())
    count = table.operations_count()
    out = io.StringIO()
    table.log_operation("insert", out)
    assert out.getvalue() == f"[UnorderedArrayTable] insert operations: {count}\n"
    assert table.operations_count() == 0


keys = st.text(alphabet="abcde", min_size=0, max_size=3)


@given(st.lists(st.tuples(st.booleans(), keys, st.integers(0, 9))))
def test_behaves_like_list_of_pairs(ops):
    table = UnorderedArrayTable()
    model = []
    for is_insert, key, deg in ops:
        if is_insert:
            value = poly((deg, 1.0))
            table.insert(key, value)
            model.append((key, value))
        else:
            table.remove(key)
            for index, (k, _) in enumerate(model):
                if k == key:
                    del model[index]
                    break
    for key in {k for _, k, _ in ops}:
        expected = next((v for k, v in model if k == key), None)
        assert table.contains(key) == (expected is not None)
        if expected is not None:
            assert table.get(key) == expected