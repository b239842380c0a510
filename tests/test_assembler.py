"""Tests for row assembly."""

import logging

import pytest

from csv_nest import ShapeMismatchError, assemble_row, assemble_rows, to_python
from csv_nest.values import VDict, VList, VText


# ---------------------------------------------------------------------------
# assemble_row
# ---------------------------------------------------------------------------

def test_flat_headers_are_keys():
    doc = assemble_row(["name", "age"], ["Joe", "36"])
    assert doc == VDict({"name": VText("Joe"), "age": VText("36")})
    assert list(doc.entries) == ["name", "age"]

def test_no_separator_keeps_dots():
    doc = assemble_row(["a.b"], ["1"])
    assert to_python(doc) == {"a.b": "1"}

def test_nesting():
    doc = assemble_row(["a.b", "a.c"], ["1", "2"], ".")
    assert to_python(doc) == {"a": {"b": "1", "c": "2"}}

def test_duplicate_scalar_keys():
    doc = assemble_row(["x", "x"], ["1", "2"])
    assert to_python(doc) == {"x": ["1", "2"]}

def test_repeated_merges_stay_flat():
    doc = assemble_row(["x", "x", "x"], ["1", "2", "3"])
    assert to_python(doc) == {"x": ["1", "2", "3"]}

def test_nested_merge_union():
    doc = assemble_row(["a.b", "a.c", "a.b"], ["1", "2", "3"], ".")
    assert to_python(doc) == {"a": {"b": ["1", "3"], "c": "2"}}

def test_scalar_then_nested_same_key():
    doc = assemble_row(["a", "a.b"], ["1", "2"], ".")
    assert doc == VDict({"a": VList([VText("1"), VDict({"b": VText("2")})])})

def test_first_insertion_order():
    doc = assemble_row(["b.x", "a", "b.y"], ["1", "2", "3"], ".")
    assert list(doc.entries) == ["b", "a"]
    assert list(doc.entries["b"].entries) == ["x", "y"]

def test_legacy_paths():
    doc = assemble_row(["a/b/c"], ["1"], "/", legacy=True)
    assert to_python(doc) == {"a": {"b.c": "1"}}

def test_empty_row():
    assert assemble_row([], []) == VDict({})

def test_shape_mismatch():
    with pytest.raises(ShapeMismatchError) as info:
        assemble_row(["a", "b"], ["1"])
    assert info.value.expected == 2
    assert info.value.actual == 1
    assert info.value.row_number is None


# ---------------------------------------------------------------------------
# assemble_rows
# ---------------------------------------------------------------------------

class TestAssembleRows:
    def test_rows_are_independent(self):
        headers = ["a.b", "a.b"]
        first, second = assemble_rows(headers, [["1", "2"], ["3", "4"]], ".")
        assert to_python(first) == {"a": {"b": ["1", "2"]}}
        assert to_python(second) == {"a": {"b": ["3", "4"]}}
        first.entries["a"].entries["b"].items.append(VText("9"))
        assert to_python(second) == {"a": {"b": ["3", "4"]}}

    def test_malformed_rows_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="csv_nest.assembler"):
            docs = list(assemble_rows(["a", "b"], [["1", "2"], ["3"], ["4", "5"]]))
        assert [to_python(d) for d in docs] == [{"a": "1", "b": "2"}, {"a": "4", "b": "5"}]
        assert "Skipping row 2" in caplog.text

    def test_malformed_rows_strict(self):
        rows = [["1", "2"], ["3", "4", "5"]]
        with pytest.raises(ShapeMismatchError) as info:
            list(assemble_rows(["a", "b"], rows, skip_malformed=False))
        assert info.value.row_number == 2
        assert "row 2 has 3 cells, expected 2" in str(info.value)

    def test_lazy(self):
        def rows():
            yield ["1"]
            raise AssertionError("should not be consumed")

        docs = assemble_rows(["a"], rows())
        assert to_python(next(docs)) == {"a": "1"}
