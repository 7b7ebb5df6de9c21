"""Tests for the value model: kind_of, values_equal and to_text.

Covers all JSON kinds, bool/int dispatch ordering, int/float separation,
order-insensitive object equality, positional array equality, canonical
compact serialization and TypeError on invalid input.
"""

from __future__ import annotations

import pytest

from task_diff.tree.kinds import ValueKind, kind_of, to_text, values_equal

# ---------------------------------------------------------------------------
# kind_of
# ---------------------------------------------------------------------------


class TestKindOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOL),
            (False, ValueKind.BOOL),
            (0, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ([], ValueKind.ARRAY),
            ({}, ValueKind.OBJECT),
        ],
    )
    def test_classifies_every_json_kind(self, value: object, expected: ValueKind) -> None:
        assert kind_of(value) == expected

    def test_bool_is_not_a_number(self) -> None:
        # bool subclasses int in Python
        assert kind_of(True) != ValueKind.NUMBER

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            kind_of({1, 2})

    def test_kind_values_are_lowercase_names(self) -> None:
        assert ValueKind.OBJECT == "object"
        assert ValueKind.ARRAY == "array"
        assert len(list(ValueKind)) == 6


# ---------------------------------------------------------------------------
# values_equal
# ---------------------------------------------------------------------------


class TestValuesEqual:
    def test_identical_scalars(self) -> None:
        assert values_equal("x", "x")
        assert values_equal(None, None)
        assert values_equal(3, 3)

    def test_bool_never_equals_number(self) -> None:
        assert not values_equal(True, 1)
        assert not values_equal(0, False)

    def test_int_and_float_are_distinct(self) -> None:
        assert not values_equal(1, 1.0)
        assert values_equal(1.0, 1.0)

    def test_nan_equals_itself(self) -> None:
        nan = float("nan")
        assert values_equal(nan, nan)

    def test_object_key_order_is_ignored(self) -> None:
        assert values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_object_with_extra_key_differs(self) -> None:
        assert not values_equal({"a": 1}, {"a": 1, "b": 2})

    def test_array_order_matters(self) -> None:
        assert not values_equal([1, 2], [2, 1])

    def test_array_length_matters(self) -> None:
        assert not values_equal([1], [1, 1])

    def test_deep_nesting(self) -> None:
        left = {"a": [{"b": {"c": [1, None, "x"]}}]}
        right = {"a": [{"b": {"c": [1, None, "x"]}}]}
        assert values_equal(left, right)
        right["a"][0]["b"]["c"][2] = "y"
        assert not values_equal(left, right)

    def test_object_vs_array(self) -> None:
        assert not values_equal({}, [])


# ---------------------------------------------------------------------------
# to_text
# ---------------------------------------------------------------------------


class TestToText:
    def test_compact_array(self) -> None:
        assert to_text([1, 2, 3]) == "[1,2,3]"

    def test_compact_object_keeps_insertion_order(self) -> None:
        assert to_text({"b": 1, "a": [True, None]}) == '{"b":1,"a":[true,null]}'

    def test_string_is_quoted(self) -> None:
        assert to_text("x") == '"x"'

    def test_float_keeps_decimal_point(self) -> None:
        assert to_text(1.0) == "1.0"

    def test_non_ascii_is_verbatim(self) -> None:
        assert to_text("café") == '"café"'

    def test_quotes_are_escaped(self) -> None:
        assert to_text('say "hi"') == '"say \\"hi\\""'
