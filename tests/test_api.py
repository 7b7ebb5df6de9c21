"""Unit tests for the public API functions: compare, diff_text, has_changes, render_diff."""

from __future__ import annotations

import json

import pytest

from task_diff import (
    DiffConfig,
    DiffResult,
    NormalizationError,
    TypeMismatchError,
    compare,
    diff_text,
    has_changes,
    parse_pair,
    render_diff,
)


class TestCompare:
    """Tests for the compare() function."""

    def test_identical_documents_have_no_lines(self) -> None:
        result = compare({"a": 1}, {"a": 1})
        assert isinstance(result, DiffResult)
        assert result.lines == ()

    def test_changed_documents(self) -> None:
        result = compare({"a": 1}, {"a": 2})
        assert result.render() == ['~ "a": 1 => 2']

    def test_config_passthrough_indent(self) -> None:
        result = compare({"a": {"b": 1}}, {"a": {}}, config=DiffConfig(indent=1))
        assert result.render() == ['"a": {', ' - "b": 1', "}"]

    def test_config_passthrough_normalize_key(self) -> None:
        left = {"environment": [{"name": "a", "value": "1"}]}
        with pytest.raises(NormalizationError):
            compare(left, {"environment": "raw"})
        result = compare(left, {"environment": "raw"}, config=DiffConfig(normalize_key=None))
        assert result.render() == ['~ "environment": [{"name":"a","value":"1"}] => "raw"']

    def test_shape_mismatch(self) -> None:
        with pytest.raises(TypeMismatchError):
            compare({}, [])

    def test_no_global_state_between_calls(self) -> None:
        r1 = compare({"a": 1}, {"b": 1})
        r2 = compare({"a": 1}, {"b": 1})
        assert r1.lines == r2.lines


class TestHasChanges:
    def test_false_for_identical(self) -> None:
        assert has_changes({"k": {"a": 1}}, {"k": {"a": 1}}) is False

    def test_true_for_changed(self) -> None:
        assert has_changes([1], [2]) is True


class TestRenderDiff:
    def test_full_document(self) -> None:
        left = {
            "image": "web:1",
            "environment": [
                {"name": "MODE", "value": "a"},
                {"name": "DEBUG", "value": "1"},
            ],
            "ports": [{"container": 80}],
        }
        right = {
            "image": "web:2",
            "environment": [{"name": "MODE", "value": "b"}],
            "ports": [{"container": 80}, {"container": 443}],
            "memory": 512,
        }
        assert render_diff(left, right) == [
            '~ "image": "web:1" => "web:2"',
            '"environment": {',
            '  ~ "MODE": "a" => "b"',
            '  - "DEBUG": "1"',
            "}",
            '"ports": [',
            "  {",
            '    + "container": 443',
            "  }",
            "]",
            '+ "memory": 512',
        ]

    def test_empty_for_identical(self) -> None:
        assert render_diff([], []) == []


class TestDiffText:
    def test_text_round_trip(self) -> None:
        result = diff_text('"[1,2]" => "[1,2,3]"')
        assert result.render() == ["~ [1,2] => [1,2,3]"]

    def test_parsed_pair_feeds_compare(self) -> None:
        left = {"environment": [{"name": "A", "value": "1"}, {"name": "B", "value": "2"}]}
        right = {"environment": [{"name": "A", "value": "1"}, {"name": "B", "value": "3"}]}
        text = f'"{json.dumps(left)}" => "{json.dumps(right)}"'
        result = compare(*parse_pair(text))
        assert result.render() == [
            '"environment": {',
            '  ~ "B": "2" => "3"',
            "}",
        ]
        assert result.lines == diff_text(text).lines
