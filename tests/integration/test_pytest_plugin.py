"""Integration tests for the task-diff pytest plugin.

These tests verify that the assert_json_unchanged fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require task-diff to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from task_diff import DiffConfig


def test_fixture_passes_identical_docs(assert_json_unchanged: Any) -> None:
    """Identical documents, even with reordered keys, should pass."""
    assert_json_unchanged({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})


def test_fixture_passes_reordered_environment(assert_json_unchanged: Any) -> None:
    """Environment pairs in a different order are not a change."""
    assert_json_unchanged(
        {"environment": [{"name": "A", "value": "1"}, {"name": "B", "value": "2"}]},
        {"environment": [{"name": "B", "value": "2"}, {"name": "A", "value": "1"}]},
    )


def test_fixture_fails_on_change(assert_json_unchanged: Any) -> None:
    """Changed documents should raise AssertionError."""
    with pytest.raises(AssertionError, match=r"differ"):
        assert_json_unchanged({"a": 2}, {"a": 1})


def test_fixture_error_message_contains_diff(assert_json_unchanged: Any) -> None:
    """The message shows the rendered diff from expected to actual."""
    with pytest.raises(AssertionError) as exc_info:
        assert_json_unchanged({"a": 2, "c": 3}, {"a": 1})

    message = str(exc_info.value)
    assert '~ "a": 1 => 2' in message
    assert '+ "c": 3' in message


def test_fixture_custom_config(assert_json_unchanged: Any) -> None:
    """Custom DiffConfig parameter should be forwarded to compare()."""
    with pytest.raises(AssertionError):
        assert_json_unchanged(
            {"environment": [{"name": "A", "value": "1"}, {"name": "B", "value": "2"}]},
            {"environment": [{"name": "B", "value": "2"}, {"name": "A", "value": "1"}]},
            config=DiffConfig(normalize_key=None),
        )


def test_fixture_returns_callable(assert_json_unchanged: Any) -> None:
    """The fixture should return a callable, not a direct assertion result."""
    assert callable(assert_json_unchanged)


def test_plugin_discovery() -> None:
    """Verify assert_json_unchanged appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_unchanged" in result.stdout, (
        f"assert_json_unchanged not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
