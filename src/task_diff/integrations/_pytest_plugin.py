"""pytest plugin for task-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from task_diff import DiffConfig, compare


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable JSON no-change asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh TaskDiffer per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged({"a": 1}, {"a": 1})

        def test_drift(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"differ"):
                assert_json_unchanged({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None``
        that raises ``AssertionError`` when the diff is not empty.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents have no structural difference.

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            config:   Optional DiffConfig (normalization key, indent).

        Raises:
            AssertionError: When the documents differ, with the rendered
                diff (expected -> actual) in the message.
        """
        result = compare(expected, actual, config=config)
        if result.has_changes:
            raise AssertionError(
                f"JSON documents differ ({len(result.lines)} lines):\n{result.text}"
            )

    return _assert
