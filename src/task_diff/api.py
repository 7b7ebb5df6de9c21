"""Public API functions for task-diff.

This module provides the four user-facing functions: compare, diff_text,
has_changes and render_diff.  Each call creates a fresh TaskDiffer to
guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from task_diff.algorithm.config import DiffConfig
from task_diff.comparator import TaskDiffer
from task_diff.result import DiffResult

__all__ = ["compare", "diff_text", "has_changes", "render_diff"]


def compare(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Normalize and diff two parsed documents.

    Normalization runs here, so pass documents as parsed (for example from
    ``parse_pair``), not the output of ``normalize()``.

    Args:
        left:   First document (dict or list).
        right:  Second document, same kind as ``left``.
        config: Pipeline parameters. Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``DiffResult`` holding the diff lines and timing.

    Raises:
        NormalizationError: If a normalized sub-tree is malformed.
        TypeMismatchError: If the documents have different shapes.
    """
    return TaskDiffer(config=config).compare(left, right)


def diff_text(
    text: str,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Extract two documents from ``"<doc>" => "<doc>"`` text and diff them.

    Raises:
        InputError: If the documents cannot be extracted or parsed.
        NormalizationError: If a normalized sub-tree is malformed.
        TypeMismatchError: If the documents have different shapes.
    """
    return TaskDiffer(config=config).compare_text(text)


def has_changes(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if the diff of the two documents is not empty."""
    return compare(left, right, config=config).has_changes


def render_diff(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> list[str]:
    """Return the rendered diff lines of two documents.

    Args:
        left:   First document.
        right:  Second document.
        config: Pipeline parameters; ``config.indent`` sets the width of one
                nesting level.

    Returns:
        One string per diff line, e.g. ``['~ "q": "x" => "y"']``.
    """
    return compare(left, right, config=config).render()
