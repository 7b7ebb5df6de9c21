"""Exception hierarchy for task-diff.

Every failure is deterministic and raised straight to the caller; nothing is
retried and no partial result is produced.
"""

from __future__ import annotations

__all__ = [
    "InputError",
    "NormalizationError",
    "TaskDiffError",
    "TypeMismatchError",
]


class TaskDiffError(Exception):
    """Base class for all task-diff errors."""


class TypeMismatchError(TaskDiffError, TypeError):
    """Raised when ``diff`` is asked to compare values of different shapes.

    Attributes:
        left_kind:  Kind of the left value (e.g. ``"object"``).
        right_kind: Kind of the right value (e.g. ``"array"``).
    """

    def __init__(self, left_kind: str, right_kind: str) -> None:
        self.left_kind = left_kind
        self.right_kind = right_kind
        super().__init__(
            f"Different types cannot be compared: {left_kind} vs {right_kind}"
        )


class NormalizationError(TaskDiffError, ValueError):
    """Raised when a normalized sub-tree is not well formed.

    Attributes:
        path: JSON Pointer (RFC 6901) of the offending sub-tree, "" for root.
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        location = path or "/"
        super().__init__(f"{message} (at {location})")


class InputError(TaskDiffError, ValueError):
    """Raised when two documents cannot be extracted from free text."""
