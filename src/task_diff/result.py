"""DiffResult dataclass for comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from task_diff.algorithm.lines import DEFAULT_INDENT, Line, render

__all__ = ["DiffResult"]


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Result of a compare() call.

    Attributes:
        lines: Diff lines in output order.  Empty when the documents are
            identical.  Never contains an UNCHANGED sentinel.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds.
        indent: Spaces per nesting level used by ``render()`` by default.
    """

    lines: tuple[Line, ...]
    computation_time_ms: float
    indent: int = DEFAULT_INDENT

    @property
    def has_changes(self) -> bool:
        return bool(self.lines)

    def render(self, indent: int | None = None) -> list[str]:
        """Render every line; ``indent`` overrides the configured width."""
        return render(self.lines, self.indent if indent is None else indent)

    @property
    def text(self) -> str:
        """The rendered diff joined with newlines ("" when unchanged)."""
        return "\n".join(self.render())
