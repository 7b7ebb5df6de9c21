"""algorithm subpackage: public API for the diff engine.

Provides the recursive diff, its line model and configuration.  Import from
this module (not from sub-modules directly) to stay on the stable public
interface.

Example::

    from task_diff.algorithm import diff, render

    lines = diff({"q": "x"}, {"q": "y"})
    render(lines)  # ['~ "q": "x" => "y"']
"""

from __future__ import annotations

from task_diff.algorithm.config import DiffConfig
from task_diff.algorithm.engine import diff, diff_array, diff_object
from task_diff.algorithm.lines import BracketKind, Line, Marker, render, render_line, wrap
from task_diff.algorithm.pairing import MISSING, zip_to_end

__all__ = [
    "MISSING",
    "BracketKind",
    "DiffConfig",
    "Line",
    "Marker",
    "diff",
    "diff_array",
    "diff_object",
    "render",
    "render_line",
    "wrap",
    "zip_to_end",
]
