"""task-diff - structural, line-oriented diffs of JSON documents."""

from __future__ import annotations

import logging

from task_diff.algorithm.config import DiffConfig
from task_diff.algorithm.engine import diff
from task_diff.algorithm.lines import Line, Marker, render
from task_diff.api import compare, diff_text, has_changes, render_diff
from task_diff.comparator import TaskDiffer
from task_diff.errors import (
    InputError,
    NormalizationError,
    TaskDiffError,
    TypeMismatchError,
)
from task_diff.pair import DocumentPair, parse_pair
from task_diff.result import DiffResult
from task_diff.tree.normalizer import normalize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffConfig",
    "DiffResult",
    "DocumentPair",
    "InputError",
    "Line",
    "Marker",
    "NormalizationError",
    "TaskDiffError",
    "TaskDiffer",
    "TypeMismatchError",
    "compare",
    "diff",
    "diff_text",
    "has_changes",
    "normalize",
    "parse_pair",
    "render",
    "render_diff",
]
