"""TaskDiffer: orchestrator that wires the tree normalizer and the diff engine.

This is the wiring layer between the raw algorithm and the public API.  It
turns a list of diff lines into a DiffResult with timing data.

Architecture:
- compare() starts a wall-clock timer, normalizes both inputs (unless
  ``normalize_key`` is None), delegates to ``diff()`` and returns a
  DiffResult.
- Normalization always completes for both sides before any diffing starts,
  so a malformed document never yields a partial diff.
- The comparator holds nothing but its immutable config; one instance may
  be shared across threads.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from task_diff.algorithm.config import DiffConfig
from task_diff.algorithm.engine import diff
from task_diff.pair import parse_pair
from task_diff.result import DiffResult
from task_diff.tree.normalizer import normalize

__all__ = ["TaskDiffer"]

logger = logging.getLogger(__name__)


class TaskDiffer:
    """Orchestrator for structural JSON comparison.

    Example::

        from task_diff.comparator import TaskDiffer

        differ = TaskDiffer()
        result = differ.compare({"q": "x"}, {"q": "y"})
        print(result.text)   # ~ "q": "x" => "y"
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Pipeline parameters.  Defaults to ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> DiffResult:
        """Normalize and diff two documents.

        Normalization is owned here: pass documents as parsed, not already
        run through ``normalize()``, whose rewritten mappings would be
        rejected by a second pass.

        Args:
            left:  First document (dict or list).
            right: Second document, same kind as ``left``.

        Returns:
            A ``DiffResult`` with lines and timing populated.

        Raises:
            NormalizationError: If either document holds a malformed
                normalized sub-tree.
            TypeMismatchError: If the documents have different shapes.
        """
        t0 = time.perf_counter()

        left = self._preprocess(left)
        right = self._preprocess(right)
        lines = diff(left, right)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug("Compared documents: %d lines in %.3f ms", len(lines), elapsed_ms)

        return DiffResult(
            lines=tuple(lines),
            computation_time_ms=elapsed_ms,
            indent=self._config.indent,
        )

    def compare_text(self, text: str) -> DiffResult:
        """Extract two documents from free text and compare them.

        Args:
            text: Free text of the form ``"<doc>" => "<doc>"``.

        Raises:
            InputError: If the documents cannot be extracted or parsed.
            NormalizationError: If a normalized sub-tree is malformed.
            TypeMismatchError: If the documents have different shapes.
        """
        pair = parse_pair(text)
        return self.compare(pair.left, pair.right)

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def _preprocess(self, value: Any) -> Any:
        """Apply the tree normalizer when ``normalize_key`` is set.

        Returns a new value; never mutates input.
        """
        if self._config.normalize_key is None:
            return value
        return normalize(value, self._config.normalize_key)
