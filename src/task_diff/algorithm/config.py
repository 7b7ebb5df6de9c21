"""DiffConfig for the diff pipeline.

DiffConfig is a frozen (immutable) dataclass holding the pipeline
parameters.  The diff engine itself takes no options; the config only
governs the normalization pre-pass and the rendering of results.
"""

from __future__ import annotations

from dataclasses import dataclass

from task_diff.algorithm.lines import DEFAULT_INDENT
from task_diff.tree.normalizer import DEFAULT_NORMALIZE_KEY


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a comparison.

    Attributes:
        normalize_key: Object key whose name/value arrays are rewritten into
            mappings before diffing.  ``None`` disables normalization.
            Default ``"environment"``.
        indent: Spaces per nesting level when rendering (>= 0).  Default 2.
    """

    normalize_key: str | None = DEFAULT_NORMALIZE_KEY
    indent: int = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if self.normalize_key is not None and not self.normalize_key:
            msg = "normalize_key must be a non-empty string or None"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
