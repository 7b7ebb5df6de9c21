"""Tree subpackage for JSON value primitives.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the six JSON value kinds
- kind_of / values_equal / to_text: classification, deep equality, canonical text
- replace_in_tree / environment_transform / normalize: the pre-diff rewrite pass
"""

from task_diff.tree.kinds import JsonValue, ValueKind, kind_of, to_text, values_equal
from task_diff.tree.normalizer import (
    DEFAULT_NORMALIZE_KEY,
    environment_transform,
    normalize,
    replace_in_tree,
)

__all__ = [
    "DEFAULT_NORMALIZE_KEY",
    "JsonValue",
    "ValueKind",
    "environment_transform",
    "kind_of",
    "normalize",
    "replace_in_tree",
    "to_text",
    "values_equal",
]
