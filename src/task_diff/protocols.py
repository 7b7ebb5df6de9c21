"""SubtreeTransform Protocol for the tree normalizer extension point.

Defines the structural interface every replacement function handed to
``replace_in_tree`` must satisfy.  Any callable with a conformant signature
passes ``isinstance`` checks, no inheritance required.

Example::

    from task_diff.errors import NormalizationError
    from task_diff.protocols import SubtreeTransform

    def upper_keys(value, path):
        if not isinstance(value, dict):
            raise NormalizationError("expected an object", path)
        return {k.upper(): v for k, v in value.items()}

    assert isinstance(upper_keys, SubtreeTransform)  # True
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SubtreeTransform(Protocol):
    """Structural protocol for sub-tree replacement functions.

    The callable must:
    - Accept the value found under the normalization key and the JSON Pointer
      path of that value.
    - Return a new JSON value without mutating its input.
    - Raise ``NormalizationError`` (carrying ``path``) when the value cannot
      be transformed.
    """

    def __call__(self, value: Any, path: str) -> Any: ...
