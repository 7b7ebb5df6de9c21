"""Tree normalizer: rewrites every sub-tree found under a designated key.

Container-orchestration documents describe environment variables as an
array of ``{"name": ..., "value": ...}`` pairs.  Diffing that array
positionally would report noise whenever a variable is inserted, so the
array is rewritten into a plain mapping before comparison::

    {"environment": [{"name": "a", "value": "b"}]}
    # becomes
    {"environment": {"a": "b"}}

``replace_in_tree`` is generic over the key and the replacement function;
``normalize`` binds it to ``environment_transform``.

JSON Pointer paths (RFC 6901) are built during traversal so that errors can
name the offending sub-tree:
- Root is "" (empty string)
- Each level appends "/{key_or_index}"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from task_diff.errors import NormalizationError

if TYPE_CHECKING:
    from task_diff.protocols import SubtreeTransform
    from task_diff.tree.kinds import JsonValue

__all__ = [
    "DEFAULT_NORMALIZE_KEY",
    "environment_transform",
    "normalize",
    "replace_in_tree",
]

logger = logging.getLogger(__name__)

DEFAULT_NORMALIZE_KEY = "environment"


def _pointer(path: str, token: str | int) -> str:
    # RFC 6901 escaping: "~" first, then "/"
    escaped = str(token).replace("~", "~0").replace("/", "~1")
    return f"{path}/{escaped}"


def replace_in_tree(
    tree: JsonValue,
    key: str,
    transform: SubtreeTransform,
    path: str = "",
) -> JsonValue:
    """Return a copy of ``tree`` with every value under ``key`` transformed.

    Objects holding ``key`` get that entry replaced by
    ``transform(value, path)``; the replacement is not walked any further.
    Every other object field and every array element is walked recursively,
    so ``key`` is found at any depth.  Scalars pass through unchanged.

    Args:
        tree:      Any valid JSON value.  Never mutated.
        key:       Object key whose values are rewritten.
        transform: Replacement function (see ``SubtreeTransform``).
        path:      JSON Pointer path of ``tree``.  Defaults to "" (root).

    Returns:
        The rewritten tree.  Object key order is preserved.

    Raises:
        NormalizationError: If ``transform`` rejects any value.  There is no
            partial result.
    """
    if isinstance(tree, dict):
        new_object: dict[str, Any] = {}
        for field, val in tree.items():
            field_path = _pointer(path, field)
            if field == key:
                new_object[field] = transform(val, field_path)
                logger.debug("Normalized %r at %s", key, field_path)
            else:
                new_object[field] = replace_in_tree(val, key, transform, field_path)
        return new_object

    if isinstance(tree, list):
        return [
            replace_in_tree(item, key, transform, _pointer(path, idx))
            for idx, item in enumerate(tree)
        ]

    return tree


def environment_transform(value: Any, path: str = "") -> dict[str, Any]:
    """Convert an array of ``{name, value}`` pairs into a mapping.

    Later entries win when a ``name`` repeats.  Extra fields on an entry are
    ignored.

    Args:
        value: The array found under the normalization key.
        path:  JSON Pointer path of ``value``, used in error messages.

    Returns:
        A new dict mapping each ``name`` to its ``value``.

    Raises:
        NormalizationError: If ``value`` is not an array, or any element is
            not an object with a string ``name`` and a ``value`` field.
    """
    if not isinstance(value, list):
        raise NormalizationError("Expected an array of name/value pairs", path)

    result: dict[str, Any] = {}
    for idx, entry in enumerate(value):
        entry_path = _pointer(path, idx)
        if not isinstance(entry, dict):
            raise NormalizationError("Expected a name/value object", entry_path)
        if "name" not in entry or "value" not in entry:
            raise NormalizationError("Missing 'name' or 'value' field", entry_path)
        name = entry["name"]
        if not isinstance(name, str):
            raise NormalizationError("Field 'name' must be a string", entry_path)
        result[name] = entry["value"]
    return result


def normalize(tree: JsonValue, key: str = DEFAULT_NORMALIZE_KEY) -> JsonValue:
    """Rewrite every ``key``-held name/value array in ``tree`` into a mapping.

    Example::

        normalize({"environment": [{"name": "a", "value": "b"}]})
        # {"environment": {"a": "b"}}

    Use it in front of ``diff()``.  ``compare()`` already normalizes its
    inputs, and a rewritten mapping is rejected by a second pass.
    """
    return replace_in_tree(tree, key, environment_transform)
