"""Value model for parsed JSON documents.

Documents are plain parsed-JSON Python values (``None``, ``bool``, ``int``,
``float``, ``str``, ``list``, ``dict``).  This module classifies them into the
six closed value kinds and provides the two operations the diff engine needs
on every value:

- ``values_equal``: structural deep equality that keeps kinds apart
  (``True`` is not ``1``, ``1`` is not ``1.0``).
- ``to_text``: canonical compact JSON text used in every diff line.
"""

from __future__ import annotations

import json
import math
from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonValue", "ValueKind", "kind_of", "to_text", "values_equal"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOL    -> "bool"
    - NUMBER  -> "number"  : int or float
    - STRING  -> "string"
    - ARRAY   -> "array"   : list
    - OBJECT  -> "object"  : dict with string keys, insertion ordered
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


def kind_of(value: Any) -> ValueKind:
    """Classify a parsed JSON value.

    Args:
        value: Any valid JSON value (dict, list, str, int, float, bool, None).

    Returns:
        The ``ValueKind`` of the value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # CRITICAL: bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return ValueKind.BOOL

    if isinstance(value, dict):
        return ValueKind.OBJECT

    if isinstance(value, list):
        return ValueKind.ARRAY

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, (int, float)):
        return ValueKind.NUMBER

    if value is None:
        return ValueKind.NULL

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def values_equal(left: Any, right: Any) -> bool:
    """Return True when two JSON values are structurally identical.

    Objects compare as unordered key/value sets, arrays positionally.
    Integers and floats are distinct kinds of number, so ``1`` and ``1.0``
    are not equal.  ``NaN`` equals ``NaN`` so that every value equals itself.
    """
    kind = kind_of(left)
    if kind != kind_of(right):
        return False

    if kind == ValueKind.OBJECT:
        if left.keys() != right.keys():
            return False
        return all(values_equal(val, right[key]) for key, val in left.items())

    if kind == ValueKind.ARRAY:
        if len(left) != len(right):
            return False
        return all(
            values_equal(a, b) for a, b in zip(left, right, strict=True)
        )

    if kind == ValueKind.NUMBER:
        if isinstance(left, float) != isinstance(right, float):
            return False
        if isinstance(left, float) and math.isnan(left) and math.isnan(right):
            return True
        return bool(left == right)

    return bool(left == right)


def to_text(value: Any) -> str:
    """Serialize a JSON value to its canonical compact text.

    No whitespace follows ``,`` or ``:``, non-ASCII characters are kept
    verbatim and object keys keep their insertion order::

        to_text({"a": [1, 2]})  # '{"a":[1,2]}'
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
