"""Diff engine: recursive structural comparison of two JSON documents.

Architecture:
- ``diff``:        Entry point.  Dispatches on the shape of the pair;
                   object/object and array/array only, anything else raises
                   ``TypeMismatchError``.
- ``diff_object``: Walks the left keys in order (removed, changed, recursed
                   or unchanged), then appends keys only on the right in the
                   right's order.  Output is never sorted.
- ``diff_array``:  Arrays made only of objects are paired by position
                   (``zip_to_end``) and each pair diffed as objects.  Any other
                   array is treated as one opaque value and reported as a
                   single CHANGED line.

Unchanged entries produce an UNCHANGED sentinel line that is filtered out
before ``diff_object`` returns, so no caller ever sees one.

The engine is purely functional: inputs are only read, every call builds new
output, and no state is shared between calls.  Recursion depth equals the
nesting depth of the documents.
"""

from __future__ import annotations

from typing import Any

from task_diff.algorithm.lines import BracketKind, Line, Marker, wrap
from task_diff.algorithm.pairing import MISSING, zip_to_end
from task_diff.errors import TypeMismatchError
from task_diff.tree.kinds import ValueKind, kind_of, to_text, values_equal

__all__ = ["diff", "diff_array", "diff_object"]


def diff(left: Any, right: Any) -> list[Line]:
    """Compare two documents of the same shape.

    Args:
        left:  First document, a dict or a list.
        right: Second document, same kind as ``left``.

    Returns:
        The diff lines in encounter order.  Empty when nothing changed.

    Raises:
        TypeMismatchError: If the two values are not both objects or both
            arrays.  A bare scalar root always raises.
    """
    left_kind = kind_of(left)
    right_kind = kind_of(right)

    if left_kind == ValueKind.OBJECT and right_kind == ValueKind.OBJECT:
        return diff_object(left, right)

    if left_kind == ValueKind.ARRAY and right_kind == ValueKind.ARRAY:
        return diff_array(left, right)

    raise TypeMismatchError(left_kind, right_kind)


def diff_object(left: dict[str, Any], right: dict[str, Any]) -> list[Line]:
    """Diff two objects key by key.

    Output order: removed/changed/recursed keys in ``left`` order, then added
    keys in ``right`` order.
    """
    lines: list[Line] = []
    for key, val in left.items():
        lines.extend(_diff_entry(key, val, right))

    for key, val in right.items():
        if key not in left:
            lines.append(Line(Marker.ADDED, f"{_label(key)}{to_text(val)}"))

    return [line for line in lines if line.marker != Marker.UNCHANGED]


def diff_array(left: list[Any], right: list[Any]) -> list[Line]:
    """Diff two arrays.

    Arrays holding only objects are compared positionally; see
    ``_diff_paired``.  Otherwise the whole arrays are compared as opaque
    values: one CHANGED line ``<left> => <right>``, with no element-wise
    comparison.  Equal arrays produce no lines.
    """
    if values_equal(left, right):
        return []
    if all(isinstance(item, dict) for item in (*left, *right)):
        return _diff_paired(left, right)
    return [Line(Marker.CHANGED, f"{to_text(left)} => {to_text(right)}")]


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _label(key: str) -> str:
    return f"{to_text(key)}: "


def _diff_entry(key: str, val: Any, right: dict[str, Any]) -> list[Line]:
    """Resolve one left-hand key to exactly one outcome."""
    label = _label(key)

    if key not in right:
        return [Line(Marker.REMOVED, f"{label}{to_text(val)}")]

    other = right[key]
    if values_equal(val, other):
        return [Line(Marker.UNCHANGED, "")]

    # Trust the emptiness of the nested diff, not the equality check above
    if isinstance(val, dict) and isinstance(other, dict):
        return wrap(diff_object(val, other), label, BracketKind.OBJECT)

    if isinstance(val, list) and isinstance(other, list):
        return wrap(diff_array(val, other), label, BracketKind.ARRAY)

    return [Line(Marker.CHANGED, f"{label}{to_text(val)} => {to_text(other)}")]


def _diff_paired(left: list[Any], right: list[Any]) -> list[Line]:
    """Diff arrays of objects index by index.

    A missing side is diffed as an empty object, so an element present only
    on the left renders as an all-REMOVED block and one present only on the
    right as an all-ADDED block.  Unchanged pairs contribute nothing.
    """
    lines: list[Line] = []
    for item_a, item_b in zip_to_end(left, right):
        obj_a = {} if item_a is MISSING else item_a
        obj_b = {} if item_b is MISSING else item_b
        lines.extend(wrap(diff_object(obj_a, obj_b), "", BracketKind.OBJECT))
    return lines
