"""Positional pairing of two arrays, padded to the longer length.

Arrays of objects are compared index by index.  There is no reordering and
no content matching: element ``i`` on the left is always compared with
element ``i`` on the right, and the shorter side is padded with ``MISSING``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import zip_longest
from typing import Any, Final

__all__ = ["MISSING", "zip_to_end"]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# Distinct from None, which is a legitimate JSON element
MISSING: Final = _Missing()


def zip_to_end(
    left: Sequence[Any],
    right: Sequence[Any],
) -> Iterator[tuple[Any, Any]]:
    """Yield ``(left[i], right[i])`` for every index of the longer sequence.

    Args:
        left:  First sequence.
        right: Second sequence.

    Yields:
        Pairs in index order; an index past the end of one side yields
        ``MISSING`` for that side.  Two empty sequences yield nothing.

    Example::

        list(zip_to_end([1, 2], [3]))  # [(1, 3), (2, MISSING)]
    """
    return zip_longest(left, right, fillvalue=MISSING)
