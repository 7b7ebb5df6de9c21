"""Line model: the unit of diff output.

A ``Line`` is a change marker, a nesting depth and a text.  Nested diffs are
turned into bracketed, indented blocks by ``wrap``, which returns nothing at
all for an empty nested diff.  That collapse is how "no visible change"
propagates up through arbitrarily deep nesting.

Reference rendering (``render_line``)::

    depth * indent spaces + ("<marker> " unless STRUCTURE) + text

    {                       <- STRUCTURE, depth 0
      - "baz": "removed"    <- REMOVED, depth 1
    }                       <- STRUCTURE, depth 0
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum, StrEnum

__all__ = [
    "DEFAULT_INDENT",
    "BracketKind",
    "Line",
    "Marker",
    "render",
    "render_line",
    "wrap",
]

DEFAULT_INDENT = 2


class Marker(StrEnum):
    """Change marker carried by every Line.

    - ADDED     "+" : present only on the right
    - REMOVED   "-" : present only on the left
    - CHANGED   "~" : present on both sides with different values
    - UNCHANGED "x" : internal sentinel, never returned to callers
    - STRUCTURE "." : bracket line, rendered without a marker glyph
    """

    ADDED = "+"
    REMOVED = "-"
    CHANGED = "~"
    UNCHANGED = "x"
    STRUCTURE = "."


class BracketKind(Enum):
    """Delimiters used by ``wrap``: ``(open, close)``."""

    OBJECT = ("{", "}")
    ARRAY = ("[", "]")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class Line:
    """One line of diff output.

    Attributes:
        marker: Change marker (see ``Marker``).
        text:   Line contents without indentation or marker glyph.
        depth:  Nesting level, only ever incremented by ``wrap``.
    """

    marker: Marker
    text: str
    depth: int = 0

    def __post_init__(self) -> None:
        if self.depth < 0:
            msg = f"depth must be >= 0, got {self.depth}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return render_line(self)


def wrap(lines: list[Line], label: str, kind: BracketKind) -> list[Line]:
    """Bracket a nested diff and indent it one level.

    Args:
        lines: The nested diff.  Not mutated.
        label: Text placed before the opening bracket, e.g. ``'"key": '``.
        kind:  Which delimiters to use.

    Returns:
        ``[]`` when ``lines`` is empty; otherwise an opening STRUCTURE line,
        every input line with ``depth + 1``, and a closing STRUCTURE line.
    """
    if not lines:
        return []
    return [
        Line(Marker.STRUCTURE, f"{label}{kind.open}"),
        *(replace(line, depth=line.depth + 1) for line in lines),
        Line(Marker.STRUCTURE, kind.close),
    ]


def render_line(line: Line, indent: int = DEFAULT_INDENT) -> str:
    """Render a Line: indentation, marker glyph unless STRUCTURE, then text."""
    prefix = "" if line.marker == Marker.STRUCTURE else f"{line.marker} "
    return f"{' ' * (line.depth * indent)}{prefix}{line.text}"


def render(lines: Iterable[Line], indent: int = DEFAULT_INDENT) -> list[str]:
    """Render every Line in order."""
    return [render_line(line, indent) for line in lines]
