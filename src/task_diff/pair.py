"""Extraction of two documents from a single line of free text.

Deployment tools print a changed attribute as two quoted JSON documents
separated by ``" => "``, for example::

    container_definitions: "[{\\"name\\":\\"web\\"}]" => "[{\\"name\\":\\"api\\"}]"

``split_pair`` cuts the text between the first and the last double quote,
splits it at the first separator and trims whitespace and quotes from both
halves.  ``parse_pair`` additionally parses each half, un-escaping it when it
is not valid JSON as printed.  Normalization is left to ``compare()`` unless a
``normalize_key`` is passed explicitly.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass

from task_diff.errors import InputError
from task_diff.tree.kinds import JsonValue
from task_diff.tree.normalizer import normalize

__all__ = ["SEPARATOR", "DocumentPair", "parse_pair", "split_pair"]

SEPARATOR = " => "


@dataclass(frozen=True, slots=True)
class DocumentPair:
    """Two parsed documents: before and after.

    Unpacks as ``(left, right)`` so a pair feeds straight into ``compare(*pair)``.
    """

    left: JsonValue
    right: JsonValue

    def __iter__(self) -> Iterator[JsonValue]:
        yield self.left
        yield self.right


def split_pair(text: str) -> tuple[str, str]:
    """Split free text into the raw text of two documents.

    Raises:
        InputError: If the text holds no quoted section or no separator.
    """
    start = text.find('"')
    end = text.rfind('"')
    if start == -1 or end <= start:
        raise InputError("Invalid input: no quoted documents found")

    quoted = text[start:end]
    index = quoted.find(SEPARATOR)
    if index == -1:
        raise InputError(f"Invalid input: separator {SEPARATOR!r} not found")

    return (
        _clean(quoted[:index]),
        _clean(quoted[index + len(SEPARATOR) :]),
    )


def parse_pair(
    text: str,
    normalize_key: str | None = None,
) -> DocumentPair:
    """Extract and parse the two documents held in ``text``.

    Args:
        text:          Free text of the form ``"<doc>" => "<doc>"``.
        normalize_key: Key handed to the tree normalizer.  Defaults to
                       ``None``: the documents are returned as parsed, ready
                       for ``compare()``, which normalizes them itself.  Pass a
                       key only when feeding the result to ``diff()`` directly.

    Returns:
        The parsed ``DocumentPair``.

    Raises:
        InputError: If extraction or JSON parsing fails.
        NormalizationError: If a normalized sub-tree is malformed.
    """
    raw_left, raw_right = split_pair(text)
    left = _load(raw_left)
    right = _load(raw_right)
    if normalize_key is not None:
        left = normalize(left, normalize_key)
        right = normalize(right, normalize_key)
    return DocumentPair(left=left, right=right)


def _clean(raw: str) -> str:
    return raw.strip().strip('"').strip()


def _load(raw: str) -> JsonValue:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        # Documents quoted inside a string arrive with escaped quotes
        if '\\"' not in raw:
            raise InputError(f"Invalid input: {exc}") from exc
    try:
        return json.loads(json.loads(f'"{raw}"'))
    except json.JSONDecodeError as exc:
        raise InputError(f"Invalid input: cannot un-escape document: {exc}") from exc
