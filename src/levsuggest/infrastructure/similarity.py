"""Levenshtein edit distance between sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "distance",
    "distance_with_limit",
    "levenshtein_distance",
]


def levenshtein_distance(
    a: Sequence[Any],
    b: Sequence[Any],
    limit: int | None = None,
) -> int:
    """Calculate the Levenshtein (edit) distance between two sequences.

    The Levenshtein distance is the minimum number of single-unit edits
    (insertions, deletions, substitutions) to transform ``a`` into ``b``.
    Units are whatever the sequences yield: characters for strings, tokens
    for lists of words.

    When ``limit`` is given the computation stops as soon as the result is
    known to exceed it. In that case the returned value is only guaranteed
    to be greater than ``limit``; callers should test ``result <= limit``
    and not rely on the exact number.

    Args:
        a: First sequence.
        b: Second sequence.
        limit: Optional maximum distance the caller is interested in.

    Returns:
        The edit distance, or some value above ``limit`` if it was exceeded.
    """
    if a == b:
        return 0

    # Rows iterate the longer sequence, the buffer is sized by the shorter
    if len(a) < len(b):
        a, b = b, a

    # The length difference is a lower bound of the distance
    if limit is not None and len(a) - len(b) > limit:
        return limit + 1

    if len(b) == 0:
        return len(a)

    previous_row = list(range(len(b) + 1))

    for i, unit_a in enumerate(a):
        current_row = [i + 1]
        for j, unit_b in enumerate(b):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (unit_a != unit_b)
            current_row.append(min(insertions, deletions, substitutions))

        # Row values never decrease further down the table
        if limit is not None and min(current_row) > limit:
            return limit + 1

        previous_row = current_row

    return previous_row[-1]


def distance(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the exact edit distance between ``a`` and ``b``."""
    return levenshtein_distance(a, b)


def distance_with_limit(a: Sequence[Any], b: Sequence[Any], limit: int) -> int:
    """Return the edit distance, giving up once it is known to exceed ``limit``.

    The result equals :func:`distance` whenever that is ``<= limit``;
    otherwise it is some value ``> limit``.
    """
    return levenshtein_distance(a, b, limit)
