"""Best-match search for "did you mean ...?" suggestions.

Given an unrecognized name and the names that are valid in its place, pick
the one the user most likely meant:

1. Optionally, a candidate equal to the target ignoring case.
2. The candidate with the smallest edit distance, provided it is within
   the accepted threshold. Ties go to the first candidate seen.
3. Optionally, a candidate made of the same words in another order.

Whether the target itself may be suggested is left to the caller: filter
it out of ``candidates`` if a self-match is not useful.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from levsuggest.infrastructure.config import SuggestionConfig
from levsuggest.infrastructure.similarity import distance_with_limit

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

__all__ = [
    "SuggestionFinder",
    "find_best_match",
]

T = TypeVar("T", bound="Sequence[Any]")


class SuggestionFinder:
    """Picks the best suggestion among candidates according to a policy.

    Holds only an immutable SuggestionConfig, so one instance can be shared
    freely.
    """

    def __init__(self, config: SuggestionConfig | None = None) -> None:
        self._config = config if config is not None else SuggestionConfig()

    @property
    def config(self) -> SuggestionConfig:
        return self._config

    def threshold_for(self, target: Sequence[Any], candidate: Sequence[Any]) -> int:
        """Maximum distance at which ``candidate`` is accepted for ``target``.

        Proportional to the longer of the two names: short names need a
        near-exact match, longer ones tolerate more edits.
        """
        config = self._config
        longest = max(len(target), len(candidate))
        return max(longest // config.threshold_divisor, config.min_threshold)

    def find_best_match(
        self,
        candidates: Iterable[T],
        target: Sequence[Any],
        dist_override: int | None = None,
    ) -> T | None:
        """Find the candidate most likely intended by ``target``.

        Args:
            candidates: Valid names. Any iterable; sets are scanned in
                sorted order so ties resolve the same way on every run.
            target: The unrecognized name.
            dist_override: Maximum accepted distance for every candidate,
                replacing the length-proportional threshold.

        Returns:
            The chosen candidate, or None if no candidate is close enough.
        """
        pool = _materialize(candidates)
        if not pool:
            return None

        index: int | None = None
        if self._config.case_insensitive_exact:
            index = _find_casefold_match(pool, target)
        if index is None:
            index = self._find_closest(pool, target, dist_override)
        if index is None and self._config.word_separator is not None:
            index = _find_reordered_words(pool, target, self._config.word_separator)

        return None if index is None else pool[index]

    def _find_closest(
        self,
        pool: Sequence[Sequence[Any]],
        target: Sequence[Any],
        dist_override: int | None,
    ) -> int | None:
        best_index: int | None = None
        best_distance = 0

        for index, candidate in enumerate(pool):
            if dist_override is not None:
                threshold = dist_override
            else:
                threshold = self.threshold_for(target, candidate)

            # Only a strictly closer candidate can replace the current best
            limit = threshold
            if best_index is not None:
                limit = min(threshold, best_distance - 1)
            if limit < 0:
                continue

            dist = distance_with_limit(target, candidate, limit)
            if dist <= limit:
                best_index, best_distance = index, dist
                if dist == 0:
                    break

        return best_index


def find_best_match(
    candidates: Iterable[T],
    target: Sequence[Any],
    dist_override: int | None = None,
    *,
    config: SuggestionConfig | None = None,
) -> T | None:
    """Find the candidate most likely intended by ``target``.

    Convenience wrapper around :meth:`SuggestionFinder.find_best_match`.

    Example:
        >>> find_best_match(["aaa", "bbb"], "aa")
        'aaa'
        >>> find_best_match(["completely", "different"], "xyz") is None
        True
    """
    return SuggestionFinder(config).find_best_match(candidates, target, dist_override)


def _materialize(candidates: Iterable[T]) -> list[T]:
    if isinstance(candidates, (set, frozenset)):
        try:
            return sorted(candidates)
        except TypeError:
            # Mixed sequence types have no natural ordering
            return sorted(candidates, key=repr)
    return list(candidates)


def _find_casefold_match(
    pool: Sequence[Sequence[Any]], target: Sequence[Any]
) -> int | None:
    if not isinstance(target, str):
        return None
    folded = target.casefold()
    for index, candidate in enumerate(pool):
        if isinstance(candidate, str) and candidate.casefold() == folded:
            return index
    return None


def _find_reordered_words(
    pool: Sequence[Sequence[Any]], target: Sequence[Any], separator: str
) -> int | None:
    if not isinstance(target, str):
        return None
    words = sorted(target.split(separator))
    for index, candidate in enumerate(pool):
        if isinstance(candidate, str) and sorted(candidate.split(separator)) == words:
            return index
    return None
