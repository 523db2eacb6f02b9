"""Name suggestion module."""

from levsuggest.modules.suggestion.finder import SuggestionFinder, find_best_match

__all__ = [
    "SuggestionFinder",
    "find_best_match",
]
