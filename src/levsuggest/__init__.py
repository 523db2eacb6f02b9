"""levsuggest - "did you mean ...?" suggestions from edit distance."""

from levsuggest.infrastructure.config import (
    ConfigError,
    SuggestionConfig,
    load_config,
    save_config,
)
from levsuggest.infrastructure.logging import configure_logging, get_logger
from levsuggest.infrastructure.similarity import (
    distance,
    distance_with_limit,
    levenshtein_distance,
)
from levsuggest.modules.suggestion import SuggestionFinder, find_best_match

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "SuggestionConfig",
    "SuggestionFinder",
    "__version__",
    "configure_logging",
    "distance",
    "distance_with_limit",
    "find_best_match",
    "get_logger",
    "levenshtein_distance",
    "load_config",
    "save_config",
]
