"""Suggestion policy configuration.

Holds the tunable knobs of the suggestion heuristics and handles reading
and writing them as a JSON file with schema versioning and atomic writes.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from levsuggest.infrastructure.logging import get_logger

__all__ = [
    "ConfigError",
    "SuggestionConfig",
    "load_config",
    "save_config",
]

logger = get_logger(__name__)

# Current schema version - increment when making breaking changes
# v1: Initial schema with threshold and match-mode knobs
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class SuggestionConfig:
    """Immutable policy for picking a suggestion.

    Attributes:
        threshold_divisor: The accepted distance for a candidate is the
            longer of the two name lengths divided by this value. Lower
            values tolerate more edits.
        min_threshold: Floor of the computed threshold, so very short names
            can still be corrected.
        case_insensitive_exact: Look for a candidate equal to the target
            ignoring case before measuring distances.
        word_separator: When set, fall back to matching names made of the
            same separator-delimited words in a different order.
    """

    threshold_divisor: int = 3
    min_threshold: int = 1
    case_insensitive_exact: bool = False
    word_separator: str | None = None

    def __post_init__(self) -> None:
        if self.threshold_divisor < 1:
            msg = f"threshold_divisor must be at least 1, got {self.threshold_divisor}"
            raise ValueError(msg)
        if self.min_threshold < 0:
            msg = f"min_threshold must not be negative, got {self.min_threshold}"
            raise ValueError(msg)
        if self.word_separator is not None and not self.word_separator:
            raise ValueError("word_separator must not be empty")


def save_config(config: SuggestionConfig, path: Path) -> None:
    """Save the suggestion configuration to a JSON file.

    Uses atomic write (temp file + rename) to prevent corruption.

    Args:
        config: Configuration to save.
        path: Destination file.

    Raises:
        ConfigError: If saving fails.
    """
    data = _config_to_dict(config)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            json.dump(data, tmp, indent=2)
            tmp_path = Path(tmp.name)

        tmp_path.replace(path)

        logger.debug("config_saved", path=str(path))

    except OSError as e:
        if "tmp_path" in locals():
            tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to save config: {e}") from e


def load_config(path: Path) -> SuggestionConfig:
    """Load the suggestion configuration from a JSON file.

    Missing, oversized or malformed files are not an error: a warning is
    logged and the default configuration is returned.

    Args:
        path: File to read.

    Returns:
        SuggestionConfig instance (uses defaults if file missing or invalid).
    """
    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return SuggestionConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return SuggestionConfig()

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        return _dict_to_config(data)

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return SuggestionConfig()
    except (TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return SuggestionConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return SuggestionConfig()


def _config_to_dict(config: SuggestionConfig) -> dict[str, Any]:
    data = asdict(config)
    data["version"] = SCHEMA_VERSION
    return data


def _dict_to_config(data: dict[str, Any]) -> SuggestionConfig:
    """Convert a decoded JSON object to SuggestionConfig.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If a field has an invalid value.
    """
    defaults = SuggestionConfig()

    threshold_divisor = data.get("threshold_divisor", defaults.threshold_divisor)
    min_threshold = data.get("min_threshold", defaults.min_threshold)
    case_insensitive_exact = data.get(
        "case_insensitive_exact", defaults.case_insensitive_exact
    )
    word_separator = data.get("word_separator", defaults.word_separator)

    # bool is an int subclass, reject it for the numeric knobs
    for key, value in (
        ("threshold_divisor", threshold_divisor),
        ("min_threshold", min_threshold),
    ):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{key} must be an integer")
    if not isinstance(case_insensitive_exact, bool):
        raise TypeError("case_insensitive_exact must be a boolean")
    if word_separator is not None and not isinstance(word_separator, str):
        raise TypeError("word_separator must be a string or null")

    return SuggestionConfig(
        threshold_divisor=threshold_divisor,
        min_threshold=min_threshold,
        case_insensitive_exact=case_insensitive_exact,
        word_separator=word_separator,
    )
