"""Shared test fixtures for levsuggest tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from levsuggest.modules.suggestion import SuggestionFinder

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None]:
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Location for a config file inside a not-yet-existing directory."""
    return tmp_path / "levsuggest" / "config.json"


@pytest.fixture
def finder() -> SuggestionFinder:
    """Finder with the default policy."""
    return SuggestionFinder()
