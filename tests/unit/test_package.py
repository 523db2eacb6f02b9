"""Tests for the top-level public API."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path

import levsuggest


def test_version_matches_pyproject() -> None:
    pyproject = Path(__file__).parents[2] / "pyproject.toml"
    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))

    assert re.fullmatch(r"\d+\.\d+\.\d+", levsuggest.__version__)
    assert data["project"]["version"] == levsuggest.__version__


def test_public_api_is_exported() -> None:
    for name in levsuggest.__all__:
        assert hasattr(levsuggest, name)


def test_top_level_functions() -> None:
    """The package root exposes the distance and suggestion entry points."""
    assert levsuggest.distance("kitten", "sitting") == 3
    assert levsuggest.distance_with_limit("kitten", "sitting", 1) > 1
    assert levsuggest.find_best_match(["aaa", "bbb"], "aa") == "aaa"
    assert levsuggest.find_best_match(["completely", "different"], "xyz") is None
