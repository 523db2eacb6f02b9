"""Tests for structured logging configuration."""

from __future__ import annotations

import json

import pytest
import structlog

from levsuggest.infrastructure.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_logs(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(debug=True, json_logs=True)

        get_logger("test").info("suggestion_found", match="install")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "suggestion_found"
        assert record["match"] == "install"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_debug_filtered_by_default(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(json_logs=True)

        logger = get_logger("test")
        logger.debug("hidden_event")
        logger.warning("visible_event")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "visible_event" in out

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(debug=True)

        get_logger("test").info("console_event")

        assert "console_event" in capsys.readouterr().out


class TestGetLogger:
    """Tests for get_logger function."""

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("test", component="finder").info("bound_event")

        assert logs == [
            {"event": "bound_event", "log_level": "info", "component": "finder"}
        ]
