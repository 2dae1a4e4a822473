"""Tests for logging configuration."""

import json
import logging
import sys

import pytest

from genesis.utils.config import reset_settings
from genesis.utils.logging_config import (
    JsonFormatter,
    StandardFormatter,
    get_logger,
    reset_logging,
    setup_logging,
)


def _stdout_handlers() -> list[logging.Handler]:
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler) and h.stream == sys.stdout
    ]


def _record(message: str = "Blueprint built", **extra_fields) -> logging.LogRecord:
    record = logging.LogRecord(
        name="genesis.agents.serp_analyzer",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if extra_fields:
        record.extra_fields = extra_fields
    return record


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def test_setup_logging_configures_root_logger(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that setup_logging applies LOG_LEVEL to the root logger."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        setup_logging()

        assert logging.getLogger().level == logging.WARNING
        assert len(_stdout_handlers()) == 1

    def test_setup_logging_prevents_duplicate_handlers(self) -> None:
        """Test that calling setup_logging multiple times adds one handler."""
        setup_logging()
        setup_logging()
        setup_logging()

        assert len(_stdout_handlers()) == 1

    def test_setup_logging_with_force_reconfigure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that force_reconfigure picks up a new LOG_LEVEL."""
        setup_logging()

        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        reset_settings()
        setup_logging(force_reconfigure=True)

        assert logging.getLogger().level == logging.DEBUG
        assert len(_stdout_handlers()) == 1

    def test_json_flag_selects_json_formatter(self) -> None:
        setup_logging(use_json=True)

        assert isinstance(_stdout_handlers()[0].formatter, JsonFormatter)

    def test_standard_formatter_is_default(self) -> None:
        setup_logging()

        assert isinstance(_stdout_handlers()[0].formatter, StandardFormatter)

    def test_third_party_loggers_are_quieted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that LiteLLM and httpx stay at WARNING under an INFO root."""
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        setup_logging()

        assert logging.getLogger("LiteLLM").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_get_logger_sets_up_logging(self) -> None:
        """Test that get_logger configures logging on first use."""
        logger = get_logger("genesis.test")

        assert logger.name == "genesis.test"
        assert len(_stdout_handlers()) == 1

    def test_reset_logging_clears_handlers(self) -> None:
        setup_logging()

        reset_logging()

        assert _stdout_handlers() == []


class TestJsonFormatter:
    """Test JSON log output."""

    def test_json_contains_app_context(self) -> None:
        output = json.loads(JsonFormatter().format(_record()))

        assert output["message"] == "Blueprint built"
        assert output["level"] == "INFO"
        assert output["name"] == "genesis.agents.serp_analyzer"
        assert output["app_name"] == "genesis-test"
        assert output["environment"] == "development"
        assert "timestamp" in output

    def test_json_merges_extra_fields(self) -> None:
        output = json.loads(JsonFormatter().format(_record(topic="café", results=3)))

        assert output["topic"] == "café"
        assert output["results"] == 3

    def test_json_keeps_non_ascii_text(self) -> None:
        """Test that Portuguese text is not escaped."""
        line = JsonFormatter().format(_record(topic="café especial"))

        assert "café especial" in line

    def test_json_includes_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        output = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in output["exception"]

    def test_json_lifts_workflow_id_from_prefix(self) -> None:
        output = json.loads(JsonFormatter().format(_record("[gen-1a2b3c] Starting node: analyze_serp")))

        assert output["workflow_id"] == "gen-1a2b3c"
        assert output["message"] == "Starting node: analyze_serp"

    def test_json_without_prefix_has_no_workflow_id(self) -> None:
        output = json.loads(JsonFormatter().format(_record("Fetched 3 WordPress posts")))

        assert "workflow_id" not in output
        assert output["message"] == "Fetched 3 WordPress posts"

    def test_standard_format_keeps_prefix(self) -> None:
        line = StandardFormatter().format(_record("[gen-1a2b3c] Completed node: publish (0.10s)"))

        assert "[gen-1a2b3c] Completed node: publish" in line


class TestStandardFormatter:
    def test_standard_format_layout(self) -> None:
        line = StandardFormatter().format(_record())

        assert "INFO - genesis.agents.serp_analyzer - Blueprint built" in line
        assert line.startswith("[")
