"""Structured logging configuration."""

import json
import logging
import re
import sys
from typing import Any

from genesis.utils.config import get_settings

# Workflow nodes prefix their messages with the run id: "[gen-1a2b3c] Starting node: ..."
_WORKFLOW_PREFIX = re.compile(r"^\[(?P<workflow_id>[\w-]+)\]\s*")


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Messages carrying a workflow prefix get a separate ``workflow_id`` field
    and the prefix is dropped from ``message``, so one generation run can be
    filtered out of interleaved output.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with log data
        """
        settings = get_settings()

        message = record.getMessage()
        match = _WORKFLOW_PREFIX.match(message)
        if match:
            message = message[match.end():]

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": message,
            "app_name": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
        }

        if match:
            log_data["workflow_id"] = match.group("workflow_id")

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Structured context passed as extra={"extra_fields": {...}}
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, ensure_ascii=False)


class StandardFormatter(logging.Formatter):
    """Standard text formatter with consistent format."""

    def __init__(self) -> None:
        """Initialize with standard format."""
        fmt = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
        datefmt = "%Y-%m-%d %H:%M:%S"
        super().__init__(fmt=fmt, datefmt=datefmt)


_logging_configured = False


def setup_logging(use_json: bool = False, force_reconfigure: bool = False) -> None:
    """
    Configure application logging.

    Sets up console logging with the LOG_LEVEL from settings.
    Calling it again is a no-op unless force_reconfigure is set.

    Args:
        use_json: If True, use JSON format. If False, use standard text format.
        force_reconfigure: If True, force reconfiguration even if already set up.
    """
    global _logging_configured

    if _logging_configured and not force_reconfigure:
        return

    settings = get_settings()
    root_logger = logging.getLogger()

    # Only drop our own stdout handler; pytest's caplog handler must survive
    handlers_to_remove = [
        h for h in root_logger.handlers
        if isinstance(h, logging.StreamHandler) and h.stream == sys.stdout
    ]
    for handler in handlers_to_remove:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, settings.LOG_LEVEL)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JsonFormatter() if use_json else StandardFormatter())
    root_logger.addHandler(console_handler)

    # LiteLLM and httpx are chatty at INFO
    for noisy in ("LiteLLM", "httpx"):
        logging.getLogger(noisy).setLevel(max(log_level, logging.WARNING))

    _logging_configured = True

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, format=%s",
        settings.LOG_LEVEL,
        "json" if use_json else "standard",
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Ensures logging is set up before returning the logger.

    Args:
        name: Name for the logger (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    if not _logging_configured:
        setup_logging()

    return logging.getLogger(name)


def reset_logging() -> None:
    """
    Reset logging configuration.

    Useful for testing to clear state between tests.
    """
    global _logging_configured

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)

    _logging_configured = False
