"""Logging setup for the function handlers.

The Lambda runtime already attaches a handler to the root logger, so in text
mode only levels are applied. ``LOG_FORMAT=json`` switches the handler and
core loggers to single-line JSON records on stdout.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from core.config import get_config
from core.services.numbers import unbounded_int_digits

LOGGER_NAMES = ("handlers", "core")

# Lambda request id of the invocation being handled
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_configured = False


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": request_id_var.get(""),
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging() -> None:
    """Apply LOG_LEVEL and LOG_FORMAT once per process."""
    global _configured
    if _configured:
        return

    config = get_config()
    level = getattr(logging, config.log_level, logging.INFO)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        logger.propagate = True

        if config.log_format == "json":
            stdout_handler = logging.StreamHandler(sys.stdout)
            stdout_handler.setFormatter(JSONFormatter())
            logger.addHandler(stdout_handler)
            # Prevent duplicate output through the runtime's root handler
            logger.propagate = False

    if config.log_format == "text" and not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")

    _configured = True


def _reset_logging() -> None:
    """Allow configure_logging to run again — for testing only."""
    global _configured
    _configured = False


def bind_request_id(context: object) -> None:
    request_id_var.set(getattr(context, "aws_request_id", "") or "")


def to_log_json(value: Any) -> str:
    """Pretty-printed JSON for event and response log lines."""
    with unbounded_int_digits():
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
