"""Logging configuration."""

import json
import logging
import sys
from typing import Any

# Optional attributes passed through ``extra=`` by macfmt modules.
EXTRA_FIELDS = ("mac", "notation", "line", "source")


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Level, logger, message and any macfmt extras of a record."""
    fields: dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "msg": record.getMessage(),
    }
    for name in EXTRA_FIELDS:
        if hasattr(record, name):
            fields[name] = getattr(record, name)
    return fields


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {"ts": self.formatTime(record), **record_fields(record)}
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


class KeyValueFormatter(logging.Formatter):
    """Key-value log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        fields = record_fields(record)
        fields["msg"] = f"\"{fields['msg']}\""
        return " ".join(f"{key}={value}" for key, value in fields.items())


FORMATTERS = {
    "json": JSONFormatter,
    "kv": KeyValueFormatter,
}


def setup_logging(
    level: str = "WARNING",
    format_type: str = "text",  # "text", "json", "kv"
):
    """Configure logging for the application.

    Records go to stderr; stdout is reserved for formatted addresses.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)

    if format_type in FORMATTERS:
        handler.setFormatter(FORMATTERS[format_type]())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root_logger.addHandler(handler)
