"""Structured Logging — JSON or text log lines for the Students API.

Invariants:
    - Every JSON line carries timestamp, level, logger and message
    - Request/store context (student_id, operation, error_code, path) is added
      only when the record has it
    - Exactly one app handler on the root logger, however often the lifespan starts

Design Decisions:
    - setup_logging called once per lifespan; a repeat call swaps the formatter
      on the existing handler instead of stacking another one
"""

import logging
import json
from datetime import datetime, timezone

HANDLER_NAME = "students-api"
CONTEXT_FIELDS = ("student_id", "operation", "error_code", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines with the context fields appended as key=value."""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = _context(record)
        if context:
            text += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return text


def _app_handler() -> logging.Handler | None:
    for handler in logging.root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or reconfigure) the app's root handler."""
    handler = _app_handler()
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        logging.root.addHandler(handler)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
