"""Structured Logging — JSON formatter and setup for the record store.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (collection, record_id, error_code, operation, field)
      surfaced when present; any other extra attribute is dropped
    - setup_logging() is idempotent: calling it again replaces the handler
      it installed earlier instead of stacking a second one

Design Decisions:
    - stdlib logging only; callers attach context through `extra=`
    - Text format appends the same extras as key=value pairs so local runs
      carry the record identity too
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("collection", "record_id", "error_code", "operation", "field")


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in _EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with trailing key=value context."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = " ".join(f"{k}={v}" for k, v in _extras(record).items())
        return f"{line} [{context}]" if context else line


class _StoreHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the process. Safe to call more than once."""
    for existing in [h for h in logging.root.handlers if isinstance(h, _StoreHandler)]:
        logging.root.removeHandler(existing)
    handler = _StoreHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
