"""Structured Logging: JSON or text output for the API process.

Invariants:
    - Every JSON line has timestamp (record creation time, UTC), level, logger, message
    - Any `extra=` key passed by a caller (isbn, error_code, path, ...) is emitted as-is
    - setup_logging replaces its own handler on repeated calls, never stacks a second one
"""

import logging
import json
from datetime import datetime, timezone

# Attributes every LogRecord carries; anything else came from `extra=`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def record_extras(record: logging.LogRecord) -> dict:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and value is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _BookstoreHandler(logging.StreamHandler):
    pass


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the bookstore handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _BookstoreHandler)]:
        root.removeHandler(existing)

    handler = _BookstoreHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
