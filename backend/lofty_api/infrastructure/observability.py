"""Structured Logging: JSON formatter and setup for the API process.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - Record context (resource, record_id, error_code, path, status_code) added only when set
    - setup_logging owns exactly one root handler, however often it is called

Design Decisions:
    - stdlib logging + JSONFormatter: services log with `extra=`, no logging dependency
    - Handler tagged by name so a second create_app() in one process replaces it
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_FIELDS = ("resource", "record_id", "error_code", "path", "status_code")
HANDLER_NAME = "lofty_api"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key)) for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's root handler."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
