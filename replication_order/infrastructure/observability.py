"""Structured Logging — JSON formatter and setup for reconciliation runs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (article_id, group_count, dropped_groups, error_code) surfaced when present
    - JSON format by default, human-readable on request

Design Decisions:
    - JSONFormatter on stdlib logging: zero extra dependencies
    - setup_logging called explicitly by the caller; it replaces its own handler
      on repeat calls instead of stacking a new one
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "article_id", "group_count", "dropped_groups", "error_code",
    "article_count", "link_count",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _ReconcilerHandler(logging.StreamHandler):
    """Marker subclass so setup_logging can find and replace its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the reconciler."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _ReconcilerHandler):
            logging.root.removeHandler(existing)
    handler = _ReconcilerHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
