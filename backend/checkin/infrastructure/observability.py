"""Structured Logging — JSON formatter for Facility repository and API logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Repository calls surface "context" (e.g. "FacilityRepository.get_by_id")
      with facility_id, facility_name or list options when the caller passes them
    - Error handler logs surface error_code, operation and path
    - JSON format in production, human-readable in development

Design Decisions:
    - setup_logging called once on startup via lifespan
    - "facility_name" rather than "name": LogRecord already owns "name"
    - default=str so ids, dates and list options serialize without a custom encoder
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "context", "facility_id", "facility_name", "operation",
    "error_code", "path", "options",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
