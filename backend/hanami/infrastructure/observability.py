"""Structured Logging: JSON formatter, secret redaction and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (path, error_code, collection, tier...) surfaced when present
    - Configured secrets are masked in the final message of every record the root handler emits
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging, no extra dependency
    - Redaction as a handler filter: covers third-party loggers (sqlalchemy, uvicorn) too
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from hanami.core.redaction import redact

EXTRA_FIELDS = (
    "path", "method", "status_code", "error_code",
    "collection", "operation", "tier", "rows",
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
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = record.exc_text or self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class RedactingFilter(logging.Filter):
    """Mask secrets in the rendered message and exception text."""

    def __init__(self, secrets: Iterable[str] = ()):
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact(record.getMessage(), self.secrets)
        record.args = None
        if record.exc_info:
            # formatters reuse exc_text when it is already set
            text = logging.Formatter().formatException(record.exc_info)
            record.exc_text = redact(text, self.secrets)
        return True


def setup_logging(level: str = "INFO", fmt: str = "json", secrets: Iterable[str] = ()):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    handler.addFilter(RedactingFilter(secrets))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
