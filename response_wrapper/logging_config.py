"""Structured JSON logging for applications that use the response wrapper.

The package itself only creates module loggers. Applications opt in to JSON
output by calling :func:`configure_logging` once at startup; with no argument
the level comes from ``RESPONSE_WRAPPER_LOG_LEVEL``.

Each entry carries timestamp, level, logger and message. Result-specific
fields are copied from ``extra`` when present: succeeded and message_count
for rendered results, status_code and error_type for handled errors,
total_count, page and page_size for pagination.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

from response_wrapper.config.settings import ResponseWrapperSettings

# key=value or key: value pairs whose value must not reach the logs
_SECRET_PAIR = re.compile(
    r"\b(api[_-]?key|secret|password|token|authorization)\b\s*[=:]\s*\S+",
    re.IGNORECASE,
)

_EXTRA_FIELDS = (
    "succeeded",
    "message_count",
    "status_code",
    "error_type",
    "total_count",
    "page",
    "page_size",
)


def redact(text: str) -> str:
    """Replace every secret-looking ``key=value`` pair with ``[REDACTED]``."""
    return _SECRET_PAIR.sub("[REDACTED]", text)


class JsonFormatter(logging.Formatter):
    """Formats log records as one-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
        }
        entry.update(
            (name, getattr(record, name))
            for name in _EXTRA_FIELDS
            if hasattr(record, name)
        )
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = redact(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)


def configure_logging(level: str | None = None) -> None:
    """Send root-logger output through :class:`JsonFormatter`.

    Parameters
    ----------
    level:
        Level name such as ``"DEBUG"``. Defaults to the ``log_level`` setting;
        names that are not logging levels fall back to INFO.
    """
    if level is None:
        level = ResponseWrapperSettings().log_level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(resolved)
    root.handlers[:] = [handler]
