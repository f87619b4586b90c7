"""JSON logging for the login flow with credential redaction."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Final

REDACTED: Final[str] = "[REDACTED]"

# Keys whose values are bearer credentials or secrets, compared case-insensitively.
SENSITIVE_FIELDS: Final[frozenset[str]] = frozenset(
    {"token", "access_token", "refresh_token", "authorization", "password", "secret"}
)

_STANDARD_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.makeLogRecord({})).keys() | {"message", "asctime", "taskName"}
)

_LOGGING_CONFIGURED: bool = False


def redact(value: object) -> object:
    """Return ``value`` with every sensitive mapping key masked, recursively."""

    if isinstance(value, Mapping):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_FIELDS else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


class JsonLogFormatter(logging.Formatter):
    """Render records as single JSON lines, masking tokens passed via ``extra=``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_") and value is not None
        }
        for key, value in redact(extras).items():
            entry[key] = _jsonable(value)

        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info).replace("\n", " | ")

        return json.dumps(entry, ensure_ascii=True, separators=(",", ":"))


def _jsonable(value: object) -> object:
    if isinstance(value, (str, int, float, bool)):
        return value
    try:
        json.dumps(value)
    except TypeError:
        return str(value)
    return value


def configure_logging(level_name: str) -> None:
    """Install the JSON formatter on the root logger once."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonLogFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(level_name))
    _LOGGING_CONFIGURED = True


def _resolve_level(level_name: str) -> int:
    level_value = logging.getLevelName(level_name.upper())
    if isinstance(level_value, int):
        return level_value
    return logging.INFO


__all__ = ["JsonLogFormatter", "REDACTED", "configure_logging", "redact"]
