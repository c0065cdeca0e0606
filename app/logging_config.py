from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
import sys
from typing import Any

from app.logging_context import get_request_id

REDACTED = "[REDACTED]"
DEFAULT_REDACT_FIELDS = frozenset(
    {
        "password",
        "token",
        "secret",
        "csrf_token",
        "authorization",
        "cookie",
        "api_key",
        "set-cookie",
        "session",
    }
)
_DROPPED_FIELDS = frozenset({"color_message"})
_RESERVED_RECORD_ATTRS = frozenset(
    logging.makeLogRecord({}).__dict__.keys()
) | {"message", "asctime", "event"}


def parse_redact_fields(raw_value: str) -> frozenset[str]:
    parts = (part.strip().lower() for part in raw_value.split(","))
    return frozenset(part for part in parts if part)


def _format_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%SZ")


class _StructuredFormatterMixin:
    def _init_redaction(self, redact_fields: frozenset[str] | None) -> None:
        self._redact_fields = DEFAULT_REDACT_FIELDS | (redact_fields or frozenset())

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                key: REDACTED if str(key).lower() in self._redact_fields else self._redact(item)
                for key, item in value.items()
            }
        if isinstance(value, (list, tuple)):
            return [self._redact(item) for item in value]
        return value

    def _extra_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_ATTRS and key not in _DROPPED_FIELDS
        }
        return self._redact(fields)


class JsonLogFormatter(_StructuredFormatterMixin, logging.Formatter):
    def __init__(self, *, redact_fields: frozenset[str] | None = None) -> None:
        super().__init__()
        self._init_redaction(redact_fields)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": _format_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        request_id = get_request_id()
        if request_id:
            payload["request_id"] = request_id
        payload.update(self._extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


class ConsoleLogFormatter(_StructuredFormatterMixin, logging.Formatter):
    def __init__(self, *, redact_fields: frozenset[str] | None = None) -> None:
        super().__init__()
        self._init_redaction(redact_fields)

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            _format_timestamp(record.created),
            record.levelname,
            record.name,
            record.getMessage(),
        ]
        request_id = get_request_id()
        if request_id:
            parts.append(f"request_id={request_id}")
        parts.extend(f"{key}={value}" for key, value in self._extra_fields(record).items())
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(
    *,
    level: str = "INFO",
    log_format: str = "console",
    redact_fields: frozenset[str] | None = None,
    include_uvicorn_access: bool = False,
) -> None:
    formatter: logging.Formatter
    if log_format == "json":
        formatter = JsonLogFormatter(redact_fields=redact_fields)
    else:
        formatter = ConsoleLogFormatter(redact_fields=redact_fields)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in ("uvicorn", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    access_logger = logging.getLogger("uvicorn.access")
    access_logger.handlers.clear()
    access_logger.propagate = include_uvicorn_access
    access_logger.disabled = not include_uvicorn_access
