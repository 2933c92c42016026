"""JSON logging with correlation ids for the health intelligence engine.

Every record leaves the process as one JSON object. Fields passed through
:func:`log_event` become top-level keys; anything that could place a user
on a map is scrubbed before it is written.
"""

from __future__ import annotations

import contextlib
import contextvars
import dataclasses
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator, Mapping, TextIO

SERVICE_NAME = "health-intelligence"
CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; only the extras are copied into the payload.
_RECORD_ATTRIBUTES = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}
_LOCATION_KEYS = frozenset(
    {"latitude", "longitude", "lat", "lon", "coordinates", "location", "station_id", "user_id"}
)
REDACTED = "[redacted]"


class JsonFormatter(logging.Formatter):
    """Render a record, its correlation id and its extra fields as JSON."""

    def __init__(self, service: str = SERVICE_NAME) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", message),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and key not in payload
        }
        payload.update(redact_for_log(extras))
        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(level: int | str | None = None, stream: TextIO | None = None) -> None:
    """Route the root logger through a single JSON handler."""

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))


def redact_for_log(payload: Any) -> Any:
    """Recursively replace location and identity fields with a marker.

    Dataclasses are flattened one level at a time so result objects can be
    logged as-is.
    """

    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        payload = {field.name: getattr(payload, field.name) for field in dataclasses.fields(payload)}
    if isinstance(payload, Mapping) and not isinstance(payload, dict):
        payload = dict(payload)
    if payload is None or isinstance(payload, (str, int, float, bool)):
        return payload
    if isinstance(payload, dict):
        return {
            key: REDACTED if str(key).lower() in _LOCATION_KEYS else redact_for_log(value)
            for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple, set, frozenset)):
        return [redact_for_log(item) for item in payload]
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    """Module logger; configures JSON output on first use if nothing else has."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt the given id, keep the current one, or mint a new one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    current = uuid.uuid4().hex
    CORRELATION_ID.set(current)
    return current


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Set a correlation id for the block and restore the previous one afterwards."""

    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with ``fields`` as structured extras."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope one named operation to a correlation id."""

    with correlation_context(correlation_id) as scoped_id:
        logging.getLogger(__name__).debug("entering %s", name, extra={"correlation_id": scoped_id})
        yield scoped_id


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
