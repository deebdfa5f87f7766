"""
JSON logging for the registration client.

Every record carries a ``correlation_id``. Inside a Flask request it is the
request id (taken from ``X-Request-ID``/``X-Correlation-ID`` or generated).
On the command line it is the id bound to the current registration attempt
with :func:`bind_attempt_id`. ``asyncio.to_thread`` copies the context, so
records emitted from the HTTP gateway's worker thread keep the attempt id.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

EXTRA_KEYS = ("endpoint", "elapsed_ms", "field", "state")
MASKED_KEYS = ("password",)
MASK = "***"

HANDLER_NAME = "signup.json"

_attempt_id: ContextVar[str | None] = ContextVar("signup_attempt_id", default=None)


class JSONFormatter(logging.Formatter):
    """One JSON object per record; known ``extra`` keys are copied, secrets masked."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", None),
        }
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        for key in MASKED_KEYS:
            if hasattr(record, key):
                payload[key] = MASK
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class CorrelationFilter(logging.Filter):
    """Stamp ``correlation_id`` on every record passing through the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = current_correlation_id()
        return True


def current_correlation_id() -> str | None:
    """Request id inside a Flask request, else the bound attempt id, else ``None``."""
    if has_request_context():
        return ensure_request_id()
    return _attempt_id.get()


def ensure_request_id() -> str:
    """
    Return the id of the current request, seeding ``g.request_id`` on first use.

    Outside a request the bound attempt id is returned, or a fresh one.
    """
    if not has_request_context():
        return _attempt_id.get() or uuid4().hex
    if "request_id" not in g:
        incoming = (request.headers.get(header) for header in CORRELATION_HEADERS)
        g.request_id = next((value for value in incoming if value), None) or uuid4().hex
    return g.request_id


@contextmanager
def bind_attempt_id(attempt_id: str | None = None) -> Iterator[str]:
    """Tag every record emitted inside the block with one attempt id."""
    value = attempt_id or uuid4().hex
    token = _attempt_id.set(value)
    try:
        yield value
    finally:
        _attempt_id.reset(token)


def configure_logging(
    level: str | int = "INFO", stream: IO[str] | None = None
) -> logging.Handler:
    """
    Install the JSON handler on the root logger and set its level.

    Calling it again replaces the handler installed by a previous call;
    handlers added by others (pytest's capture, for one) are left alone.
    Records go to ``stream`` (stdout by default); the CLI passes stderr so its
    own output stays clean.
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(CorrelationFilter())
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return handler


def init_app(app: Flask) -> None:
    """Seed the request id early and echo it back on every response."""

    app.logger.addFilter(CorrelationFilter())

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _echo_request_id(response):
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = [
    "JSONFormatter",
    "bind_attempt_id",
    "configure_logging",
    "current_correlation_id",
    "ensure_request_id",
    "init_app",
]
