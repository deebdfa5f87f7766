"""Map remote success and error shapes to a single user-visible message."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from marshmallow import ValidationError as MarshmallowValidationError

from signup.schemas.registration import MessageSchema

DEFAULT_SUCCESS_MESSAGE = "Registration successful."

_message_schema = MessageSchema()


def _lookup(obj: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute, ``None`` when missing."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _body_message(body: Any) -> str | None:
    if not isinstance(body, Mapping):
        return None
    try:
        return _message_schema.load(body)
    except MarshmallowValidationError:
        return None


def _response_body(response: Any) -> Any:
    """Return the decoded body of a nested response (``data`` or JSON)."""
    data = _lookup(response, "data")
    if data is not None:
        return data
    decode = getattr(response, "json", None)
    if callable(decode):
        try:
            return decode()
        except ValueError:
            return None
    return None


def _native_message(error: Any) -> str | None:
    message = _lookup(error, "message")
    if isinstance(message, str) and message:
        return message
    if isinstance(error, BaseException) and error.args:
        first = error.args[0]
        if isinstance(first, str) and first:
            return first
    return None


def success_message(payload: Any) -> str:
    """Return the ``message`` of a success payload, or a generic confirmation."""
    return _body_message(payload) or DEFAULT_SUCCESS_MESSAGE


def failure_message(error: Any) -> str:
    """
    Extract the message of a rejected attempt.

    Precedence:

    1. the nested error response's message (``error.response.data.message``,
       or the JSON body of an HTTP response);
    2. the error's own message;
    3. ``str(error)`` as a last resort.
    """
    response = _lookup(error, "response")
    if response is not None:
        nested = _body_message(_response_body(response))
        if nested:
            return nested
    native = _native_message(error)
    if native:
        return native
    return str(error) or type(error).__name__


__all__ = ["DEFAULT_SUCCESS_MESSAGE", "failure_message", "success_message"]
