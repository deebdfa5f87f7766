"""Marshmallow schemas for the sign-up endpoint payloads."""

from __future__ import annotations

from typing import Any

from marshmallow import INCLUDE, Schema, fields, post_load


class SignupRequestSchema(Schema):
    """Outgoing JSON body for account creation."""

    username = fields.String(required=True)
    email = fields.String(required=True)
    password = fields.String(required=True)


class MessageSchema(Schema):
    """
    Read the human-readable ``message`` out of a response body.

    Problem+json bodies carry the text in ``detail`` instead; it is used when
    ``message`` is absent, empty or not a string. Both keys are loaded raw so
    a malformed ``message`` does not discard a usable ``detail``.
    """

    class Meta:
        unknown = INCLUDE

    message = fields.Raw(load_default=None, allow_none=True)
    detail = fields.Raw(load_default=None, allow_none=True)

    @post_load
    def pick_message(self, data: dict[str, Any], **_: Any) -> str | None:
        for key in ("message", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
        return None
