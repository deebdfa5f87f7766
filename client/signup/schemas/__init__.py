"""Convenience exports for payload schemas."""

from __future__ import annotations

from .registration import MessageSchema, SignupRequestSchema

__all__ = ["MessageSchema", "SignupRequestSchema"]
