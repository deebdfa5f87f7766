"""HTTP adapters for outbound service calls."""

from __future__ import annotations

from .requests_registration_gateway import RequestsRegistrationGateway

__all__ = ["RequestsRegistrationGateway"]
