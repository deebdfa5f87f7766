"""Outbound service wiring and initialization helpers."""

from __future__ import annotations

from typing import Any

from flask import Flask, current_app

from signup.infra.http import RequestsRegistrationGateway
from signup.services._shared.ports import RegistrationGateway

GATEWAY_KEY = "registration_gateway"


def build_gateway(config: Any) -> RegistrationGateway:
    """Create the HTTP gateway from a config mapping or config class.

    Parameters
    ----------
    config:
        ``app.config`` or one of the classes in :mod:`signup.core.config`.
    """
    if isinstance(config, dict):
        url = config["REGISTRATION_API_URL"]
        timeout = config.get("REGISTRATION_TIMEOUT", 10.0)
    else:
        url = config.REGISTRATION_API_URL
        timeout = getattr(config, "REGISTRATION_TIMEOUT", 10.0)
    return RequestsRegistrationGateway(url, timeout=float(timeout))


def init_app(app: Flask, gateway: RegistrationGateway | None = None) -> None:
    """Attach the registration gateway to ``app.extensions``.

    Parameters
    ----------
    app: flask.Flask
        Application receiving the gateway.
    gateway:
        Pre-built gateway (tests inject a stub); built from config otherwise.
    """
    app.extensions[GATEWAY_KEY] = gateway or build_gateway(app.config)


def get_gateway() -> RegistrationGateway:
    """Return the gateway bound to the current application."""
    return current_app.extensions[GATEWAY_KEY]
