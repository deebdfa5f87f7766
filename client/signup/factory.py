"""Application factory wiring the web surface, logging and error handlers."""

from __future__ import annotations

from flask import Flask

from signup.core.config import BaseConfig, get_config
from signup.core.logger import configure_logging, init_app as init_logging
from signup.services._shared.ports import RegistrationGateway


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    gateway: RegistrationGateway | None = None,
) -> Flask:
    """Build and configure the Flask application.

    Parameters
    ----------
    config:
        Config object or import path; defaults to the class selected by
        ``APP_ENV``.
    gateway:
        Registration gateway to use instead of the HTTP adapter built from
        ``REGISTRATION_API_URL``.
    """

    app = Flask(__name__)

    app.config.from_object(get_config() if config is None else config)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from signup.core import extensions

    extensions.init_app(app, gateway)

    init_logging(app)

    from signup import web

    web.init_app(app)

    from signup.core import errors

    errors.init_app(app)

    return app
