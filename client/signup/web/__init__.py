"""Web surface: blueprints rendering the registration page."""

from __future__ import annotations

from flask import Flask

from .register import bp as register_bp


def init_app(app: Flask) -> None:
    """Register the web blueprints on ``app``."""

    app.register_blueprint(register_bp)


__all__ = ["init_app"]
