"""Global pytest fixtures for the signup client."""

from __future__ import annotations

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from flask import Flask

# Ensure the ``client`` package root is importable without installation
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "client"))

os.environ.setdefault("APP_ENV", "testing")

from signup import create_app  # noqa: E402
from signup.core.config import TestingConfig  # noqa: E402
from signup.services._shared.ports import StubRegistrationGateway  # noqa: E402
from signup.services.registration import RegistrationController  # noqa: E402

from tests.helpers.forms import VALID_FORM  # noqa: E402


@pytest.fixture()
def gateway() -> StubRegistrationGateway:
    """In-memory gateway resolving with a generic success."""

    return StubRegistrationGateway()


@pytest.fixture()
def controller(gateway: StubRegistrationGateway) -> RegistrationController:
    """Empty registration form bound to the stub gateway."""

    return RegistrationController(gateway)


@pytest.fixture()
def filled_controller(controller: RegistrationController) -> RegistrationController:
    """Registration form holding valid values, not yet submitted."""

    controller.fill(**VALID_FORM)
    return controller


@pytest.fixture()
def app(gateway: StubRegistrationGateway) -> Generator[Flask, None, None]:
    """Create a Flask application for tests wired to the stub gateway.

    Returns
    -------
    Generator[Flask, None, None]
        Configured Flask application instance.
    """

    application = create_app(TestingConfig, gateway=gateway)
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()
