"""Server-rendered registration page driven by the registration controller."""

from __future__ import annotations

import asyncio
import functools
import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Blueprint, current_app, render_template, request

from signup.core.extensions import get_gateway
from signup.services.registration import FormState, RegistrationController
from signup.services.validation import Field

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

bp = Blueprint("register", __name__)


def timing(func: F) -> F:
    """Log the wall time spent rendering a page."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            log.info(
                "page.rendered endpoint=%s",
                request.endpoint,
                extra={"endpoint": request.endpoint, "elapsed_ms": elapsed_ms},
            )

    return cast(F, wrapper)


def _render(controller: RegistrationController, status: int = 200):
    view = controller.view()
    return (
        render_template(
            "register.html",
            view=view,
            login_url=current_app.config.get("LOGIN_URL", "/login"),
        ),
        status,
    )


@bp.get("/register")
@timing
def register_form():
    """Render an empty registration form."""

    return _render(RegistrationController(get_gateway()))


@bp.post("/register")
@timing
def register_submit():
    """Run one registration attempt with the posted values and render the result.

    Each request owns a fresh controller, i.e. one form instance.
    """

    controller = RegistrationController(get_gateway())
    controller.fill(**{name.value: request.form.get(name.value, "") for name in Field})
    asyncio.run(controller.submit())
    status = 422 if controller.state is FormState.EDITING else 200
    return _render(controller, status)
