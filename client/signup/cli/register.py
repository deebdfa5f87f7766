"""Click commands running the registration flow from a terminal."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from signup.core.config import get_config
from signup.core.extensions import build_gateway
from signup.core.logger import bind_attempt_id, configure_logging
from signup.services._shared.errors import SubmissionError, ValidationError
from signup.services.registration import FormState, RegistrationController

LOGGER = logging.getLogger(__name__)

EXIT_SUBMISSION_FAILED = 1
EXIT_INVALID_INPUT = 2


def _configure_logging(verbose: bool) -> None:
    """Keep the terminal quiet unless verbose output was requested."""
    configure_logging(logging.DEBUG if verbose else logging.ERROR, stream=sys.stderr)


def _echo_field_errors(controller: RegistrationController) -> None:
    """Print one line per invalid field, in form order."""
    for error in controller.validation_errors():
        click.echo(f"  {error.field}: {error.reason}", err=True)


@click.group("signup")
@click.option("--verbose", is_flag=True, help="Emit JSON logs to stderr.")
@click.pass_context
def signup_cli(ctx: click.Context, verbose: bool) -> None:
    """Create an account on the configured registration service."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@signup_cli.command("register")
@click.option("--username", prompt="Username", help="Public handle (3-20 characters).")
@click.option("--email", prompt="Email", help="Contact email address.")
@click.option(
    "--password",
    prompt="Password",
    hide_input=True,
    help="Needs lower, upper, digit and special characters.",
)
@click.option(
    "--url",
    default=None,
    help="Override the sign-up endpoint URL.",
)
@click.pass_context
def register_command(
    ctx: click.Context, username: str, email: str, password: str, url: str | None
) -> None:
    """Validate the values and submit them once."""
    config = get_config()
    gateway = ctx.obj.get("gateway") or build_gateway(
        {
            "REGISTRATION_API_URL": url or config.REGISTRATION_API_URL,
            "REGISTRATION_TIMEOUT": config.REGISTRATION_TIMEOUT,
        }
    )
    controller = RegistrationController(gateway)
    controller.fill(username=username, email=email, password=password)
    with bind_attempt_id() as attempt_id:
        LOGGER.debug("register.start attempt=%s", attempt_id)
        asyncio.run(controller.submit())

    try:
        controller.raise_for_outcome()
    except ValidationError:
        click.echo("Please fix the following fields:", err=True)
        _echo_field_errors(controller)
        ctx.exit(EXIT_INVALID_INPUT)
    except SubmissionError as exc:
        click.echo(f"Registration failed: {exc.message}", err=True)
        ctx.exit(EXIT_SUBMISSION_FAILED)

    if controller.state is FormState.SUCCEEDED:
        click.echo(controller.message)


@signup_cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
@click.option(
    "--debug/--no-debug",
    default=False,
    show_default=True,
    help="Run with the reloader and interactive debugger.",
)
def serve_command(host: str, port: int, debug: bool) -> None:
    """Serve the registration page with the development server.

    The interactive debugger stays off unless ``--debug`` is given, whatever
    ``DEBUG`` the selected config carries.
    """
    from signup.factory import create_app

    app = create_app()
    LOGGER.info("serve.start host=%s port=%s debug=%s", host, port, debug)
    app.run(host=host, port=port, debug=debug)
