"""Unit tests for the logging utility."""

from __future__ import annotations

import asyncio
import io
import json
import logging

from signup.core.logger import (
    HANDLER_NAME,
    JSONFormatter,
    bind_attempt_id,
    configure_logging,
)

from tests.helpers.forms import run

LOG = logging.getLogger("signup.tests.logger")


def _records(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_includes_extra_keys() -> None:
    """Structured ``extra`` keys are rendered next to the message."""

    # Arrange
    record = logging.LogRecord(
        name="signup.services.registration.controller",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="signup.resolved state=%s",
        args=("succeeded",),
        exc_info=None,
    )
    record.state = "succeeded"

    # Act
    payload = json.loads(JSONFormatter().format(record))

    # Assert
    assert payload["message"] == "signup.resolved state=succeeded"
    assert payload["state"] == "succeeded"
    assert payload["level"] == "INFO"
    assert "field" not in payload


def test_bound_attempt_id_tags_records() -> None:
    """Records inside ``bind_attempt_id`` share its id; records outside carry none."""

    # Arrange
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)

    # Act
    with bind_attempt_id("attempt-1"):
        LOG.info("inside")
    LOG.info("outside")

    # Assert
    inside, outside = _records(stream)
    assert inside["correlation_id"] == "attempt-1"
    assert outside["correlation_id"] is None


def test_attempt_id_reaches_worker_threads() -> None:
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)

    async def _log_from_thread() -> None:
        await asyncio.to_thread(LOG.info, "from worker")

    with bind_attempt_id() as attempt_id:
        run(_log_from_thread())

    assert _records(stream)[0]["correlation_id"] == attempt_id


def test_password_extra_is_masked() -> None:
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)

    LOG.info("signup.submitted", extra={"password": "Abc123!", "field": "password"})

    (record,) = _records(stream)
    assert record["password"] == "***"
    assert record["field"] == "password"
    assert "Abc123!" not in stream.getvalue()


def test_configure_logging_replaces_only_its_own_handler() -> None:
    """Reconfiguring swaps the JSON handler and keeps foreign handlers."""

    # Arrange
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)

    try:
        # Act
        configure_logging("INFO", stream=io.StringIO())
        configure_logging("WARNING", stream=io.StringIO())

        # Assert
        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert foreign in root.handlers
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(foreign)
