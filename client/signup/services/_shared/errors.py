"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask, click, or ``requests`` directly. They serve as stable contracts
between the validation engine, the registration controller and the surfaces
(web page, CLI) that render them.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - Surfaces translate them to inline messages or exit codes.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class ValidationError(ServiceError):
    """
    Raised when a field fails its validation rule.

    Recovered locally: rendered next to the field, blocks submission.

    :param field: Field name (``username``, ``email`` or ``password``).
    :type field: str
    :param reason: Human-readable rule violation.
    :type reason: str
    """

    field: str
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


@dataclass(slots=True)
class SubmissionError(ServiceError):
    """
    Raised when the remote registration attempt fails.

    Not recoverable by the controller; the message is shown verbatim.

    :param message: User-facing failure message.
    :type message: str
    """

    message: str

    def __str__(self) -> str:
        return self.message
