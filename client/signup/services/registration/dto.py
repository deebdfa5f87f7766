"""
DTOs for the registration controller.

Contracts describing the lifecycle of one registration form: its state, the
outcome of a submission attempt, and the read model handed to surfaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# --------------------------------------------------------------------------- #
# State
# --------------------------------------------------------------------------- #


class FormState(str, Enum):
    """Lifecycle of a registration form instance."""

    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# --------------------------------------------------------------------------- #
# Submission outcome
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class Pending:
    """The remote call is in flight."""

    message: str = ""


@dataclass(frozen=True, slots=True)
class Succeeded:
    """
    The account was created.

    :param message: Message extracted from the success payload.
    :type message: str
    """

    message: str


@dataclass(frozen=True, slots=True)
class Failed:
    """
    The remote call rejected or errored.

    :param message: Message extracted from the error object.
    :type message: str
    """

    message: str


SubmissionOutcome = Pending | Succeeded | Failed


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class FormView:
    """
    Everything a surface needs to render the form.

    :param state: Current lifecycle state.
    :type state: FormState
    :param username: Current username value.
    :type username: str
    :param email: Current email value.
    :type email: str
    :param errors: Field name -> reason, only for fields currently invalid.
    :type errors: dict[str, str]
    :param message: Outcome message, empty when there is none.
    :type message: str
    :param show_inputs: ``False`` once registration succeeded.
    :type show_inputs: bool
    :param can_submit: ``False`` while an attempt is in flight or after success.
    :type can_submit: bool
    """

    state: FormState
    username: str
    email: str
    errors: dict[str, str] = field(default_factory=dict)
    message: str = ""
    show_inputs: bool = True
    can_submit: bool = True
