"""Registration controller exposing the form state machine and its DTOs."""

from __future__ import annotations

from .controller import RegistrationController
from .dto import Failed, FormState, FormView, Pending, Succeeded, SubmissionOutcome
from .messages import DEFAULT_SUCCESS_MESSAGE, failure_message, success_message

__all__ = [
    "RegistrationController",
    "FormState",
    "FormView",
    "Pending",
    "Succeeded",
    "Failed",
    "SubmissionOutcome",
    "DEFAULT_SUCCESS_MESSAGE",
    "failure_message",
    "success_message",
]
