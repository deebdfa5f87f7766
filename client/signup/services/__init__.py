"""Service layer public API.

Re-exports
----------
- Validation engine (from ``signup.services.validation``)
    * :func:`validate_field`, :func:`validate_form`
    * DTOs: :class:`RegistrationInput`, :class:`Valid`, :class:`Invalid`,
      :class:`FormValidation`, :class:`Field`

- Registration controller (from ``signup.services.registration``)
    * :class:`RegistrationController`
    * DTOs: :class:`FormState`, :class:`FormView`, :class:`Pending`,
      :class:`Succeeded`, :class:`Failed`

- Shared errors and result types (from ``signup.services._shared``)
"""

from __future__ import annotations

from ._shared.errors import ServiceError, SubmissionError, ValidationError
from ._shared.result import Err, Ok, Result
from .registration import (
    Failed,
    FormState,
    FormView,
    Pending,
    RegistrationController,
    Succeeded,
    SubmissionOutcome,
)
from .validation import (
    Field,
    FormValidation,
    Invalid,
    RegistrationInput,
    Valid,
    ValidationResult,
    validate_field,
    validate_form,
)

__all__ = [
    # Shared
    "ServiceError",
    "SubmissionError",
    "ValidationError",
    "Ok",
    "Err",
    "Result",
    # Validation
    "Field",
    "FormValidation",
    "Invalid",
    "RegistrationInput",
    "Valid",
    "ValidationResult",
    "validate_field",
    "validate_form",
    # Registration
    "RegistrationController",
    "FormState",
    "FormView",
    "Pending",
    "Succeeded",
    "Failed",
    "SubmissionOutcome",
]
