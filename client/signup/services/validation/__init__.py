"""Field validation rules and their result types."""

from __future__ import annotations

from .dto import (
    VALID,
    Field,
    FormValidation,
    Invalid,
    RegistrationInput,
    Valid,
    ValidationResult,
)
from .service import (
    validate_email,
    validate_field,
    validate_form,
    validate_password,
    validate_username,
)

__all__ = [
    "VALID",
    "Field",
    "FormValidation",
    "Invalid",
    "RegistrationInput",
    "Valid",
    "ValidationResult",
    "validate_email",
    "validate_field",
    "validate_form",
    "validate_password",
    "validate_username",
]
