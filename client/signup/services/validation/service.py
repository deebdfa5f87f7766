"""
Field validation rules for the registration form.

Every rule is a pure predicate over one value returning :class:`Valid` or
:class:`Invalid`. The required-field rule runs first for every field and
short-circuits the field-specific rule.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from marshmallow import ValidationError as MarshmallowValidationError
from marshmallow import validate

from signup.services.validation.dto import (
    VALID,
    Field,
    FormValidation,
    Invalid,
    RegistrationInput,
    ValidationResult,
)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 6

SPECIAL_CHARACTERS = " `!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~"

REQUIRED_REASON = "This field is required!"
USERNAME_REASON = (
    f"The username must be between {USERNAME_MIN_LENGTH} and "
    f"{USERNAME_MAX_LENGTH} characters."
)
EMAIL_REASON = "This is not a valid email."
PASSWORD_REASON = (
    "The password must contain at least one lowercase character, one uppercase "
    "character, one digit, one special character and at least "
    f"{PASSWORD_MIN_LENGTH} characters."
)

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

_LETTERS = "\u00a1-\uffff"
_LABEL = (
    r"[A-Z0-9" + _LETTERS + r"]"
    r"(?:[A-Z0-9" + _LETTERS + r"-]{0,61}[A-Z0-9" + _LETTERS + r"])?"
)


class RegistrationEmail(validate.Email):
    """
    marshmallow email check with a dotted domain of plain labels.

    Any final label length is accepted (``a@b.c``) and the bare
    ``localhost`` shortcut is dropped.
    """

    DOMAIN_REGEX = re.compile(
        r"(?:" + _LABEL + r"\.)+" + _LABEL + r"\Z"
        # literal form, ipv4 address
        r"|^\[(25[0-5]|2[0-4]\d|[0-1]?\d?\d)(\.(25[0-5]|2[0-4]\d|[0-1]?\d?\d)){3}\]\Z",
        re.IGNORECASE | re.UNICODE,
    )
    DOMAIN_WHITELIST = ()


_email_syntax = RegistrationEmail(error=EMAIL_REASON)


def _is_missing(value: str | None) -> bool:
    return value is None or value == ""


def validate_username(value: str | None) -> ValidationResult:
    """Username must hold between 3 and 20 characters inclusive."""
    if _is_missing(value):
        return Invalid(REQUIRED_REASON)
    if not USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH:
        return Invalid(USERNAME_REASON)
    return VALID


def validate_email(value: str | None) -> ValidationResult:
    """
    Email must look like ``local-part@domain`` with a dotted domain.

    A single-character final label is accepted; a bare host name is not.
    """
    if _is_missing(value):
        return Invalid(REQUIRED_REASON)
    try:
        _email_syntax(value)
    except MarshmallowValidationError:
        return Invalid(EMAIL_REASON)
    return VALID


def validate_password(value: str | None) -> ValidationResult:
    """
    Password strength is a single composite rule.

    Length, lowercase, uppercase, digit and special character must all hold;
    the reason always lists the five conditions together.
    """
    if _is_missing(value):
        return Invalid(REQUIRED_REASON)
    strong = (
        len(value) >= PASSWORD_MIN_LENGTH
        and _LOWERCASE.search(value) is not None
        and _UPPERCASE.search(value) is not None
        and _DIGIT.search(value) is not None
        and _SPECIAL.search(value) is not None
    )
    return VALID if strong else Invalid(PASSWORD_REASON)


RULES: dict[Field, Callable[[str | None], ValidationResult]] = {
    Field.USERNAME: validate_username,
    Field.EMAIL: validate_email,
    Field.PASSWORD: validate_password,
}


def validate_field(name: Field | str, value: str | None) -> ValidationResult:
    """
    Validate one field by name.

    :raises ValueError: If ``name`` is not a registration field.
    """
    return RULES[Field(name)](value)


def validate_form(data: RegistrationInput) -> FormValidation:
    """Validate every field of ``data``; fields are independent of each other."""
    return FormValidation(results={name: rule(data.get(name)) for name, rule in RULES.items()})


__all__ = [
    "PASSWORD_REASON",
    "EMAIL_REASON",
    "REQUIRED_REASON",
    "USERNAME_REASON",
    "SPECIAL_CHARACTERS",
    "validate_email",
    "validate_field",
    "validate_form",
    "validate_password",
    "validate_username",
]
