"""
DTOs for the validation engine.

Per-field verdicts are a small sum type (:class:`Valid` | :class:`Invalid`)
so callers can branch on them with ``match`` or ``isinstance``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


class Field(str, Enum):
    """Names of the registration form fields, in display order."""

    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"


@dataclass(frozen=True, slots=True)
class RegistrationInput:
    """
    Values typed into the registration form.

    Frozen: the controller swaps in a new value on every change, so the value
    held at submit time doubles as the submitted snapshot.

    :param username: Public handle.
    :type username: str
    :param email: Contact / login email.
    :type email: str
    :param password: Raw password, never logged.
    :type password: str
    """

    username: str = ""
    email: str = ""
    password: str = field(default="", repr=False)

    def get(self, name: Field | str) -> str:
        """Return the value of ``name``."""
        return getattr(self, Field(name).value)


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class Valid:
    """The field satisfies its rule."""

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid:
    """
    The field violates its rule.

    :param reason: Message rendered next to the field.
    :type reason: str
    """

    reason: str

    @property
    def is_valid(self) -> bool:
        return False


ValidationResult = Valid | Invalid

VALID = Valid()


@dataclass(frozen=True, slots=True)
class FormValidation:
    """
    Verdicts for every field of a :class:`RegistrationInput`.

    :param results: Mapping of field to its verdict.
    :type results: Mapping[Field, ValidationResult]
    """

    results: Mapping[Field, ValidationResult]

    @property
    def is_valid(self) -> bool:
        return all(result.is_valid for result in self.results.values())

    @property
    def errors(self) -> dict[Field, str]:
        """Reasons keyed by field, only for invalid fields."""
        return {
            name: result.reason
            for name, result in self.results.items()
            if isinstance(result, Invalid)
        }

    def __bool__(self) -> bool:
        return self.is_valid
