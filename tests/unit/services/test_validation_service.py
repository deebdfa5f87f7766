"""Unit tests for the field validation rules."""

from __future__ import annotations

import pytest
from signup.services.validation import (
    VALID,
    Field,
    Invalid,
    RegistrationInput,
    Valid,
    validate_email,
    validate_field,
    validate_form,
    validate_password,
    validate_username,
)
from signup.services.validation.service import (
    EMAIL_REASON,
    PASSWORD_REASON,
    REQUIRED_REASON,
    SPECIAL_CHARACTERS,
    USERNAME_REASON,
)


class TestUsername:
    @pytest.mark.parametrize("length", [1, 2, 21, 30])
    def test_out_of_range_is_invalid(self, length):
        assert validate_username("a" * length) == Invalid(USERNAME_REASON)

    @pytest.mark.parametrize("length", range(3, 21))
    def test_in_range_is_valid(self, length):
        assert validate_username("u" * length) == VALID

    @pytest.mark.parametrize("value", ["", None])
    def test_missing_is_required(self, value):
        assert validate_username(value) == Invalid(REQUIRED_REASON)


class TestEmail:
    @pytest.mark.parametrize(
        "value",
        ["alice@example.com", "x@y.com", "a@b.c", "first.last+tag@mail.example.org"],
    )
    def test_valid_addresses(self, value):
        assert validate_email(value) == VALID

    @pytest.mark.parametrize(
        "value",
        [
            "alice",
            "alice@",
            "@example.com",
            "alice@localhost",
            "alice@example",
            "a b@c.com",
            "alice@example.com\n",
            "alice@exa_mple.com",
        ],
    )
    def test_invalid_addresses(self, value):
        assert validate_email(value) == Invalid(EMAIL_REASON)

    def test_missing_is_required(self):
        assert validate_email("") == Invalid(REQUIRED_REASON)


class TestPassword:
    def test_all_classes_and_length_is_valid(self):
        assert validate_password("Abc123!") == VALID

    def test_minimum_length_is_six(self):
        assert validate_password("Ab1!cd") == VALID
        assert validate_password("Ab1!c") == Invalid(PASSWORD_REASON)

    @pytest.mark.parametrize(
        "value",
        [
            "ABC123!",  # no lowercase
            "abc123!",  # no uppercase
            "Abcdef!",  # no digit
            "Abc1234",  # no special character
        ],
    )
    def test_missing_one_class_is_invalid(self, value):
        assert validate_password(value) == Invalid(PASSWORD_REASON)

    @pytest.mark.parametrize("special", list(SPECIAL_CHARACTERS))
    def test_every_special_character_counts(self, special):
        assert validate_password(f"Abc123{special}") == VALID

    def test_reason_lists_every_condition(self):
        reason = PASSWORD_REASON.lower()
        for fragment in ("lowercase", "uppercase", "digit", "special", "6 characters"):
            assert fragment in reason

    def test_missing_is_required(self):
        assert validate_password(None) == Invalid(REQUIRED_REASON)


class TestForm:
    def test_validate_field_dispatches_by_name(self):
        assert validate_field("username", "ab") == Invalid(USERNAME_REASON)
        assert validate_field(Field.EMAIL, "x@y.com") == VALID

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError):
            validate_field("nickname", "bob")

    def test_empty_form_reports_required_everywhere(self):
        verdict = validate_form(RegistrationInput())

        assert not verdict
        assert verdict.errors == {
            Field.USERNAME: REQUIRED_REASON,
            Field.EMAIL: REQUIRED_REASON,
            Field.PASSWORD: REQUIRED_REASON,
        }

    def test_fields_are_independent(self):
        verdict = validate_form(
            RegistrationInput(username="ab", email="x@y.com", password="Abc123!")
        )

        assert verdict.errors == {Field.USERNAME: USERNAME_REASON}
        assert isinstance(verdict.results[Field.EMAIL], Valid)

    def test_validation_is_idempotent(self):
        data = RegistrationInput(username="alice", email="nope", password="weak")

        assert validate_form(data) == validate_form(data)
