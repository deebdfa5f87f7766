from __future__ import annotations

import logging
from dataclasses import replace

from signup.services._shared.errors import SubmissionError, ValidationError
from signup.services._shared.ports.registration_gateway import RegistrationGateway
from signup.services._shared.result import Err, Ok, Result
from signup.services.registration.dto import (
    Failed,
    FormState,
    FormView,
    Pending,
    Succeeded,
    SubmissionOutcome,
)
from signup.services.registration.messages import failure_message, success_message
from signup.services.validation.dto import (
    Field,
    Invalid,
    RegistrationInput,
    ValidationResult,
)
from signup.services.validation.service import validate_field, validate_form

log = logging.getLogger(__name__)


class RegistrationController:
    """
    State machine driving one registration form.

    ``EDITING -> SUBMITTING -> SUCCEEDED | FAILED``; a field change from
    ``FAILED`` goes back to ``EDITING``. The gateway call is the only
    suspension point and at most one attempt is in flight per instance.
    """

    def __init__(self, gateway: RegistrationGateway) -> None:
        """
        Initialize an empty form.

        :param gateway: Port performing the remote account creation.
        """
        self.gateway = gateway
        self.state = FormState.EDITING
        self.data = RegistrationInput()
        self.errors: dict[Field, str] = {}
        self.outcome: SubmissionOutcome | None = None
        self.submitted: RegistrationInput | None = None

    # ------------------------------------------------------------------ #
    # Editing
    # ------------------------------------------------------------------ #

    def change(self, name: Field | str, value: str | None) -> ValidationResult:
        """
        Update one field and re-validate it.

        Ignored while an attempt is in flight or once registration succeeded.

        :returns: The field's fresh verdict.
        """
        name = Field(name)
        value = value or ""
        if self.state in (FormState.SUBMITTING, FormState.SUCCEEDED):
            log.warning(
                "signup.change_ignored field=%s state=%s",
                name.value,
                self.state.value,
                extra={"field": name.value, "state": self.state.value},
            )
            return validate_field(name, self.data.get(name))

        self.data = replace(self.data, **{name.value: value})
        result = validate_field(name, value)
        if isinstance(result, Invalid):
            self.errors[name] = result.reason
        else:
            self.errors.pop(name, None)
        if self.state is FormState.FAILED:
            self.state = FormState.EDITING
        return result

    def fill(self, **values: str | None) -> None:
        """Apply several field changes at once."""
        for name, value in values.items():
            self.change(name, value)

    def validation_errors(self) -> list[ValidationError]:
        """Current field errors as domain exceptions, in form order."""
        return [
            ValidationError(name.value, self.errors[name]) for name in Field if name in self.errors
        ]

    # ------------------------------------------------------------------ #
    # Submission
    # ------------------------------------------------------------------ #

    async def submit(self) -> SubmissionOutcome | None:
        """
        Validate the whole form and, when valid, run one registration attempt.

        :returns: ``None`` when validation blocked the attempt; otherwise the
            outcome (the current one if the call was ignored).
        """
        if self.state in (FormState.SUBMITTING, FormState.SUCCEEDED):
            log.info(
                "signup.submit_ignored state=%s",
                self.state.value,
                extra={"state": self.state.value},
            )
            return self.outcome

        verdict = validate_form(self.data)
        self.errors = dict(verdict.errors)
        if not verdict.is_valid:
            self.state = FormState.EDITING
            log.info(
                "signup.submit_blocked fields=%s",
                ",".join(name.value for name in self.errors),
                extra={"state": self.state.value},
            )
            return None

        self.submitted = self.data
        self.outcome = Pending()
        self.state = FormState.SUBMITTING
        log.info("signup.submitting", extra={"state": self.state.value})

        result = await self._call(self.submitted)
        match result:
            case Ok(payload):
                self.outcome = Succeeded(success_message(payload))
                self.state = FormState.SUCCEEDED
            case Err(error):
                self.outcome = Failed(failure_message(error))
                self.state = FormState.FAILED
            case _:
                self.outcome = Failed(failure_message(result))
                self.state = FormState.FAILED
        log.info(
            "signup.resolved state=%s",
            self.state.value,
            extra={"state": self.state.value},
        )
        return self.outcome

    async def _call(self, data: RegistrationInput) -> Result:
        try:
            return await self.gateway.register(data.username, data.email, data.password)
        except Exception as exc:
            log.warning("signup.gateway_raised error=%s", type(exc).__name__, exc_info=True)
            return Err(exc)

    def raise_for_outcome(self) -> None:
        """
        Raise the error matching the current state, if any.

        :raises ValidationError: For the first invalid field.
        :raises SubmissionError: When the last attempt failed.
        """
        errors = self.validation_errors()
        if errors:
            raise errors[0]
        if isinstance(self.outcome, Failed):
            raise SubmissionError(self.outcome.message)

    # ------------------------------------------------------------------ #
    # Read model
    # ------------------------------------------------------------------ #

    @property
    def message(self) -> str:
        return self.outcome.message if self.outcome is not None else ""

    def view(self) -> FormView:
        """Snapshot of the form for rendering. The password is never echoed."""
        return FormView(
            state=self.state,
            username=self.data.username,
            email=self.data.email,
            errors={name.value: reason for name, reason in self.errors.items()},
            message=self.message,
            show_inputs=self.state is not FormState.SUCCEEDED,
            can_submit=self.state in (FormState.EDITING, FormState.FAILED),
        )
