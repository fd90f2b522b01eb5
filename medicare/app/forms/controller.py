"""State machine shared by every portal form."""
from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Any, Callable

from medicare.app.forms.schema import FormSchema
from medicare.app.services.submission import (
    SubmissionError,
    SubmissionPort,
    SubmissionReceipt,
)

LOGGER = logging.getLogger(__name__)


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"


class FormController:
    """Owns the values, errors and submission state of one form view.

    The controller moves ``IDLE -> SUBMITTING -> SUCCESS`` when validation
    passes and the submission port accepts the record. Validation failures
    keep it in ``IDLE`` with :attr:`errors` populated; a
    :class:`SubmissionError`, or any unexpected error raised by the port,
    returns it to ``IDLE`` with :attr:`submission_error` set to the schema's
    generic message.
    """

    def __init__(
        self,
        schema: FormSchema,
        port: SubmissionPort,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.schema = schema
        self.port = port
        self._today = today
        self.values: dict[str, Any] = schema.initial_values()
        self.errors: dict[str, str] = {}
        self.submission_error: str | None = None
        self.receipt: SubmissionReceipt | None = None
        self.state = FormState.IDLE

    @property
    def busy(self) -> bool:
        return self.state is FormState.SUBMITTING

    @property
    def succeeded(self) -> bool:
        return self.state is FormState.SUCCESS

    @property
    def redirect_endpoint(self) -> str | None:
        if self.succeeded:
            return self.schema.redirect_endpoint
        return None

    def update_field(self, name: str, value: Any) -> None:
        """Store the raw input value and clear that field's error, if any."""

        self.schema.get_field(name)
        self.values[name] = value
        self.errors.pop(name, None)

    def bind(self, data: dict[str, Any]) -> None:
        for name, value in data.items():
            self.update_field(name, value)

    def validate(self) -> bool:
        self.errors = self.schema.validate(self.values, self._today())
        return not self.errors

    def submit(self) -> FormState:
        """Validate and, when valid, hand the record to the submission port."""

        if self.state is not FormState.IDLE:
            LOGGER.debug("Ignoring %s submit while %s.", self.schema.name, self.state.value)
            return self.state

        self.submission_error = None
        if not self.validate():
            LOGGER.debug(
                "%s form failed validation: %s", self.schema.name, sorted(self.errors)
            )
            return self.state

        self.state = FormState.SUBMITTING
        record = self.schema.build_record(self.values)
        try:
            receipt = self.port.submit(self.schema.name, record)
        except SubmissionError:
            LOGGER.warning("Submission of %s form failed.", self.schema.name, exc_info=True)
            return self._fail()
        except Exception:
            LOGGER.exception("Unexpected error while submitting %s form.", self.schema.name)
            return self._fail()

        self.receipt = receipt
        self.values = self.schema.initial_values()
        self.state = FormState.SUCCESS
        return self.state

    def _fail(self) -> FormState:
        self.submission_error = self.schema.failure_message
        self.state = FormState.IDLE
        return self.state

    def submit_another(self) -> None:
        """Leave the success view and show an empty form again."""

        if self.state is not FormState.SUCCESS:
            return
        self.values = self.schema.initial_values()
        self.errors = {}
        self.submission_error = None
        self.receipt = None
        self.state = FormState.IDLE
