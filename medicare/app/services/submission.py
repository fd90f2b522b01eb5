"""Submission port used by the portal forms.

No backend exists yet for appointment requests, registrations or contact
messages. :class:`SimulatedSubmissionPort` stands in for it: it waits for a
fixed delay to emulate the network round trip, logs the sanitized payload
and hands back a receipt. Tests and future integrations swap in another
object implementing :class:`SubmissionPort`.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Protocol
from uuid import uuid4

from flask import Flask, current_app

from medicare.app.forms.records import RegistrationRequest, record_to_dict
from medicare.extensions import bcrypt

LOGGER = logging.getLogger(__name__)

EXTENSION_KEY = "submission_port"


class SubmissionError(RuntimeError):
    """Raised when a form submission could not be completed."""


@dataclass(slots=True)
class SubmissionReceipt:
    """Acknowledgement returned for an accepted submission."""

    form_name: str
    reference: str
    submitted_at: datetime
    payload: dict[str, Any] = field(default_factory=dict)


class SubmissionPort(Protocol):
    """Anything able to accept a validated form record."""

    def submit(self, form_name: str, record: Any) -> SubmissionReceipt:
        ...


def sanitize_record(record: Any) -> dict[str, Any]:
    """Return the payload a backend would receive for ``record``.

    Registration passwords are replaced by a bcrypt hash and the confirmation
    value is dropped.
    """

    payload = record_to_dict(record)
    if isinstance(record, RegistrationRequest):
        payload.pop("confirm_password", None)
        password = payload.pop("password", "")
        if password:
            payload["password_hash"] = bcrypt.generate_password_hash(password).decode("utf-8")
    return payload


class SimulatedSubmissionPort:
    """Submission port that emulates latency instead of calling a backend."""

    def __init__(
        self,
        delay_seconds: float = 1.5,
        *,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if isinstance(delay_seconds, bool) or not isinstance(delay_seconds, (int, float)):
            raise ValueError("delay_seconds must be a number of seconds.")
        self.delay_seconds = float(delay_seconds)
        self._sleep = sleep or time.sleep

    def submit(self, form_name: str, record: Any) -> SubmissionReceipt:
        try:
            self._sleep(self.delay_seconds)
            payload = sanitize_record(record)
        except (ValueError, OverflowError, OSError) as exc:
            raise SubmissionError(f"Simulated {form_name} submission failed.") from exc

        receipt = SubmissionReceipt(
            form_name=form_name,
            reference=uuid4().hex[:12],
            submitted_at=datetime.now(timezone.utc),
            payload=payload,
        )
        LOGGER.info("Form %s submitted (reference %s).", form_name, receipt.reference)
        LOGGER.debug("Submitted %s payload: %s", form_name, payload)
        return receipt


def init_submission_port(app: Flask, port: SubmissionPort | None = None) -> None:
    """Attach the submission port used by the views of ``app``."""

    if port is None:
        port = SimulatedSubmissionPort(app.config.get("SUBMISSION_DELAY_SECONDS", 1.5))
    app.extensions[EXTENSION_KEY] = port


def get_submission_port() -> SubmissionPort:
    """Return the submission port registered on the current application."""

    return current_app.extensions[EXTENSION_KEY]
