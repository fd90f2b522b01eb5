"""Typed records produced by the portal forms."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class ClinicLocation(str, Enum):
    """Clinic sites a patient can choose for an appointment."""

    MAIN = "main"
    NORTH = "north"
    WEST = "west"
    SOUTH = "south"

    @property
    def label(self) -> str:
        return _LOCATION_LABELS[self]


_LOCATION_LABELS = {
    ClinicLocation.MAIN: "Main Clinic - Downtown",
    ClinicLocation.NORTH: "Northside Medical Center",
    ClinicLocation.WEST: "West End Clinic",
    ClinicLocation.SOUTH: "South City Hospital",
}


class Urgency(str, Enum):
    """How soon the patient needs to be seen."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def description(self) -> str:
        return _URGENCY_DESCRIPTIONS[self]


_URGENCY_DESCRIPTIONS = {
    Urgency.LOW: "Routine check-up or non-urgent matter",
    Urgency.MEDIUM: "Need attention soon but not emergency",
    Urgency.HIGH: "Need immediate medical attention",
}


@dataclass(slots=True)
class AppointmentRequest:
    """Patient details and preferences captured by the appointment form."""

    full_name: str = ""
    phone: str = ""
    email: str = ""
    dob: str = ""
    address: str = ""
    location: str = ""
    preferred_date: str = ""
    symptoms: str = ""
    urgency: str = Urgency.HIGH.value
    notes: str = ""


@dataclass(slots=True)
class RegistrationRequest:
    """Account details captured by the registration form."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    dob: str = ""
    password: str = ""
    confirm_password: str = ""
    accept_terms: bool = False


@dataclass(slots=True)
class ContactMessage:
    """A message sent through the contact page."""

    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


def record_to_dict(record: Any) -> dict[str, Any]:
    return asdict(record)
