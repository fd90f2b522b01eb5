"""Schemas for the appointment, registration and contact forms."""
from __future__ import annotations

from medicare.app.forms import rules
from medicare.app.forms.records import (
    AppointmentRequest,
    ClinicLocation,
    ContactMessage,
    RegistrationRequest,
    Urgency,
)
from medicare.app.forms.schema import FieldSpec, FormSchema

INVALID_DATE_MESSAGE = "Please enter a valid date"

LOCATION_CHOICES = tuple(location.value for location in ClinicLocation)
URGENCY_CHOICES = tuple(level.value for level in Urgency)

APPOINTMENT_FORM = FormSchema(
    name="appointment",
    record_factory=AppointmentRequest,
    failure_message="There was an error submitting your form. Please try again.",
    success_message=(
        "Thank you for your submission. We will contact you within 24 hours "
        "to confirm your appointment details."
    ),
    fields=(
        FieldSpec("full_name"),
        FieldSpec("phone", rules=(rules.phone("Please enter a valid phone number"),)),
        FieldSpec("email", rules=(rules.email("Please enter a valid email address"),)),
        FieldSpec("dob", rules=(rules.iso_date(INVALID_DATE_MESSAGE),)),
        FieldSpec("address"),
        FieldSpec(
            "location",
            rules=(rules.one_of(LOCATION_CHOICES, "Please select a valid location"),),
            choices=LOCATION_CHOICES,
        ),
        FieldSpec(
            "preferred_date",
            rules=(
                rules.iso_date(INVALID_DATE_MESSAGE),
                rules.not_before_today("Appointment date cannot be in the past"),
            ),
        ),
        FieldSpec("symptoms"),
        FieldSpec(
            "urgency",
            required=False,
            default=Urgency.HIGH.value,
            rules=(rules.one_of(URGENCY_CHOICES, "Please select a valid urgency level"),),
            choices=URGENCY_CHOICES,
        ),
        FieldSpec("notes", required=False),
    ),
)

REGISTRATION_FORM = FormSchema(
    name="registration",
    record_factory=RegistrationRequest,
    failure_message="Registration failed. Please try again.",
    success_message="Your account has been created. Please sign in.",
    redirect_endpoint="frontend.login_page",
    fields=(
        FieldSpec("full_name", required_message="Full name is required"),
        FieldSpec(
            "email",
            required_message="Email is required",
            rules=(rules.email("Please enter a valid email"),),
        ),
        FieldSpec("phone", required_message="Phone number is required"),
        FieldSpec(
            "dob",
            required_message="Date of birth is required",
            rules=(
                rules.iso_date(INVALID_DATE_MESSAGE),
                rules.not_after_today("Date of birth cannot be in the future"),
            ),
        ),
        FieldSpec(
            "password",
            required_message="Password is required",
            rules=(
                rules.min_length(8, "Password must be at least 8 characters"),
                rules.password_classes("Password must contain uppercase, lowercase, and number"),
            ),
        ),
        FieldSpec(
            "confirm_password",
            required_message="Please confirm your password",
            rules=(rules.equals_field("password", "Passwords do not match"),),
        ),
        FieldSpec(
            "accept_terms",
            required_message="You must accept the terms and conditions",
            default=False,
        ),
    ),
)

CONTACT_FORM = FormSchema(
    name="contact",
    record_factory=ContactMessage,
    failure_message="Failed to send message. Please try again.",
    success_message="Thank you for reaching out. We will get back to you within 24 hours.",
    fields=(
        FieldSpec("name", required_message="Name is required"),
        FieldSpec(
            "email",
            required_message="Email is required",
            rules=(rules.email("Please enter a valid email"),),
        ),
        FieldSpec("subject", required_message="Subject is required"),
        FieldSpec("message", required_message="Message is required"),
    ),
)

FORMS: dict[str, FormSchema] = {
    schema.name: schema for schema in (APPOINTMENT_FORM, REGISTRATION_FORM, CONTACT_FORM)
}


def get_form_schema(name: str) -> FormSchema | None:
    """Return the schema registered under ``name``."""

    return FORMS.get(name.lower())
