"""Tests for the field rules of the appointment, registration and contact forms."""
from __future__ import annotations

from datetime import date, timedelta
import unittest

from medicare.app.forms.definitions import APPOINTMENT_FORM, CONTACT_FORM, REGISTRATION_FORM

TODAY = date(2024, 5, 1)


def valid_appointment(**overrides: object) -> dict[str, object]:
    values: dict[str, object] = {
        "full_name": "Jane Doe",
        "phone": "(555) 123-4567",
        "email": "jane@example.com",
        "dob": "1990-04-12",
        "address": "1 Main Street, Springfield",
        "location": "north",
        "preferred_date": "2024-05-03",
        "symptoms": "Persistent headache for three days.",
        "urgency": "high",
        "notes": "",
    }
    values.update(overrides)
    return values


def valid_registration(**overrides: object) -> dict[str, object]:
    values: dict[str, object] = {
        "full_name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "dob": "1990-04-12",
        "password": "Abc12345",
        "confirm_password": "Abc12345",
        "accept_terms": True,
    }
    values.update(overrides)
    return values


class AppointmentValidationTests(unittest.TestCase):
    """Rules applied to appointment requests."""

    def test_valid_request_has_no_errors(self) -> None:
        self.assertEqual(APPOINTMENT_FORM.validate(valid_appointment(), TODAY), {})

    def test_each_blank_required_field_is_reported_alone(self) -> None:
        required = [spec.name for spec in APPOINTMENT_FORM.fields if spec.required]
        self.assertEqual(
            required,
            ["full_name", "phone", "email", "dob", "address", "location", "preferred_date", "symptoms"],
        )
        for name in required:
            with self.subTest(field=name):
                errors = APPOINTMENT_FORM.validate(valid_appointment(**{name: "   "}), TODAY)
                self.assertEqual(list(errors), [name])
                self.assertEqual(errors[name], "This field is required")

    def test_optional_fields_may_be_blank(self) -> None:
        errors = APPOINTMENT_FORM.validate(valid_appointment(notes="", urgency=""), TODAY)
        self.assertEqual(errors, {})

    def test_email_requires_dot_after_at(self) -> None:
        errors = APPOINTMENT_FORM.validate(valid_appointment(email="a@b"), TODAY)
        self.assertEqual(errors, {"email": "Please enter a valid email address"})
        self.assertEqual(APPOINTMENT_FORM.validate(valid_appointment(email="a@b.com"), TODAY), {})

    def test_email_rejects_whitespace(self) -> None:
        errors = APPOINTMENT_FORM.validate(valid_appointment(email="jane doe@example.com"), TODAY)
        self.assertIn("email", errors)

    def test_phone_accepts_separators_and_leading_plus(self) -> None:
        for phone in ("+44 20 7946 0958", "(123) 456-7890", "1", "1234567890123456"):
            with self.subTest(phone=phone):
                errors = APPOINTMENT_FORM.validate(valid_appointment(phone=phone), TODAY)
                self.assertNotIn("phone", errors)

    def test_phone_rejects_malformed_numbers(self) -> None:
        for phone in ("0123456", "12345678901234567", "555-CALL-NOW", "++15551234"):
            with self.subTest(phone=phone):
                errors = APPOINTMENT_FORM.validate(valid_appointment(phone=phone), TODAY)
                self.assertEqual(errors.get("phone"), "Please enter a valid phone number")

    def test_preferred_date_today_is_accepted(self) -> None:
        errors = APPOINTMENT_FORM.validate(
            valid_appointment(preferred_date=TODAY.isoformat()), TODAY
        )
        self.assertNotIn("preferred_date", errors)

    def test_preferred_date_in_the_past_is_rejected(self) -> None:
        yesterday = (TODAY - timedelta(days=1)).isoformat()
        errors = APPOINTMENT_FORM.validate(valid_appointment(preferred_date=yesterday), TODAY)
        self.assertEqual(errors, {"preferred_date": "Appointment date cannot be in the past"})

    def test_unparseable_dates_are_rejected(self) -> None:
        errors = APPOINTMENT_FORM.validate(
            valid_appointment(preferred_date="next tuesday", dob="12/04/1990"), TODAY
        )
        self.assertEqual(errors["preferred_date"], "Please enter a valid date")
        self.assertEqual(errors["dob"], "Please enter a valid date")

    def test_location_must_be_a_known_clinic(self) -> None:
        errors = APPOINTMENT_FORM.validate(valid_appointment(location="east"), TODAY)
        self.assertEqual(errors, {"location": "Please select a valid location"})

    def test_urgency_must_be_a_known_level(self) -> None:
        errors = APPOINTMENT_FORM.validate(valid_appointment(urgency="critical"), TODAY)
        self.assertEqual(errors, {"urgency": "Please select a valid urgency level"})

    def test_initial_values_default_to_high_urgency(self) -> None:
        initial = APPOINTMENT_FORM.initial_values()
        self.assertEqual(initial["urgency"], "high")
        self.assertEqual(initial["full_name"], "")


class RegistrationValidationTests(unittest.TestCase):
    """Rules applied to account registrations."""

    def test_valid_registration_has_no_errors(self) -> None:
        self.assertEqual(REGISTRATION_FORM.validate(valid_registration(), TODAY), {})

    def test_blank_form_reports_every_field(self) -> None:
        errors = REGISTRATION_FORM.validate(REGISTRATION_FORM.initial_values(), TODAY)
        self.assertEqual(
            errors,
            {
                "full_name": "Full name is required",
                "email": "Email is required",
                "phone": "Phone number is required",
                "dob": "Date of birth is required",
                "password": "Password is required",
                "confirm_password": "Please confirm your password",
                "accept_terms": "You must accept the terms and conditions",
            },
        )

    def test_password_without_uppercase_fails(self) -> None:
        errors = REGISTRATION_FORM.validate(
            valid_registration(password="abc12345", confirm_password="abc12345"), TODAY
        )
        self.assertEqual(
            errors, {"password": "Password must contain uppercase, lowercase, and number"}
        )

    def test_password_with_every_class_passes(self) -> None:
        errors = REGISTRATION_FORM.validate(
            valid_registration(password="Abc12345", confirm_password="Abc12345"), TODAY
        )
        self.assertEqual(errors, {})

    def test_password_missing_digit_or_lowercase_fails(self) -> None:
        for password in ("Abcdefgh", "ABC12345"):
            with self.subTest(password=password):
                errors = REGISTRATION_FORM.validate(
                    valid_registration(password=password, confirm_password=password), TODAY
                )
                self.assertIn("password", errors)

    def test_short_password_reports_length_first(self) -> None:
        errors = REGISTRATION_FORM.validate(
            valid_registration(password="Ab1", confirm_password="Ab1"), TODAY
        )
        self.assertEqual(errors, {"password": "Password must be at least 8 characters"})

    def test_confirmation_mismatch_is_reported(self) -> None:
        errors = REGISTRATION_FORM.validate(
            valid_registration(confirm_password="Abc12346"), TODAY
        )
        self.assertEqual(errors, {"confirm_password": "Passwords do not match"})

    def test_confirmation_mismatch_reported_even_for_invalid_password(self) -> None:
        errors = REGISTRATION_FORM.validate(
            valid_registration(password="abc", confirm_password="abd"), TODAY
        )
        self.assertEqual(errors["confirm_password"], "Passwords do not match")
        self.assertIn("password", errors)

    def test_date_of_birth_cannot_be_in_the_future(self) -> None:
        tomorrow = (TODAY + timedelta(days=1)).isoformat()
        errors = REGISTRATION_FORM.validate(valid_registration(dob=tomorrow), TODAY)
        self.assertEqual(errors, {"dob": "Date of birth cannot be in the future"})
        self.assertEqual(
            REGISTRATION_FORM.validate(valid_registration(dob=TODAY.isoformat()), TODAY), {}
        )

    def test_terms_must_be_explicitly_accepted(self) -> None:
        for value in (False, "on", None):
            with self.subTest(value=value):
                errors = REGISTRATION_FORM.validate(valid_registration(accept_terms=value), TODAY)
                self.assertEqual(
                    errors, {"accept_terms": "You must accept the terms and conditions"}
                )

    def test_registration_phone_has_no_format_rule(self) -> None:
        errors = REGISTRATION_FORM.validate(valid_registration(phone="ext. 101"), TODAY)
        self.assertEqual(errors, {})


class ContactValidationTests(unittest.TestCase):
    """Rules applied to contact messages."""

    def test_blank_message_reports_every_field(self) -> None:
        errors = CONTACT_FORM.validate(CONTACT_FORM.initial_values(), TODAY)
        self.assertEqual(
            errors,
            {
                "name": "Name is required",
                "email": "Email is required",
                "subject": "Subject is required",
                "message": "Message is required",
            },
        )

    def test_invalid_email_is_reported(self) -> None:
        values = {"name": "Sam", "email": "a@b", "subject": "Hours", "message": "Open Sunday?"}
        self.assertEqual(CONTACT_FORM.validate(values, TODAY), {"email": "Please enter a valid email"})
        values["email"] = "a@b.com"
        self.assertEqual(CONTACT_FORM.validate(values, TODAY), {})

    def test_email_with_trailing_newline_is_rejected(self) -> None:
        values = {
            "name": "Sam",
            "email": "sam@example.com\n",
            "subject": "Hours",
            "message": "Open Sunday?",
        }
        self.assertEqual(CONTACT_FORM.validate(values, TODAY), {"email": "Please enter a valid email"})

    def test_validation_defaults_to_current_date(self) -> None:
        values = {"name": "Sam", "email": "sam@example.com", "subject": "Hi", "message": "Hello"}
        self.assertEqual(CONTACT_FORM.validate(values), {})


if __name__ == "__main__":
    unittest.main()
