"""Static copy rendered by the landing, contact and form pages."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Feature:
    icon: str
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class Testimonial:
    name: str
    role: str
    content: str
    rating: int

    @property
    def stars(self) -> list[bool]:
        """Five flags, ``True`` for each filled star."""

        return [index < self.rating for index in range(5)]


@dataclass(frozen=True, slots=True)
class ContactChannel:
    icon: str
    title: str
    details: tuple[str, ...]
    description: str


@dataclass(frozen=True, slots=True)
class Department:
    name: str
    extension: str


FEATURES = (
    Feature("fa-calendar-check", "Easy Booking", "Book appointments in seconds with our intuitive interface"),
    Feature("fa-shield-alt", "Secure & Private", "Your health data is protected with enterprise-grade security"),
    Feature("fa-clock", "24/7 Availability", "Book appointments anytime, anywhere"),
    Feature("fa-user-md", "Expert Doctors", "Access to certified healthcare professionals"),
)

HERO_HIGHLIGHTS = (
    Feature("fa-calendar-check", "Quick Booking", "Book in under 2 minutes"),
    Feature("fa-stethoscope", "Expert Care", "Verified doctors"),
    Feature("fa-shield-alt", "Secure Data", "HIPAA compliant"),
    Feature("fa-clock", "Save Time", "No waiting rooms"),
)

STATS = (
    ("10,000+", "Patients Served"),
    ("200+", "Doctors"),
    ("24/7", "Support"),
    ("98%", "Satisfaction Rate"),
)

TESTIMONIALS = (
    Testimonial(
        "Sarah Johnson",
        "Patient",
        "The easiest appointment system I've ever used! Booked my checkup in minutes.",
        5,
    ),
    Testimonial(
        "Dr. Michael Chen",
        "Cardiologist",
        "Streamlines patient management beautifully. Highly recommended for clinics.",
        5,
    ),
    Testimonial(
        "Robert Davis",
        "Regular Patient",
        "Love the reminders and easy rescheduling. Makes healthcare accessible.",
        4,
    ),
)

BOOKING_BENEFITS = (
    Feature("fa-clock", "24/7 Availability", "Book appointments anytime, day or night"),
    Feature("fa-shield-alt", "Secure & Private", "Your information is protected and confidential"),
    Feature("fa-stethoscope", "Expert Care", "Qualified medical professionals"),
)

REGISTRATION_BENEFITS = (
    "Book appointments 24/7",
    "Access medical records",
    "Secure & HIPAA compliant",
    "Get appointment reminders",
)

CONTACT_CHANNELS = (
    ContactChannel(
        "fa-phone",
        "Phone",
        ("(123) 456-7890", "(123) 456-7891 (Emergency)"),
        "24/7 Support Available",
    ),
    ContactChannel(
        "fa-envelope",
        "Email",
        ("info@medicare.com", "support@medicare.com"),
        "Response within 24 hours",
    ),
    ContactChannel(
        "fa-map-marker-alt",
        "Address",
        ("123 Medical Center Dr", "Healthcare City, HC 12345"),
        "Main Headquarters",
    ),
    ContactChannel(
        "fa-clock",
        "Business Hours",
        ("Mon-Fri: 8:00 AM - 8:00 PM", "Sat: 9:00 AM - 5:00 PM", "Sun: Emergency Only"),
        "Appointments available",
    ),
)

DEPARTMENTS = (
    Department("Appointments & Scheduling", "ext. 101"),
    Department("Medical Records", "ext. 102"),
    Department("Billing & Insurance", "ext. 103"),
    Department("Technical Support", "ext. 104"),
    Department("Patient Services", "ext. 105"),
    Department("Emergency Contact", "ext. 911"),
)
