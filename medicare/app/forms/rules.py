"""Reusable field rules for the portal forms.

Every rule is a :class:`Rule` pairing a check with the message shown when the
check fails. Checks receive the raw field value, the full set of form values
(for cross-field rules) and the reference date used for calendar checks.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Mapping

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{0,15}\Z")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")
PASSWORD_CLASSES_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")

Check = Callable[[str, Mapping[str, Any], date], bool]


@dataclass(frozen=True)
class Rule:
    """A single validation check and the message reported when it fails."""

    check: Check
    message: str

    def __call__(self, value: str, values: Mapping[str, Any], today: date) -> str | None:
        if self.check(value, values, today):
            return None
        return self.message


def parse_date(value: str) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` value as produced by date inputs."""

    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def matches(
    pattern: re.Pattern[str],
    message: str,
    *,
    prepare: Callable[[str], str] | None = None,
) -> Rule:
    """Require the (optionally prepared) value to match ``pattern``."""

    def check(value: str, values: Mapping[str, Any], today: date) -> bool:
        candidate = prepare(value) if prepare else value
        return pattern.search(candidate) is not None

    return Rule(check, message)


def strip_phone_separators(value: str) -> str:
    return PHONE_SEPARATORS.sub("", value)


def email(message: str) -> Rule:
    return matches(EMAIL_PATTERN, message)


def phone(message: str) -> Rule:
    return matches(PHONE_PATTERN, message, prepare=strip_phone_separators)


def min_length(length: int, message: str) -> Rule:
    return Rule(lambda value, values, today: len(value) >= length, message)


def password_classes(message: str) -> Rule:
    """Require at least one lowercase letter, one uppercase letter and one digit."""

    return matches(PASSWORD_CLASSES_PATTERN, message)


def one_of(choices: Iterable[str], message: str) -> Rule:
    allowed = frozenset(choices)
    return Rule(lambda value, values, today: value in allowed, message)


def iso_date(message: str) -> Rule:
    return Rule(lambda value, values, today: parse_date(value) is not None, message)


def not_before_today(message: str) -> Rule:
    """Reject dates earlier than ``today``; the same calendar day passes."""

    def check(value: str, values: Mapping[str, Any], today: date) -> bool:
        parsed = parse_date(value)
        return parsed is None or not parsed < today

    return Rule(check, message)


def not_after_today(message: str) -> Rule:
    def check(value: str, values: Mapping[str, Any], today: date) -> bool:
        parsed = parse_date(value)
        return parsed is None or not parsed > today

    return Rule(check, message)


def equals_field(other: str, message: str) -> Rule:
    """Cross-field rule: the value must equal the raw value of ``other``."""

    return Rule(lambda value, values, today: value == values.get(other, ""), message)
