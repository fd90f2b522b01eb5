"""Field schemas describing how a portal form is bound and validated."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Mapping

from medicare.app.forms.rules import Rule

REQUIRED_MESSAGE = "This field is required"


@dataclass(frozen=True)
class FieldSpec:
    """Declarative description of one form field."""

    name: str
    required: bool = True
    required_message: str = REQUIRED_MESSAGE
    rules: tuple[Rule, ...] = ()
    default: str | bool = ""
    choices: tuple[str, ...] = ()

    @property
    def is_boolean(self) -> bool:
        return isinstance(self.default, bool)

    def validate(self, values: Mapping[str, Any], today: date) -> str | None:
        """Return the first failing message for this field, or ``None``."""

        raw = values.get(self.name, self.default)

        if self.is_boolean:
            if self.required and raw is not True:
                return self.required_message
            return None

        text = raw if isinstance(raw, str) else ("" if raw is None else str(raw))
        if not text.strip():
            return self.required_message if self.required else None

        for rule in self.rules:
            message = rule(text, values, today)
            if message:
                return message
        return None


@dataclass(frozen=True)
class FormSchema:
    """A named set of fields plus what happens after a successful submission.

    ``redirect_endpoint`` selects the post-success transition: when it is
    ``None`` the form resets and shows its success view, otherwise the user is
    sent to that endpoint.
    """

    name: str
    fields: tuple[FieldSpec, ...]
    record_factory: Callable[..., Any]
    failure_message: str
    success_message: str = ""
    redirect_endpoint: str | None = None
    _index: dict[str, FieldSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {spec.name: spec for spec in self.fields})

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    def get_field(self, name: str) -> FieldSpec:
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"Form {self.name!r} has no field {name!r}.") from None

    def initial_values(self) -> dict[str, Any]:
        return {spec.name: spec.default for spec in self.fields}

    def validate(self, values: Mapping[str, Any], today: date | None = None) -> dict[str, str]:
        """Validate every field and return a map containing only failing fields."""

        reference = today or date.today()
        errors: dict[str, str] = {}
        for spec in self.fields:
            message = spec.validate(values, reference)
            if message:
                errors[spec.name] = message
        return errors

    def build_record(self, values: Mapping[str, Any]) -> Any:
        """Instantiate the typed record for the supplied values."""

        return self.record_factory(
            **{spec.name: values.get(spec.name, spec.default) for spec in self.fields}
        )

    def describe(self) -> dict[str, Any]:
        """Serializable summary used by the JSON API."""

        return {
            "name": self.name,
            "fields": [
                {
                    "name": spec.name,
                    "required": spec.required,
                    "type": "boolean" if spec.is_boolean else "text",
                    "default": spec.default,
                    "choices": list(spec.choices),
                }
                for spec in self.fields
            ],
        }
