"""JSON endpoints exposing form validation and submission."""
from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import jsonify, request, url_for
from flask.typing import ResponseReturnValue

from medicare.app.forms.controller import FormController
from medicare.app.forms.definitions import get_form_schema
from medicare.app.services.submission import get_submission_port

from . import api_bp


def _bind_json(controller: FormController, payload: Any) -> None:
    if not isinstance(payload, dict):
        return
    for name in controller.schema.field_names:
        if name in payload:
            controller.update_field(name, payload[name])


def _unknown_form(form_name: str) -> ResponseReturnValue:
    return jsonify(message=f"Unknown form {form_name!r}."), HTTPStatus.NOT_FOUND


@api_bp.get("/forms/<form_name>")
def describe_form(form_name: str) -> ResponseReturnValue:
    """Return the field layout of a form."""

    schema = get_form_schema(form_name)
    if schema is None:
        return _unknown_form(form_name)
    return jsonify(schema.describe()), HTTPStatus.OK


@api_bp.post("/forms/<form_name>/validate")
def validate_form(form_name: str) -> ResponseReturnValue:
    """Validate a payload without submitting it."""

    schema = get_form_schema(form_name)
    if schema is None:
        return _unknown_form(form_name)

    payload = request.get_json(silent=True) or {}
    controller = FormController(schema, get_submission_port())
    _bind_json(controller, payload)
    valid = controller.validate()
    return jsonify(valid=valid, errors=controller.errors), HTTPStatus.OK


@api_bp.post("/forms/<form_name>/submit")
def submit_form(form_name: str) -> ResponseReturnValue:
    """Validate a payload and hand it to the submission port."""

    schema = get_form_schema(form_name)
    if schema is None:
        return _unknown_form(form_name)

    payload = request.get_json(silent=True) or {}
    controller = FormController(schema, get_submission_port())
    _bind_json(controller, payload)
    controller.submit()

    if controller.errors:
        return (
            jsonify(message="Please correct the highlighted fields.", errors=controller.errors),
            HTTPStatus.BAD_REQUEST,
        )

    receipt = controller.receipt
    if not controller.succeeded or receipt is None:
        message = controller.submission_error or schema.failure_message
        return jsonify(message=message), HTTPStatus.SERVICE_UNAVAILABLE

    redirect_to = (
        url_for(controller.redirect_endpoint) if controller.redirect_endpoint else None
    )
    return (
        jsonify(
            reference=receipt.reference,
            message=schema.success_message,
            redirect_to=redirect_to,
        ),
        HTTPStatus.ACCEPTED,
    )
