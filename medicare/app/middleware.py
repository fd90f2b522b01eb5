"""Application middleware that writes an audit line for form submissions."""
from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Any

from flask import Flask, g, request

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _AuditConfig:
    action: str
    form_name: str


SIGNIFICANT_ACTIONS: dict[tuple[str, str], _AuditConfig] = {
    ("POST", "/Appointment"): _AuditConfig(action="appointment.requested", form_name="appointment"),
    ("POST", "/Register"): _AuditConfig(action="account.registered", form_name="registration"),
    ("POST", "/contact"): _AuditConfig(action="contact.sent", form_name="contact"),
    ("POST", "/api/forms/appointment/submit"): _AuditConfig(
        action="appointment.requested", form_name="appointment"
    ),
    ("POST", "/api/forms/registration/submit"): _AuditConfig(
        action="account.registered", form_name="registration"
    ),
    ("POST", "/api/forms/contact/submit"): _AuditConfig(
        action="contact.sent", form_name="contact"
    ),
}


def register_audit_middleware(app: Flask) -> None:
    """Attach middleware that logs an audit line for significant actions."""

    @app.before_request
    def _capture_audit_context() -> None:
        method = request.method.upper()
        normalized_path = _normalize_path(request.path)
        config = SIGNIFICANT_ACTIONS.get((method, normalized_path))
        if not config:
            g.audit_context = None
            return

        g.audit_context = {
            "config": config,
            "method": method,
            "path": normalized_path,
            "request_bytes": request.get_data(cache=True) or b"",
        }

    @app.after_request
    def _log_audit_entry(response):
        context: dict[str, Any] | None = getattr(g, "audit_context", None)
        if not context:
            return response

        config: _AuditConfig = context["config"]
        LOGGER.info(
            "audit action=%s form=%s method=%s path=%s status=%s request_hash=%s response_hash=%s",
            config.action,
            config.form_name,
            context["method"],
            context["path"],
            response.status_code,
            _hash_request(context["method"], context["path"], context["request_bytes"]),
            _hash_response(response),
        )
        return response


def _normalize_path(path: str) -> str:
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


def _hash_request(method: str, path: str, body: bytes) -> str:
    payload = f"{method}\n{path}\n".encode("utf-8") + body
    return hashlib.sha256(payload).hexdigest()


def _hash_response(response) -> str:
    body = response.get_data() or b""
    payload = f"{response.status_code}\n".encode("utf-8") + body
    return hashlib.sha256(payload).hexdigest()
