"""Routes for the public pages and forms of the portal."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Any

from flask import Blueprint, current_app, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue
from werkzeug.datastructures import MultiDict

from medicare.app import content
from medicare.app.forms.controller import FormController
from medicare.app.forms.definitions import APPOINTMENT_FORM, CONTACT_FORM, REGISTRATION_FORM
from medicare.app.forms.records import ClinicLocation, Urgency
from medicare.app.forms.schema import FormSchema
from medicare.app.navigation import AUTH_LINKS, NAV_LINKS, NavigationShell
from medicare.app.services.submission import get_submission_port

frontend_bp = Blueprint("frontend", __name__)


@frontend_bp.app_context_processor
def inject_navigation() -> dict[str, Any]:
    """Expose the navigation shell to every template."""

    shell = NavigationShell(
        current_app.config.get("NAV_SCROLL_THRESHOLD", 10),
        menu_open=request.args.get("menu") == "open",
    )
    return {
        "navigation": shell,
        "nav_links": NAV_LINKS,
        "auth_links": AUTH_LINKS,
        "clinic_name": current_app.config.get("CLINIC_NAME", "MediCare+"),
        "clinic_phone": current_app.config.get("CLINIC_PHONE"),
        "clinic_email": current_app.config.get("CLINIC_EMAIL"),
        "current_year": date.today().year,
    }


def bind_form_data(controller: FormController, data: MultiDict[str, str]) -> None:
    """Copy posted values into ``controller`` field by field.

    Unchecked checkboxes are absent from the posted data, so boolean fields
    are bound from the presence of their key.
    """

    for spec in controller.schema.fields:
        if spec.is_boolean:
            controller.update_field(spec.name, spec.name in data)
        elif spec.name in data:
            controller.update_field(spec.name, data[spec.name])


def _handle_form(schema: FormSchema, template: str, **context: Any) -> ResponseReturnValue:
    controller = FormController(schema, get_submission_port())

    if request.method == "POST":
        bind_form_data(controller, request.form)
        controller.submit()
        if controller.redirect_endpoint:
            return redirect(url_for(controller.redirect_endpoint))

    return render_template(template, form=controller, **context)


@frontend_bp.get("/")
def landing_page() -> str:
    """Render the marketing landing page."""

    return render_template(
        "index.html",
        features=content.FEATURES,
        highlights=content.HERO_HIGHLIGHTS,
        stats=content.STATS,
        testimonials=content.TESTIMONIALS,
    )


@frontend_bp.route("/Appointment", methods=["GET", "POST"])
def appointment_form() -> ResponseReturnValue:
    """Render and process the appointment request form."""

    today = date.today()
    return _handle_form(
        APPOINTMENT_FORM,
        "appointment.html",
        benefits=content.BOOKING_BENEFITS,
        locations=list(ClinicLocation),
        urgency_levels=list(Urgency),
        min_appointment_date=(today + timedelta(days=1)).isoformat(),
        min_dob_date=_years_before(today, 120).isoformat(),
        max_dob_date=today.isoformat(),
    )


@frontend_bp.route("/Register", methods=["GET", "POST"])
def registration_form() -> ResponseReturnValue:
    """Render and process the account registration form."""

    return _handle_form(
        REGISTRATION_FORM,
        "register.html",
        benefits=content.REGISTRATION_BENEFITS,
        max_dob_date=date.today().isoformat(),
    )


@frontend_bp.route("/contact", methods=["GET", "POST"])
def contact_page() -> ResponseReturnValue:
    """Render the contact information page and its message form."""

    return _handle_form(
        CONTACT_FORM,
        "contact.html",
        channels=content.CONTACT_CHANNELS,
        departments=content.DEPARTMENTS,
    )


@frontend_bp.get("/Login")
def login_page() -> str:
    """Render the sign-in page reached after registering."""

    return render_template("login.html")


def _years_before(reference: date, years: int) -> date:
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        # 29 February in a non-leap target year.
        return reference.replace(year=reference.year - years, day=28)
