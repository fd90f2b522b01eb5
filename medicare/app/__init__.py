"""Application factory for the MediCare+ booking portal."""
from __future__ import annotations

import logging
import sys

from flask import Flask

from medicare.config import get_config
from medicare.app.middleware import register_audit_middleware
from medicare.app.services.submission import SubmissionPort, init_submission_port
from medicare.extensions import bcrypt, cors

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_app(
    config_name: str | None = None,
    *,
    submission_port: SubmissionPort | None = None,
) -> Flask:
    """Create and configure the Flask application."""

    app = Flask(__name__)
    config_cls = get_config(config_name or app.config.get("ENV"))
    app.config.from_object(config_cls)

    configure_logging(app)
    register_extensions(app)
    register_blueprints(app)
    init_submission_port(app, submission_port)
    register_audit_middleware(app)

    return app


def configure_logging(app: Flask) -> None:
    """Attach a console handler to the ``medicare`` logger."""

    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger("medicare")
    logger.handlers.clear()
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)


def register_extensions(app: Flask) -> None:
    """Initialize Flask extensions."""

    bcrypt.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": "*"}})


def register_blueprints(app: Flask) -> None:
    """Register application blueprints."""

    from medicare.app.api import api_bp
    from medicare.app.frontend import frontend_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(frontend_bp)
