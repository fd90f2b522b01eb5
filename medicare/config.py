"""Configuration objects for the MediCare+ booking portal."""
from __future__ import annotations

import os
from typing import Any, Dict, Type


class Config:
    """Base configuration shared by all environments."""

    CLINIC_NAME: str = os.getenv("CLINIC_NAME", "MediCare+")
    CLINIC_PHONE: str = os.getenv("CLINIC_PHONE", "(123) 456-7890")
    CLINIC_EMAIL: str = os.getenv("CLINIC_EMAIL", "appointments@clinic.com")
    SUBMISSION_DELAY_SECONDS: float = float(os.getenv("SUBMISSION_DELAY_SECONDS", "1.5"))
    NAV_SCROLL_THRESHOLD: int = int(os.getenv("NAV_SCROLL_THRESHOLD", "10"))
    BCRYPT_LOG_ROUNDS: int = int(os.getenv("BCRYPT_LOG_ROUNDS", "13"))
    BCRYPT_HANDLE_LONG_PASSWORDS: bool = True
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Expose configuration values for debugging and introspection."""

        return {key: getattr(cls, key) for key in dir(cls) if key.isupper()}


class DevelopmentConfig(Config):
    """Configuration suitable for local development."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Configuration tailored for production deployments."""

    DEBUG = False


class TestingConfig(Config):
    """Configuration used by the test suite."""

    TESTING = True
    SUBMISSION_DELAY_SECONDS = 0.0
    BCRYPT_LOG_ROUNDS = 4


CONFIG_MAP: Dict[str, Type[Config]] = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(name: str | None) -> Type[Config]:
    """Retrieve the configuration class matching the supplied name."""

    if not name:
        return DevelopmentConfig
    return CONFIG_MAP.get(name.lower(), DevelopmentConfig)
