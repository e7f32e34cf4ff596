"""Environment-driven settings for the accounts service.

``APP_ENV`` picks one of the classes below; values inside a class are read
from the process environment (and a ``.env`` file when present) at import.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

ENV_VAR: Final[str] = "APP_ENV"
DEFAULT_ENV: Final[str] = "development"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "y", "on"})

load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Read a flag such as ``SQLALCHEMY_ECHO=yes``.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Returned when the variable is unset.

    Returns
    -------
    bool
        ``True`` for ``1/true/yes/y/on`` in any case, else ``False``.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    """Read an integer; unset or blank values yield ``default``."""
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default


class BaseConfig:
    """Settings shared by every environment.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Mount point of the versioned blueprints (``/api/v1/...``).
    APP_VERSION: str
        Reported by the health endpoint.
    SQLALCHEMY_DATABASE_URI: str
        Taken from ``DATABASE_URL``.
    PASSWORD_HASH_METHOD: str
        Werkzeug hash method (``scrypt``, ``pbkdf2:sha256:600000``...). Each
        stored hash records its own method and cost, so changing this only
        affects accounts registered afterwards.
    PASSWORD_SALT_LENGTH: int
        Random salt characters generated per hash.
    CORS_ORIGINS: str
        Comma-separated origins of the front-end; ``*`` allows any.
    """

    API_BASE_PREFIX = "/api"
    APP_VERSION = os.getenv("APP_VERSION", "dev")
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./projectmanager.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO")

    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")
    PASSWORD_SALT_LENGTH = env_int("PASSWORD_SALT_LENGTH", 16)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    CORS_MAX_AGE = env_int("CORS_MAX_AGE", 600)

    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    DEBUG = env_bool("FLASK_DEBUG", True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """In-memory SQLite and a low-cost PBKDF2 method so hashing stays fast."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ECHO = False
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    SQLALCHEMY_ECHO = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the class named by ``APP_ENV``; unknown names get development."""
    name = os.getenv(ENV_VAR, DEFAULT_ENV).strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
