"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

DEFAULT_REGISTRATION_API_URL: Final[str] = "http://localhost:8080/api/auth/signup"

# Loads .env during development (no-op when the file does not exist)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_float(name: str, default: float) -> float:
    """Parse a float from an environment variable.

    Unset, blank or malformed values fall back to ``default``.
    """
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        return default


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    SECRET_KEY: str
        Flask secret used for session signing. Defaults to a development-safe
        placeholder and should be overridden in production.
    REGISTRATION_API_URL: str
        Absolute URL of the remote sign-up endpoint.
    REGISTRATION_TIMEOUT: float
        Seconds before an outbound sign-up request is abandoned.
    LOGIN_URL: str
        Target of the "To Login" link rendered under the form.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    # Remote sign-up endpoint
    REGISTRATION_API_URL = os.getenv("REGISTRATION_API_URL", DEFAULT_REGISTRATION_API_URL)
    REGISTRATION_TIMEOUT = env_float("REGISTRATION_TIMEOUT", 10.0)

    # Navigation
    LOGIN_URL = os.getenv("LOGIN_URL", "/login")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Flask built-ins
    DEBUG = False
    TESTING = False
    PROPAGATE_EXCEPTIONS = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Points the sign-up endpoint at a reserved host so a missing mock never
      reaches a real service.
    - Propagates exceptions so pytest can surface tracebacks directly.
    """

    TESTING = True
    DEBUG = False
    REGISTRATION_API_URL = os.getenv("TEST_REGISTRATION_API_URL", "http://signup.test/api/auth/signup")
    REGISTRATION_TIMEOUT = 1.0
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
