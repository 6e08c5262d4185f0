"""Application configuration helpers."""
from __future__ import annotations

import os
from typing import Type

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def parse_port(value: str | None) -> int:
    """Return the TCP port described by ``value``, falling back to the default."""
    if value is None or not value.strip():
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {value!r}") from exc
    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")
    return port


class BaseConfig:
    """Base configuration shared across environments.

    The environment is read when the config is instantiated, not at import,
    so a ``.env`` loaded by ``create_app`` is always taken into account.
    """

    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.HOST = os.getenv("HOST") or DEFAULT_HOST
        self.PORT = parse_port(os.getenv("PORT"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def init_app(app) -> None:
        """Hook for app-specific initialization."""
        app.logger.debug("Configured for %s:%s", app.config["HOST"], app.config["PORT"])


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class TestingConfig(BaseConfig):
    TESTING = True


class ProductionConfig(BaseConfig):
    DEBUG = False


CONFIG_MAP: dict[str, Type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(name: str | None = None) -> Type[BaseConfig]:
    """Return the config class associated with the supplied name."""
    if not name:
        name = os.getenv("FLASK_CONFIG", "development")
    return CONFIG_MAP.get(name, DevelopmentConfig)
