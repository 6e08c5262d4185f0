"""Welcome API application factory."""
from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import MethodNotAllowed, NotFound

from .config import get_config
from .parsers import register_body_parsers

__version__ = "1.0.0"

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application."""
    _load_environment()

    config_class = get_config(config_name)
    config_obj = config_class()

    app = Flask(__name__)
    app.config.from_object(config_obj)

    _configure_logging(app)
    config_obj.init_app(app)

    register_body_parsers(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    return app


def _load_environment() -> None:
    """Load environment variables from a local .env if present."""
    load_dotenv(ENV_PATH, override=False)


def _register_blueprints(app: Flask) -> None:
    from .routes import core_bp

    app.register_blueprint(core_bp)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(error: MethodNotAllowed):
        # Only GET routes exist; any other method is simply an unknown route.
        return NotFound()


def _configure_logging(app: Flask) -> None:
    log_level = app.config.get("LOG_LEVEL", "INFO")
    app.logger.setLevel(log_level)
    logging.basicConfig(level=log_level)
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
