"""
Application factory for the organization, department, employee and
notification services.

Usage::

    from orgservices import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.

Which services a process exposes is controlled by the
``ENABLED_SERVICES`` setting, so each service can be deployed on its own.
"""

import logging
import os

from flask import Flask
from werkzeug.exceptions import HTTPException

from .config import config_by_name
from .errors import error_body
from .extensions import db, migrate

logger = logging.getLogger(__name__)

# Blueprint name -> URL prefix for every service the factory can mount.
SERVICE_URL_PREFIXES: dict[str, str] = {
    "organization": "/api/organization",
    "department": "/api/department",
    "employee": "/api/employee",
    "notification": "/api/notification",
}


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    if config_name == "production":
        config_class.validate_production_settings(app.config)

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    # -- Initialize extensions ---------------------------------------------
    _register_extensions(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    return app


def _register_extensions(app: Flask) -> None:
    """Bind all Flask extensions to the application instance."""
    db.init_app(app)
    migrate.init_app(app, db)

    # Imported so every model is registered on db.metadata.
    from . import models  # noqa: F401  pylint: disable=import-outside-toplevel


def _register_blueprints(app: Flask) -> None:
    """
    Import and register the health check and each enabled service.

    Blueprints are imported inside this function to avoid circular
    imports — models and services can safely import ``db`` from
    extensions at module level.
    """
    # pylint: disable=import-outside-toplevel
    from .blueprints.department import bp as department_bp
    from .blueprints.employee import bp as employee_bp
    from .blueprints.main import bp as main_bp
    from .blueprints.notification import bp as notification_bp
    from .blueprints.organization import bp as organization_bp

    service_blueprints = {
        "organization": organization_bp,
        "department": department_bp,
        "employee": employee_bp,
        "notification": notification_bp,
    }

    # Health check is always mounted.
    app.register_blueprint(main_bp)

    for name in app.config["ENABLED_SERVICES"]:
        blueprint = service_blueprints.get(name)
        if blueprint is None:
            raise ValueError(
                f"Unknown service '{name}'. "
                f"Valid options: {list(service_blueprints.keys())}"
            )
        app.register_blueprint(blueprint, url_prefix=SERVICE_URL_PREFIXES[name])
        logger.debug("Mounted %s service at %s", name, SERVICE_URL_PREFIXES[name])


def _register_error_handlers(app: Flask) -> None:
    """Render HTTP errors as JSON instead of Werkzeug's HTML pages."""

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        """Handle 400/404/405 and any other HTTP error raised by Flask."""
        kind = error.name.lower().replace(" ", "_")
        return error_body(kind, error.description), error.code

    @app.errorhandler(500)
    def internal_error(error):  # pylint: disable=unused-argument
        """Handle 500 Internal Server Error."""
        db.session.rollback()
        return error_body("internal_server_error", "Internal server error."), 500


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    from .cli import register_commands  # pylint: disable=import-outside-toplevel

    register_commands(app)


def _configure_logging(app: Flask) -> None:
    """
    Set up application logging at the configured ``LOG_LEVEL``.

    SQLAlchemy's engine logger is quieted in debug mode; statement
    echo is controlled separately by ``SQLALCHEMY_ECHO``.
    """
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))

    # Quiet down noisy libraries in development.
    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
