"""
Application configuration classes.

Each class represents a deployment environment. The factory function
``create_app`` in ``orgservices/__init__.py`` selects the appropriate
config based on the FLASK_ENV environment variable.

The four services (organization, department, employee, notification)
share one code base but can be deployed separately: ``ENABLED_SERVICES``
controls which blueprints a process mounts.
"""

import logging
import os

# Module-level logger for startup warnings emitted by config classes.
_logger = logging.getLogger(__name__)

# Every service blueprint the factory knows how to register.
ALL_SERVICES: tuple[str, ...] = (
    "organization",
    "department",
    "employee",
    "notification",
)


def _parse_services(raw: str | None) -> list[str]:
    """Split a comma-separated service list, defaulting to all services."""
    if not raw:
        return list(ALL_SERVICES)
    return [name.strip().lower() for name in raw.split(",") if name.strip()]


class BaseConfig:
    """
    Shared configuration values inherited by all environments.

    Connection strings are loaded from environment variables so they
    never appear in source control.
    """

    # -- SQLAlchemy --------------------------------------------------------
    # Local SQLite file so a fresh checkout runs without a database server.
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", "sqlite:///orgservices-dev.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_ECHO: bool = False

    # -- Services ----------------------------------------------------------
    ENABLED_SERVICES: list[str] = _parse_services(
        os.environ.get("ENABLED_SERVICES")
    )

    # -- Logging -----------------------------------------------------------
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def validate_production_settings(cls, app_config: dict) -> None:
        """
        Verify that production has everything it needs to start.

        Args:
            app_config: The ``app.config`` dict after loading the
                        config class.

        Raises:
            RuntimeError: If the database URL is missing or an unknown
                          service name is enabled.
        """
        errors: list[str] = []

        if not os.environ.get("DATABASE_URL"):
            errors.append(
                "DATABASE_URL is not set. Production will not fall back "
                "to the local SQLite file."
            )

        unknown = [
            name
            for name in app_config.get("ENABLED_SERVICES", [])
            if name not in ALL_SERVICES
        ]
        if unknown:
            errors.append(
                f"Unknown service(s) in ENABLED_SERVICES: {', '.join(unknown)}. "
                f"Valid options: {', '.join(ALL_SERVICES)}."
            )

        if errors:
            combined = "\n  - ".join(errors)
            raise RuntimeError(f"Production configuration errors:\n  - {combined}")

        if app_config.get("LOG_LEVEL", "").upper() == "DEBUG":
            _logger.warning(
                "LOG_LEVEL=DEBUG is not recommended in production; "
                "SQL statements and request payloads may appear in logs."
            )


class DevelopmentConfig(BaseConfig):
    """Development environment: verbose logging, SQL echo enabled."""

    DEBUG: bool = True
    SQLALCHEMY_ECHO: bool = True
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """
    Testing environment: uses a separate, in-memory database by default.

    Point ``TEST_DATABASE_URL`` at a PostgreSQL instance to run the
    suite against a real server.
    """

    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite://")
    LOG_LEVEL: str = "DEBUG"

    # Tests mount every service regardless of the environment.
    ENABLED_SERVICES: list[str] = list(ALL_SERVICES)


class ProductionConfig(BaseConfig):
    """
    Production environment: strict settings, no debug output.

    The application factory calls ``validate_production_settings()`` at
    startup and refuses to launch if ``DATABASE_URL`` is missing.
    """

    DEBUG: bool = False
    SQLALCHEMY_ECHO: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Lookup dict used by the application factory.
config_by_name: dict[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
