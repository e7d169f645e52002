"""
Model package — imports all models so Alembic and SQLAlchemy can
discover them automatically when ``flask db`` commands are run.
"""

from orgservices.models.organization import (  # noqa: F401
    Department,
    Employee,
    Organization,
)
