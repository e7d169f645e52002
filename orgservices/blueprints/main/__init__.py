"""
Main blueprint — health check shared by every deployed service.
"""

from flask import Blueprint

bp = Blueprint("main", __name__)

# Import routes after blueprint creation to avoid circular imports.
from orgservices.blueprints.main import routes  # noqa: E402, F401
