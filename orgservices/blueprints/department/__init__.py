"""
Department blueprint — create, fetch and list departments.
"""

from flask import Blueprint

bp = Blueprint("department", __name__)

from orgservices.blueprints.department import routes  # noqa: E402, F401
