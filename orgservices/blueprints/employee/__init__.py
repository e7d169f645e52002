"""
Employee blueprint — create, fetch and list employees.
"""

from flask import Blueprint

bp = Blueprint("employee", __name__)

from orgservices.blueprints.employee import routes  # noqa: E402, F401
