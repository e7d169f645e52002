"""
Organization blueprint — read an organization with optional children.

Organizations are read-only over HTTP.
"""

from flask import Blueprint

bp = Blueprint("organization", __name__)

from orgservices.blueprints.organization import routes  # noqa: E402, F401
