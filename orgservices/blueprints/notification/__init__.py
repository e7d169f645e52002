"""
Notification blueprint — hand a message to the logging sink.
"""

from flask import Blueprint

bp = Blueprint("notification", __name__)

from orgservices.blueprints.notification import routes  # noqa: E402, F401
