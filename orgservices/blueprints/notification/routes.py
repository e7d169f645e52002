"""
Routes for the notification blueprint.
"""

from flask import request

from orgservices.blueprints.notification import bp
from orgservices.errors import error_body
from orgservices.schemas import Notification, RequestError
from orgservices.services.notification_service import NotificationService


@bp.route("", methods=["POST"])
def send_message():
    """Accept ``{message, sender}``; the only effect is a log entry."""
    try:
        notification = Notification.from_json(request.get_json(silent=True))
    except RequestError as exc:
        return error_body("bad_request", "Invalid notification.", errors=exc.errors), 400

    NotificationService().send_message(notification)
    return "", 202
