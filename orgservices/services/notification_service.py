"""
Notification service — accept a message and log it.

There is no delivery channel and nothing is persisted; the log lines
are the whole effect.
"""

import logging

from orgservices.schemas import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Logging-only notification sink."""

    def send_message(self, notification: Notification) -> None:
        logger.info("Receiving notification...")
        logger.info("Sending... %s", notification.message)
        logger.info("TO %s", notification.sender)
