"""
Notification Channels

Email, SMS and Slack channels. No message leaves the process; each
channel logs what it would deliver.

Author: Your Name
Version: 1.0.0
"""

import logging

from restaurant_dip.services.notifications.base import NotificationService

logger = logging.getLogger(__name__)


class _LoggingChannel(NotificationService):
    """Channel that logs each message under its own name."""

    name: str = ""

    @property
    def notification_type(self) -> str:
        return self.name

    def send(self, message: str) -> None:
        logger.info(f"{self.name}: {message}")


class EmailNotification(_LoggingChannel):
    """Email delivery."""
    name = "Email"


class SMSNotification(_LoggingChannel):
    """SMS delivery."""
    name = "SMS"


class SlackNotification(_LoggingChannel):
    """Slack channel delivery."""
    name = "Slack"
