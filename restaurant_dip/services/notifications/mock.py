"""
Mock Notification Service

Records messages for assertions. Nothing is delivered.

Author: Your Name
Version: 1.0.0
"""

import logging
from typing import Optional

from restaurant_dip.services.notifications.base import NotificationService

logger = logging.getLogger(__name__)


class MockNotificationService(NotificationService):
    """Mock notification service for tests."""

    def __init__(self):
        self.sent_messages: list[str] = []

    @property
    def notification_type(self) -> str:
        return "Mock Notification"

    @property
    def last_message(self) -> Optional[str]:
        return self.sent_messages[-1] if self.sent_messages else None

    def send(self, message: str) -> None:
        logger.debug(f"MOCK NOTIFICATION: {message}")
        self.sent_messages.append(message)
