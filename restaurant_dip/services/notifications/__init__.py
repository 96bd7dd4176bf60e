"""
Notification Service Factory

Returns the notification channel named by a configuration key.

Author: Your Name
Version: 1.0.0
"""

import logging
from functools import lru_cache
from typing import Union

from restaurant_dip.core.config import get_settings
from restaurant_dip.core.enums import NotificationKind, valid_values
from restaurant_dip.core.exceptions import InvalidConfigurationError
from restaurant_dip.services.notifications.base import NotificationService
from restaurant_dip.services.notifications.channels import (
    EmailNotification,
    SlackNotification,
    SMSNotification,
)
from restaurant_dip.services.notifications.mock import MockNotificationService

logger = logging.getLogger(__name__)

_CHANNELS: dict[NotificationKind, type[NotificationService]] = {
    NotificationKind.EMAIL: EmailNotification,
    NotificationKind.SMS: SMSNotification,
    NotificationKind.SLACK: SlackNotification,
}


def create_notification_service(
    kind: Union[str, NotificationKind],
) -> NotificationService:
    """
    Create the notification channel named by a configuration key.

    Raises:
        InvalidConfigurationError: If the key is not "email", "sms" or "slack"
    """
    try:
        key = NotificationKind(kind)
    except ValueError:
        raise InvalidConfigurationError(
            "notification", kind, valid_values(NotificationKind)
        ) from None

    notification = _CHANNELS[key]()
    logger.debug(f"Notification Service: Created {notification.notification_type} for '{key.value}'")
    return notification


@lru_cache()
def get_notification_service() -> NotificationService:
    """Get the notification channel selected by NOTIFICATION_TYPE."""
    settings = get_settings()
    logger.info(f"Notification Service: Using '{settings.notification_type}' from settings")
    return create_notification_service(settings.notification_type)


def reset_notification_service() -> None:
    """Clear the cached service instance."""
    get_notification_service.cache_clear()


__all__ = [
    "create_notification_service",
    "get_notification_service",
    "reset_notification_service",
    "NotificationService",
    "EmailNotification",
    "SMSNotification",
    "SlackNotification",
    "MockNotificationService",
]
