"""
Notification Service Abstract Base Class

Defines interface for delivering order messages to customers.

Author: Your Name
Version: 1.0.0
"""

from abc import ABC, abstractmethod


class NotificationService(ABC):
    """Abstract base class for notification services."""

    @property
    @abstractmethod
    def notification_type(self) -> str:
        """Return the channel name."""
        pass

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver a message through the channel."""
        pass
