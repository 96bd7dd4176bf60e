"""
Tightly-Coupled Restaurant Service

The design the rest of the package replaces: the service constructs its
own MySQL database and email sender, so neither can be swapped or mocked
without editing the class. Kept for side-by-side comparison in the demo.

Author: Your Name
Version: 1.0.0
"""

import logging

from restaurant_dip.models import Order

logger = logging.getLogger(__name__)


class LegacyMySQLDatabase:
    """MySQL storage with no shared interface."""

    def save(self, order: Order) -> None:
        logger.info(f"MySQL: Saving to MySQL database: {order}")

    def find_by_id(self, order_id: int) -> Order:
        return Order(order_id, f"MySQL Order #{order_id}", 25.99)


class LegacyEmailNotification:
    """Email sender with no shared interface."""

    def send(self, message: str) -> None:
        logger.info(f"Email: Sending email - {message}")


class TightlyCoupledRestaurantService:
    """
    Order service hard-wired to MySQL and email.

    Both collaborators are created inside __init__; callers cannot pass
    different ones.
    """

    def __init__(self):
        self.database = LegacyMySQLDatabase()
        self.notification = LegacyEmailNotification()
        logger.info("TightlyCoupledRestaurantService: Created with tight coupling")

    def process_order(self, order: Order) -> str:
        """Save and notify; returns the message that was sent."""
        self.database.save(order)
        message = f"Order {order.id} processed!"
        self.notification.send(message)
        return message

    def get_order(self, order_id: int) -> Order:
        return self.database.find_by_id(order_id)
