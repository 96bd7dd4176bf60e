"""
Mock Database Service

Test double that records every call instead of narrating a write.
Used to verify orchestration in isolation.

Author: Your Name
Version: 1.0.0
"""

import logging
from typing import Optional

from restaurant_dip.models import Order
from restaurant_dip.services.database.base import DatabaseService

logger = logging.getLogger(__name__)


class MockDatabaseService(DatabaseService):
    """
    Mock implementation of the database service.

    Attributes:
        saved_orders: Every order passed to save(), in call order
        requested_ids: Every id passed to find_by_id(), in call order
        fail_with: Exception raised by save() instead of recording, if set

    Example:
        >>> database = MockDatabaseService()
        >>> database.save(Order(999, "Test Order", 99.99))
        >>> database.last_saved_order.id
        999
    """

    def __init__(self, fail_with: Optional[Exception] = None):
        self.saved_orders: list[Order] = []
        self.requested_ids: list[int] = []
        self.fail_with = fail_with

    @property
    def database_type(self) -> str:
        return "Mock Database"

    @property
    def last_saved_order(self) -> Optional[Order]:
        """The most recently saved order, or None before any save."""
        return self.saved_orders[-1] if self.saved_orders else None

    def save(self, order: Order) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        logger.debug(f"MOCK DATABASE: Save called for order {order.id}")
        self.saved_orders.append(order)

    def find_by_id(self, order_id: int) -> Order:
        self.requested_ids.append(order_id)
        return Order(order_id, "Mock Order", 0.0)
