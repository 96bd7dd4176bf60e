"""
Database Implementations

Narrating stand-ins for MySQL, PostgreSQL and MongoDB. Saving logs what
would be written; lookups return a placeholder order carrying the
variant's name and fixed price.

Author: Your Name
Version: 1.0.0
"""

import logging

from restaurant_dip.models import Order
from restaurant_dip.services.database.base import DatabaseService

logger = logging.getLogger(__name__)


class _NarratingDatabase(DatabaseService):
    """Shared behavior of the narrating variants."""

    name: str = ""
    placeholder_price: float = 0.0

    @property
    def database_type(self) -> str:
        return self.name

    def save(self, order: Order) -> None:
        logger.info(f"{self.name}: Saving to {self.name} database: {order}")

    def find_by_id(self, order_id: int) -> Order:
        logger.debug(f"{self.name}: Looking up order #{order_id}")
        return Order(
            order_id,
            f"{self.name} Order #{order_id}",
            self.placeholder_price,
        )


class MySQLDatabase(_NarratingDatabase):
    """MySQL-backed order storage."""
    name = "MySQL"
    placeholder_price = 25.99


class PostgreSQLDatabase(_NarratingDatabase):
    """PostgreSQL-backed order storage."""
    name = "PostgreSQL"
    placeholder_price = 29.99


class MongoDatabase(_NarratingDatabase):
    """MongoDB-backed order storage."""
    name = "MongoDB"
    placeholder_price = 27.50
