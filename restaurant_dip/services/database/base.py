"""
Database Service Abstract Base Class

Defines the interface contract for order persistence. Every database
variant and the test double implement these methods, so the restaurant
service can be wired to any of them without change.

Author: Your Name
Version: 1.0.0
"""

from abc import ABC, abstractmethod

from restaurant_dip.models import Order


class DatabaseService(ABC):
    """
    Abstract base class for database services.

    Example:
        >>> database = create_database_service("postgresql")
        >>> database.save(Order(3, "Rendang Padang", 42.00))
        >>> database.database_type
        'PostgreSQL'
    """

    @property
    @abstractmethod
    def database_type(self) -> str:
        """
        Return the display name of the database.

        Returns:
            str: Name such as "MySQL" or "MongoDB"
        """
        pass

    @abstractmethod
    def save(self, order: Order) -> None:
        """
        Persist an order.

        Args:
            order: The order to store
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: int) -> Order:
        """
        Look up an order by its id.

        Note:
            No variant keeps real storage; each one returns a placeholder
            order built from the requested id.
        """
        pass
