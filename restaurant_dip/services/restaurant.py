"""
Restaurant Order Orchestration

RestaurantService processes orders through an injected database and
notification channel. RestaurantManager builds that service from two
configuration keys via the service factories.

Neither class imports a concrete database or notification variant.

Author: Your Name
Version: 1.0.0
"""

import logging
from typing import Optional, Union

from restaurant_dip.core.config import Settings, get_settings
from restaurant_dip.core.enums import DatabaseKind, NotificationKind
from restaurant_dip.models import Order, OrderReceipt
from restaurant_dip.services.database import DatabaseService, create_database_service
from restaurant_dip.services.notifications import (
    NotificationService,
    create_notification_service,
)

logger = logging.getLogger(__name__)

NOT_INITIALIZED = "Not initialized"


class RestaurantService:
    """
    Processes orders using only the DatabaseService and NotificationService
    abstractions.

    Both collaborators are injected through the constructor; the service
    never creates its own.

    Example:
        >>> service = RestaurantService(MySQLDatabase(), EmailNotification())
        >>> receipt = service.process_order(Order(2, "Sate Ayam Madura", 28.50))
        >>> receipt.message
        'Order 2 processed successfully!'
    """

    def __init__(self, database: DatabaseService, notification: NotificationService):
        self._database = database
        self._notification = notification
        logger.info(
            f"RestaurantService: Created with "
            f"{database.database_type} + {notification.notification_type}"
        )

    def process_order(self, order: Order) -> OrderReceipt:
        """
        Save an order, then notify about it.

        Not transactional: if save() raises, the exception propagates and
        no notification is sent.
        """
        self._database.save(order)

        message = f"Order {order.id} processed successfully!"
        self._notification.send(message)

        return OrderReceipt(
            order_id=order.id,
            database=self._database.database_type,
            notification=self._notification.notification_type,
            message=message,
        )

    def get_order(self, order_id: int) -> Order:
        return self._database.find_by_id(order_id)

    def get_configuration(self) -> str:
        return (
            f"{self._database.database_type} + "
            f"{self._notification.notification_type}"
        )


class RestaurantManager:
    """
    Owns at most one RestaurantService, built from configuration keys.

    Reinitializing replaces the current service; the previous one is
    simply dropped.
    """

    def __init__(self):
        self._service: Optional[RestaurantService] = None

    @property
    def is_initialized(self) -> bool:
        return self._service is not None

    def initialize(
        self,
        database_type: Union[str, DatabaseKind],
        notification_type: Union[str, NotificationKind],
    ) -> None:
        """
        Build a RestaurantService from two configuration keys.

        Raises:
            InvalidConfigurationError: If either key is unrecognized. The
                previously configured service, if any, is kept.
        """
        database = create_database_service(database_type)
        notification = create_notification_service(notification_type)

        logger.info(
            f"Initializing restaurant with {database.database_type} "
            f"and {notification.notification_type}"
        )
        self._service = RestaurantService(database, notification)

    def initialize_from_settings(self, settings: Optional[Settings] = None) -> None:
        """Initialize from DATABASE_TYPE and NOTIFICATION_TYPE."""
        settings = settings or get_settings()
        self.initialize(settings.database_type, settings.notification_type)

    def process_order(self, order: Order) -> Optional[OrderReceipt]:
        """
        Process an order through the configured service.

        Returns:
            OrderReceipt, or None if the manager has not been initialized
            (nothing is saved or sent in that case)
        """
        if self._service is None:
            logger.warning(f"Restaurant not initialized! Order {order.id} was not processed")
            return None
        return self._service.process_order(order)

    def get_configuration(self) -> str:
        if self._service is None:
            return NOT_INITIALIZED
        return self._service.get_configuration()
