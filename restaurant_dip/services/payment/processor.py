"""
Payment Processor

Runs validation and processing for an order through whichever
PaymentStrategy is currently installed.

Author: Your Name
Version: 1.0.0
"""

import logging

from restaurant_dip.models import Order
from restaurant_dip.services.payment.base import PaymentStrategy

logger = logging.getLogger(__name__)


class PaymentProcessor:
    """
    Context object of the Strategy pattern.

    The strategy is injected at construction and may be replaced at any
    time with set_strategy(); a replacement only affects later calls.

    Example:
        >>> processor = PaymentProcessor(CreditCardStrategy())
        >>> order.set_payment_info("credit_card", "1234567890123456")
        >>> processor.process_order_payment(order)
        True
        >>> processor.set_strategy(CashStrategy())
        >>> processor.get_current_strategy()
        'Cash'
    """

    def __init__(self, strategy: PaymentStrategy):
        self._strategy = strategy
        logger.info(f"PaymentProcessor initialized with: {strategy.payment_type}")

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        """Replace the active payment strategy."""
        self._strategy = strategy
        logger.info(f"Payment strategy changed to: {strategy.payment_type}")

    def get_current_strategy(self) -> str:
        """Return the name of the active payment strategy."""
        return self._strategy.payment_type

    def process_order_payment(self, order: Order) -> bool:
        """
        Validate and charge the payment attached to an order.

        Invalid payment details are an expected outcome, reported as
        False; nothing is charged in that case.

        Returns:
            bool: True if the payment was processed
        """
        strategy = self._strategy
        logger.info(f"Processing payment for order: {order.id}")

        if not strategy.validate_payment(order.payment_info):
            logger.warning(
                f"Payment validation failed for order {order.id} "
                f"({strategy.payment_type})"
            )
            return False

        strategy.process_payment(order.total_amount)
        logger.info(f"Payment successful for order {order.id}")
        return True
