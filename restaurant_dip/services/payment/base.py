"""
Payment Strategy Abstract Base Class

Defines the interface contract for all payment methods.

Design Pattern: Strategy Pattern
    - PaymentProcessor holds one strategy and can swap it at runtime
    - New payment methods can be added without modifying the processor

Author: Your Name
Version: 1.0.0
"""

from abc import ABC, abstractmethod


class PaymentStrategy(ABC):
    """
    Abstract base class for payment strategies.

    Example:
        >>> strategy = CreditCardStrategy()
        >>> if strategy.validate_payment("1234567890123456"):
        ...     strategy.process_payment(45.00)
    """

    @property
    @abstractmethod
    def payment_type(self) -> str:
        """
        Return the display name of the payment method.

        Returns:
            str: Name such as "Credit Card" or "Cash"
        """
        pass

    @abstractmethod
    def validate_payment(self, payment_info: str) -> bool:
        """
        Check whether the payment details are acceptable.

        Args:
            payment_info: Opaque details stored on the order

        Returns:
            bool: True if the payment may be processed
        """
        pass

    @abstractmethod
    def process_payment(self, amount: float) -> None:
        """
        Charge an amount.

        Args:
            amount: Amount to charge in dollars
        """
        pass
