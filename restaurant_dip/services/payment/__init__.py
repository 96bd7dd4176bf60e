"""
Payment Strategy Factory

Resolves a payment-method tag to a PaymentStrategy and exposes the
PaymentProcessor that runs it.

Usage:
    from restaurant_dip.services.payment import (
        PaymentProcessor,
        create_payment_strategy,
    )

    processor = PaymentProcessor(create_payment_strategy("credit_card"))
    order.set_payment_info("credit_card", "1234567890123456")
    paid = processor.process_order_payment(order)

Author: Your Name
Version: 1.0.0
"""

from typing import Union

from restaurant_dip.core.enums import PaymentMethod, valid_values
from restaurant_dip.core.exceptions import InvalidConfigurationError
from restaurant_dip.services.payment.base import PaymentStrategy
from restaurant_dip.services.payment.processor import PaymentProcessor
from restaurant_dip.services.payment.strategies import (
    CashStrategy,
    CreditCardStrategy,
    DigitalWalletStrategy,
)

_STRATEGIES: dict[PaymentMethod, type[PaymentStrategy]] = {
    PaymentMethod.CREDIT_CARD: CreditCardStrategy,
    PaymentMethod.WALLET: DigitalWalletStrategy,
    PaymentMethod.CASH: CashStrategy,
}


def create_payment_strategy(method: Union[str, PaymentMethod]) -> PaymentStrategy:
    """
    Create the payment strategy for a payment-method tag.

    Raises:
        InvalidConfigurationError: If the tag is not "credit_card",
            "wallet" or "cash"
    """
    try:
        key = PaymentMethod(method)
    except ValueError:
        raise InvalidConfigurationError(
            "payment", method, valid_values(PaymentMethod)
        ) from None

    return _STRATEGIES[key]()


__all__ = [
    "create_payment_strategy",
    "PaymentStrategy",
    "PaymentProcessor",
    "CreditCardStrategy",
    "DigitalWalletStrategy",
    "CashStrategy",
]
