"""
Payment Strategy Implementations

Credit card, digital wallet and cash. The validation rules are
placeholders, not real card or wallet checks.

Author: Your Name
Version: 1.0.0
"""

import logging

from restaurant_dip.services.payment.base import PaymentStrategy

logger = logging.getLogger(__name__)

CARD_NUMBER_LENGTH = 16


class _LoggingStrategy(PaymentStrategy):
    """Strategy that logs each charge under its own name."""

    name: str = ""

    @property
    def payment_type(self) -> str:
        return self.name

    def process_payment(self, amount: float) -> None:
        logger.info(f"Processing {self.name.lower()} payment: ${amount:.2f}")


class CreditCardStrategy(_LoggingStrategy):
    """Card payment; valid when the card number has exactly 16 characters."""
    name = "Credit Card"

    def validate_payment(self, payment_info: str) -> bool:
        return len(payment_info) == CARD_NUMBER_LENGTH


class DigitalWalletStrategy(_LoggingStrategy):
    """Wallet payment; valid when a wallet id is present."""
    name = "Digital Wallet"

    def validate_payment(self, payment_info: str) -> bool:
        return payment_info != ""


class CashStrategy(_LoggingStrategy):
    """Cash payment; always valid."""
    name = "Cash"

    def validate_payment(self, payment_info: str) -> bool:
        return True
