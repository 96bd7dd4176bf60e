"""
Configuration Keys

Closed sets of the variant keys accepted at the configuration boundary.
Matching is case-sensitive: "mysql" is a database kind, "MySQL" is not.

Author: Your Name
Version: 1.0.0
"""

from enum import Enum


class DatabaseKind(str, Enum):
    """Database variants selectable from configuration."""
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    MONGODB = "mongodb"


class NotificationKind(str, Enum):
    """Notification channels selectable from configuration."""
    EMAIL = "email"
    SMS = "sms"
    SLACK = "slack"


class PaymentMethod(str, Enum):
    """Payment-type tags attached to orders."""
    CREDIT_CARD = "credit_card"
    WALLET = "wallet"
    CASH = "cash"


def valid_values(enum_cls: type[Enum]) -> list[str]:
    """Return the accepted string values of a key enum."""
    return [member.value for member in enum_cls]
