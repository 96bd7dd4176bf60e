"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
The variant keys chosen here are the only place where concrete database,
notification and payment implementations are named; everything downstream
receives abstractions.

Usage:
    from restaurant_dip.core.config import get_settings

    settings = get_settings()
    manager.initialize(settings.database_type, settings.notification_type)

Environment:
    DATABASE_TYPE=postgresql NOTIFICATION_TYPE=slack restaurant-dip-demo

Author: Your Name
Version: 1.0.0
"""

import logging
import sys
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from restaurant_dip.core.enums import (
    DatabaseKind,
    NotificationKind,
    PaymentMethod,
    valid_values,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        debug: Enable verbose logging

        app_name: Display name used in the demo banner
        restaurant_name: Restaurant display name

        database_type: Database variant key (mysql/postgresql/mongodb)
        notification_type: Notification variant key (email/sms/slack)
        payment_method: Default payment strategy key (credit_card/wallet/cash)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="Restaurant Management System",
        description="Application display name"
    )
    restaurant_name: str = Field(
        default="Warung Nusantara",
        description="Restaurant display name"
    )

    # ==========================================================================
    # SERVICE SELECTION
    # ==========================================================================

    database_type: str = Field(
        default=DatabaseKind.MYSQL.value,
        description="Database variant key"
    )
    notification_type: str = Field(
        default=NotificationKind.EMAIL.value,
        description="Notification variant key"
    )
    payment_method: str = Field(
        default=PaymentMethod.CREDIT_CARD.value,
        description="Default payment strategy key"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("database_type")
    @classmethod
    def validate_database_type(cls, v: str) -> str:
        """Reject database keys with no matching variant."""
        valid = valid_values(DatabaseKind)
        if v not in valid:
            raise ValueError(f"Invalid database_type. Must be one of: {valid}")
        return v

    @field_validator("notification_type")
    @classmethod
    def validate_notification_type(cls, v: str) -> str:
        """Reject notification keys with no matching variant."""
        valid = valid_values(NotificationKind)
        if v not in valid:
            raise ValueError(f"Invalid notification_type. Must be one of: {valid}")
        return v

    @field_validator("payment_method")
    @classmethod
    def validate_payment_method(cls, v: str) -> str:
        """Reject payment keys with no matching strategy."""
        valid = valid_values(PaymentMethod)
        if v not in valid:
            raise ValueError(f"Invalid payment_method. Must be one of: {valid}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded only once; call ``get_settings.cache_clear()``
    after changing the environment.

    Returns:
        Settings: Configured application settings
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    return logging.getLogger("restaurant_dip")
