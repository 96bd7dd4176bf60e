"""
Core module initialization.
Exports configuration, logging and error types.
"""

from restaurant_dip.core.config import get_settings, setup_logging, Settings
from restaurant_dip.core.exceptions import InvalidConfigurationError

__all__ = ["get_settings", "setup_logging", "Settings", "InvalidConfigurationError"]
