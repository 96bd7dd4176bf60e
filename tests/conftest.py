import logging

import pytest

from restaurant_dip.core.config import get_settings
from restaurant_dip.services.database import reset_database_service
from restaurant_dip.services.notifications import reset_notification_service

SETTINGS_ENV = ("DATABASE_TYPE", "NOTIFICATION_TYPE", "PAYMENT_METHOD", "DEBUG")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_database_service()
    reset_notification_service()
    yield
    get_settings.cache_clear()
    reset_database_service()
    reset_notification_service()


@pytest.fixture
def narration(caplog):
    """Return the messages logged under restaurant_dip, optionally filtered by logger prefix."""
    caplog.set_level(logging.DEBUG, logger="restaurant_dip")

    def _messages(prefix="restaurant_dip"):
        return [r.getMessage() for r in caplog.records if r.name.startswith(prefix)]

    return _messages
