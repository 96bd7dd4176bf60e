"""
Database Service Factory

Maps a configuration key to a concrete DatabaseService. The rest of the
application asks for a DatabaseService and never names a variant class.

Usage:
    from restaurant_dip.services.database import create_database_service

    database = create_database_service("mongodb")
    database.save(order)

Author: Your Name
Version: 1.0.0
"""

import logging
from functools import lru_cache
from typing import Union

from restaurant_dip.core.config import get_settings
from restaurant_dip.core.enums import DatabaseKind, valid_values
from restaurant_dip.core.exceptions import InvalidConfigurationError
from restaurant_dip.services.database.base import DatabaseService
from restaurant_dip.services.database.engines import (
    MongoDatabase,
    MySQLDatabase,
    PostgreSQLDatabase,
)
from restaurant_dip.services.database.mock import MockDatabaseService

logger = logging.getLogger(__name__)

_DATABASES: dict[DatabaseKind, type[DatabaseService]] = {
    DatabaseKind.MYSQL: MySQLDatabase,
    DatabaseKind.POSTGRESQL: PostgreSQLDatabase,
    DatabaseKind.MONGODB: MongoDatabase,
}


def create_database_service(kind: Union[str, DatabaseKind]) -> DatabaseService:
    """
    Create the database service named by a configuration key.

    Args:
        kind: "mysql", "postgresql" or "mongodb" (case-sensitive),
            or the matching DatabaseKind

    Returns:
        DatabaseService: A new instance of the selected variant

    Raises:
        InvalidConfigurationError: If the key names no known database
    """
    try:
        key = DatabaseKind(kind)
    except ValueError:
        raise InvalidConfigurationError(
            "database", kind, valid_values(DatabaseKind)
        ) from None

    database = _DATABASES[key]()
    logger.debug(f"Database Service: Created {database.database_type} for '{key.value}'")
    return database


@lru_cache()
def get_database_service() -> DatabaseService:
    """Get the database service selected by DATABASE_TYPE."""
    settings = get_settings()
    logger.info(f"Database Service: Using '{settings.database_type}' from settings")
    return create_database_service(settings.database_type)


def reset_database_service() -> None:
    """Clear the cached service instance."""
    get_database_service.cache_clear()
    logger.debug("Database service cache cleared")


__all__ = [
    "create_database_service",
    "get_database_service",
    "reset_database_service",
    "DatabaseService",
    "MySQLDatabase",
    "PostgreSQLDatabase",
    "MongoDatabase",
    "MockDatabaseService",
]
