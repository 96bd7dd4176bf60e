import pytest

from restaurant_dip.core.enums import DatabaseKind
from restaurant_dip.core.exceptions import InvalidConfigurationError
from restaurant_dip.models import Order
from restaurant_dip.services.database import (
    DatabaseService,
    MockDatabaseService,
    MongoDatabase,
    MySQLDatabase,
    PostgreSQLDatabase,
    create_database_service,
    get_database_service,
)


@pytest.mark.parametrize(
    "kind, cls, name",
    [
        ("mysql", MySQLDatabase, "MySQL"),
        ("postgresql", PostgreSQLDatabase, "PostgreSQL"),
        ("mongodb", MongoDatabase, "MongoDB"),
    ],
)
def test_factory_creates_named_variant(kind, cls, name):
    database = create_database_service(kind)

    assert isinstance(database, cls)
    assert isinstance(database, DatabaseService)
    assert database.database_type == name


def test_factory_accepts_enum_keys():
    assert create_database_service(DatabaseKind.MONGODB).database_type == "MongoDB"


def test_factory_returns_new_instance_each_call():
    assert create_database_service("mysql") is not create_database_service("mysql")


@pytest.mark.parametrize("kind", ["oracle", "MySQL", "", " mysql"])
def test_factory_rejects_unknown_kind(kind):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        create_database_service(kind)

    assert exc_info.value.category == "database"
    assert exc_info.value.kind == kind
    assert exc_info.value.valid == ["mysql", "postgresql", "mongodb"]
    assert str(exc_info.value) == f"Unknown database type: {kind}"


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        create_database_service("sqlite")


@pytest.mark.parametrize(
    "cls, description, price",
    [
        (MySQLDatabase, "MySQL Order #7", 25.99),
        (PostgreSQLDatabase, "PostgreSQL Order #7", 29.99),
        (MongoDatabase, "MongoDB Order #7", 27.50),
    ],
)
def test_find_by_id_returns_placeholder(cls, description, price):
    order = cls().find_by_id(7)

    assert order.id == 7
    assert order.description == description
    assert order.total_amount == price


def test_find_by_id_builds_a_fresh_order_every_call():
    database = MySQLDatabase()

    assert database.find_by_id(1) is not database.find_by_id(1)


def test_save_narrates_the_write(narration):
    MongoDatabase().save(Order(4, "Gado-gado Jakarta", 22.00))

    assert narration("restaurant_dip.services.database.engines") == [
        "MongoDB: Saving to MongoDB database: "
        "Order{id=4, description='Gado-gado Jakarta', amount=$22.00}"
    ]


def test_mock_records_calls_without_narrating_a_write(narration):
    database = MockDatabaseService()
    order = Order(999, "Test Order", 99.99)

    assert database.last_saved_order is None
    database.save(order)
    found = database.find_by_id(12)

    assert database.saved_orders == [order]
    assert database.last_saved_order is order
    assert database.requested_ids == [12]
    assert found.description == "Mock Order"
    assert found.total_amount == 0.0
    assert database.database_type == "Mock Database"
    assert narration("restaurant_dip.services.database.engines") == []


def test_mock_can_be_made_to_fail():
    database = MockDatabaseService(fail_with=RuntimeError("disk full"))

    with pytest.raises(RuntimeError, match="disk full"):
        database.save(Order(1, "Nasi Goreng", 15.0))
    assert database.saved_orders == []


def test_settings_select_the_cached_service(monkeypatch):
    monkeypatch.setenv("DATABASE_TYPE", "postgresql")

    database = get_database_service()

    assert database.database_type == "PostgreSQL"
    assert get_database_service() is database
