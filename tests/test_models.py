import pytest
from pydantic import ValidationError

from restaurant_dip.models import Order


def test_order_defaults_to_empty_payment():
    order = Order(2, "Sate Ayam Madura", 28.50)

    assert order.id == 2
    assert order.description == "Sate Ayam Madura"
    assert order.total_amount == 28.50
    assert order.payment_type == ""
    assert order.payment_info == ""


def test_set_payment_info_overwrites_previous_annotation():
    order = Order(6, "Ayam Bakar Taliwang", 45.00)

    order.set_payment_info("credit_card", "1234567890123456")
    order.set_payment_info("wallet", "wallet123")

    assert order.payment_type == "wallet"
    assert order.payment_info == "wallet123"


def test_keyword_construction():
    order = Order(id=5, description="Bakso Malang", total_amount=18.5)

    assert order.id == 5


def test_zero_amount_is_allowed():
    assert Order(1, "Air Putih", 0).total_amount == 0


def test_negative_amount_is_rejected():
    with pytest.raises(ValidationError):
        Order(1, "Refund", -1.0)


def test_str_renders_order_summary():
    order = Order(2, "Sate Ayam Madura", 28.5)

    assert str(order) == "Order{id=2, description='Sate Ayam Madura', amount=$28.50}"


@pytest.mark.parametrize(
    "field, value",
    [("id", 77), ("description", "Rendang Padang"), ("total_amount", -50.0), ("total_amount", 10.0)],
)
def test_order_identity_and_amount_cannot_be_reassigned(field, value):
    order = Order(2, "Sate Ayam Madura", 28.50)

    with pytest.raises(ValidationError):
        setattr(order, field, value)

    assert (order.id, order.description, order.total_amount) == (2, "Sate Ayam Madura", 28.50)


def test_payment_fields_stay_assignable():
    order = Order(6, "Ayam Bakar Taliwang", 45.00)

    order.payment_type = "cash"
    order.payment_info = ""

    assert order.payment_type == "cash"
