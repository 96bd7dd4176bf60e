"""
Order Models

The Order record passed between every service, and the receipt returned
after an order has been processed.

Order is a Pydantic model: id, description and amount are fixed at
construction, and only the payment annotation may be reassigned.

Author: Your Name
Version: 1.0.0
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """
    A single restaurant order.

    Attributes:
        id: Caller-assigned order number (unique by convention only)
        description: Free-text description of the dish
        total_amount: Amount due, never negative
        payment_type: Payment-method tag, empty until set
        payment_info: Opaque payment details, empty until set
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., frozen=True)
    description: str = Field(..., frozen=True)
    total_amount: float = Field(..., ge=0, frozen=True)
    payment_type: str = ""
    payment_info: str = ""

    def __init__(self, id: int, description: str, total_amount: float, **data):
        super().__init__(
            id=id, description=description, total_amount=total_amount, **data
        )

    def set_payment_info(self, payment_type: str, payment_info: str) -> None:
        """Attach the payment method and its details for the next payment attempt."""
        self.payment_type = payment_type
        self.payment_info = payment_info

    def __str__(self) -> str:
        return (
            f"Order{{id={self.id}, description='{self.description}', "
            f"amount=${self.total_amount:.2f}}}"
        )


@dataclass
class OrderReceipt:
    """Outcome of processing one order through a RestaurantService."""
    order_id: int
    database: str
    notification: str
    message: str
