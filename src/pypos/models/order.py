"""Order models shared by the customer and store APIs."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pypos.models._base import Amount, PosBaseModel, PosEnum, PosRequestModel


class OrderStatus(PosEnum):
    """Order progress as seen by the kitchen and the table."""

    UNKNOWN = "unknown"
    PENDING = "pending"
    COOKING = "cooking"
    READY = "ready"
    DELIVERED = "delivered"
    PAID = "paid"


class OrderItem(PosBaseModel):
    """A single line of an order."""

    id: int
    menu_item_id: int
    menu_item_name: str = ""
    quantity: int = 1
    unit_price: Amount | None = None
    subtotal: Amount | None = None
    notes: str | None = None


class Order(PosBaseModel):
    """An order placed at a table.

    ``can_cancel`` is computed by the backend: customers may cancel only
    while the kitchen has not started cooking.
    """

    id: int
    order_number: str = ""
    status: OrderStatus = OrderStatus.UNKNOWN
    table_id: int | None = None
    total_amount: Amount | None = None
    notes: str | None = None
    cancelled: bool = False
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None
    can_cancel: bool = False
    order_items: list[OrderItem] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        """Still expected to change state (not cancelled, not paid)."""
        return not self.cancelled and self.status is not OrderStatus.PAID


class OrderItemRequest(PosRequestModel):
    menu_item_id: int
    quantity: int = Field(default=1, ge=1)
    notes: str | None = None


class CreateOrderRequest(PosRequestModel):
    """Body for placing an order.

    ``table_id`` is required when staff place an order from the store
    POS; customers' orders are bound to the table of their QR session.
    """

    order_items_attributes: list[OrderItemRequest] = Field(min_length=1)
    table_id: int | None = None
    notes: str | None = None


class OrderUpdateRequest(PosRequestModel):
    status: OrderStatus | None = None
    notes: str | None = None
