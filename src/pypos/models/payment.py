"""Payment models."""

from __future__ import annotations

from datetime import datetime

from pypos.models._base import Amount, PosBaseModel, PosEnum, PosRequestModel


class PaymentMethod(PosEnum):
    UNKNOWN = "unknown"
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    QR_CODE = "qr_code"


class PaymentStatus(PosEnum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class Payment(PosBaseModel):
    id: int
    order_id: int
    order_number: str = ""
    amount: Amount | None = None
    payment_method: PaymentMethod = PaymentMethod.UNKNOWN
    status: PaymentStatus = PaymentStatus.UNKNOWN
    paid_at: datetime | None = None
    created_at: datetime | None = None


class PaymentCreateRequest(PosRequestModel):
    """Settle an order. The amount is taken from the order server-side."""

    order_id: int
    payment_method: PaymentMethod = PaymentMethod.CASH
