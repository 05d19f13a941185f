"""Staff call ("call a waiter") models."""

from __future__ import annotations

from datetime import datetime

from pypos.models._base import PosBaseModel, PosEnum, PosRequestModel


class CallType(PosEnum):
    UNKNOWN = "unknown"
    GENERAL = "general"
    ORDER_REQUEST = "order_request"
    WATER_REQUEST = "water_request"
    PAYMENT_REQUEST = "payment_request"
    ASSISTANCE = "assistance"


class StaffCallStatus(PosEnum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    ACKNOWLEDGED = "acknowledged"
    RESOLVED = "resolved"


class StaffCall(PosBaseModel):
    """A call raised from a table."""

    id: int
    table_id: int
    table_number: str = ""
    call_type: CallType = CallType.GENERAL
    status: StaffCallStatus = StaffCallStatus.UNKNOWN
    notes: str | None = None
    waiting_minutes: int = 0
    created_at: datetime | None = None
    resolved_at: datetime | None = None
    resolved_by_name: str | None = None


class StaffCallRequest(PosRequestModel):
    call_type: CallType | None = None
    notes: str | None = None
