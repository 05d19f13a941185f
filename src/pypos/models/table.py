"""Table and table-session models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pypos.models._base import PosBaseModel, PosEnum, PosRequestModel


class TableStatus(PosEnum):
    UNKNOWN = "unknown"
    AVAILABLE = "available"
    RESERVED = "reserved"
    OCCUPIED = "occupied"


class TableShape(PosEnum):
    UNKNOWN = "unknown"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class Table(PosBaseModel):
    id: int
    number: str
    capacity: int | None = None
    status: TableStatus = TableStatus.UNKNOWN
    store_id: int | None = None
    qr_code: str | None = Field(default=None, repr=False)
    position_x: float | None = None
    position_y: float | None = None
    shape: TableShape | None = None


class TableSessionStatus(PosEnum):
    UNKNOWN = "unknown"
    ACTIVE = "active"
    COMPLETED = "completed"


class TableSession(PosBaseModel):
    """A party seated at a table, from seating until payment."""

    id: int
    table_id: int
    table_number: str = ""
    party_size: int | None = None
    status: TableSessionStatus = TableSessionStatus.UNKNOWN
    started_at: datetime | None = None
    ended_at: datetime | None = None
    duration_minutes: int | None = None


class TableCreateRequest(PosRequestModel):
    store_id: int
    number: str = Field(min_length=1)
    capacity: int = Field(default=4, ge=1)
    status: TableStatus = TableStatus.AVAILABLE


class TableUpdateRequest(PosRequestModel):
    number: str | None = None
    capacity: int | None = Field(default=None, ge=1)
    status: TableStatus | None = None


class TableSessionCreateRequest(PosRequestModel):
    table_id: int
    party_size: int | None = Field(default=None, ge=1)
