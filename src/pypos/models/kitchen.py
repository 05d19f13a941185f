"""Kitchen queue models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pypos.models._base import PosBaseModel, PosEnum, PosRequestModel
from pypos.models.order import OrderItem


class KitchenQueueStatus(PosEnum):
    """Kitchen ticket progress.

    The backend has reported both ``in_progress`` and ``cooking`` for a
    ticket being prepared; both are mapped.
    """

    UNKNOWN = "unknown"
    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    COOKING = "cooking"
    COMPLETED = "completed"


class KitchenQueue(PosBaseModel):
    id: int
    order_id: int
    order_number: str = ""
    status: KitchenQueueStatus = KitchenQueueStatus.UNKNOWN
    priority: int = 0
    table_number: str | None = None
    order_items: list[OrderItem] = Field(default_factory=list)
    created_at: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def is_started(self) -> bool:
        return self.status in (KitchenQueueStatus.IN_PROGRESS, KitchenQueueStatus.COOKING)


class KitchenQueueUpdateRequest(PosRequestModel):
    status: KitchenQueueStatus | None = None
    priority: int | None = None
