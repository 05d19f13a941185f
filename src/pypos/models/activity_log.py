"""Audit trail models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import Field

from pypos.models._base import PosBaseModel, PosEnum, PosRequestModel


class ActivityLogActionType(PosEnum):
    UNKNOWN = "unknown"
    # authentication
    LOGIN = "login"
    LOGOUT = "logout"
    LOGIN_FAILED = "login_failed"
    # CRUD
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    # business events
    ORDER_PLACED = "order_placed"
    ORDER_COOKING_STARTED = "order_cooking_started"
    ORDER_READY = "order_ready"
    ORDER_DELIVERED = "order_delivered"
    ORDER_CANCELLED = "order_cancelled"
    PAYMENT_COMPLETED = "payment_completed"
    PAYMENT_FAILED = "payment_failed"
    TABLE_SESSION_STARTED = "table_session_started"
    TABLE_SESSION_ENDED = "table_session_ended"
    # browsing
    MENU_VIEWED = "menu_viewed"
    PAGE_ACCESSED = "page_accessed"


class ActivityLog(PosBaseModel):
    id: int
    user_type: str = ""
    user_id: int | None = None
    user_name: str = ""
    tenant_id: int | None = None
    store_id: int | None = None
    action_type: ActivityLogActionType = ActivityLogActionType.UNKNOWN
    resource_type: str | None = None
    resource_id: int | None = None
    resource_name: str | None = None
    ip_address: str | None = None
    created_at: datetime | None = None


class ActivityLogDetail(ActivityLog):
    metadata: dict[str, Any] = Field(default_factory=dict)
    user_agent: str | None = None
    updated_at: datetime | None = None


class ActivityLogStats(PosBaseModel):
    total_count: int = 0
    today_count: int = 0
    this_week_count: int = 0
    this_month_count: int = 0
    by_action_type: dict[str, int] = Field(default_factory=dict)


class ActivityLogFilters(PosRequestModel):
    """Query filters. Which ones the backend honours depends on the role."""

    tenant_id: int | None = None
    store_id: int | None = None
    action_type: ActivityLogActionType | None = None
    user_type: str | None = None
    user_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    page: int | None = Field(default=None, ge=1)
