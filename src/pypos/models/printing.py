"""Kitchen ticket / receipt printing models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import Field

from pypos.models._base import PosBaseModel, PosEnum, PosRequestModel


class TemplateType(PosEnum):
    UNKNOWN = "unknown"
    KITCHEN_TICKET = "kitchen_ticket"
    RECEIPT = "receipt"
    LABEL = "label"


class TemplateScope(PosEnum):
    UNKNOWN = "unknown"
    STORE = "store"
    TENANT = "tenant"


class PrintTemplateSummary(PosBaseModel):
    id: int
    name: str
    template_type: TemplateType = TemplateType.UNKNOWN
    is_active: bool = False
    settings: dict[str, Any] = Field(default_factory=dict)
    scope: TemplateScope = TemplateScope.UNKNOWN
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PrintTemplate(PrintTemplateSummary):
    """A template including its body; the list endpoint omits ``content``."""

    content: str = ""


class PrintTemplateUpdateRequest(PosRequestModel):
    name: str | None = None
    content: str | None = None
    is_active: bool | None = None
    settings: dict[str, Any] | None = None


class PrintData(PosBaseModel):
    """Rendered ticket for an order."""

    html: str
    order_id: int
    template_id: int


class PrintStatus(PosEnum):
    UNKNOWN = "unknown"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"


class PrintLogRequest(PosRequestModel):
    order_id: int
    print_template_id: int
    status: PrintStatus
    error_message: str | None = None
    printer_name: str | None = None
    printed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
