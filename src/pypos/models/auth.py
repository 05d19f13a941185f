"""Login and identity models."""

from __future__ import annotations

from pydantic import Field

from pypos.models._base import PosBaseModel
from pypos.models.tenant import TenantUser


class CustomerSessionInfo(PosBaseModel):
    """Table context bound to a customer's QR login."""

    table_id: int
    table_number: str = ""
    table_session_id: int | None = None
    store_id: int
    store_name: str = ""
    tenant_id: int
    tenant_name: str = ""


class QRLoginResponse(PosBaseModel):
    token: str = Field(repr=False)
    session: CustomerSessionInfo


class LoginResponse(PosBaseModel):
    """Response of the store and tenant login endpoints."""

    token: str = Field(repr=False)
    user: TenantUser


class StaffUser(PosBaseModel):
    """Platform operator account."""

    id: int
    name: str = ""
    email: str = ""
    role: str | None = None


class StaffLoginResponse(PosBaseModel):
    token: str = Field(repr=False)
    user: StaffUser


class LogoutResponse(PosBaseModel):
    message: str = ""
