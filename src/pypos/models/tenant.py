"""Tenant-level models: stores, tags, users, tenants and subscriptions."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import Field, field_validator

from pypos.models._base import PosBaseModel, PosEnum, PosRequestModel

_SUBDOMAIN_RE = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")


class Store(PosBaseModel):
    id: int
    name: str
    address: str | None = None
    phone: str | None = None
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StoreCreateRequest(PosRequestModel):
    name: str = Field(min_length=1)
    address: str | None = None
    phone: str | None = None
    active: bool | None = None


class StoreUpdateRequest(PosRequestModel):
    name: str | None = None
    address: str | None = None
    phone: str | None = None
    active: bool | None = None


class Tag(PosBaseModel):
    id: int
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TagRequest(PosRequestModel):
    name: str = Field(min_length=1)


class UserRole(PosEnum):
    UNKNOWN = "unknown"
    OWNER = "owner"
    MANAGER = "manager"
    STAFF = "staff"


class TenantSummary(PosBaseModel):
    id: int
    name: str
    subdomain: str = ""


class TenantUser(PosBaseModel):
    """A user account belonging to a tenant (owner, manager or staff)."""

    id: int
    name: str
    email: str
    role: UserRole = UserRole.UNKNOWN
    user_type: str | None = None
    tenant: TenantSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreateRequest(PosRequestModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1, repr=False)
    role: UserRole = UserRole.STAFF


class UserUpdateRequest(PosRequestModel):
    name: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, repr=False)
    role: UserRole | None = None


class SubscriptionPlan(PosEnum):
    UNKNOWN = "unknown"
    BASIC = "basic"
    STANDARD = "standard"
    ENTERPRISE = "enterprise"


class Subscription(PosBaseModel):
    """A tenant's plan.

    ``realtime_enabled`` / ``polling_enabled`` decide which update strategy
    the front-ends use for live views.
    """

    id: int
    plan: SubscriptionPlan = SubscriptionPlan.UNKNOWN
    max_stores: int | None = None
    realtime_enabled: bool = False
    polling_enabled: bool = False
    expires_at: datetime | None = None
    tenant: TenantSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class SubscriptionUpdateRequest(PosRequestModel):
    plan: SubscriptionPlan | None = None
    max_stores: int | None = Field(default=None, ge=1)
    realtime_enabled: bool | None = None
    polling_enabled: bool | None = None
    expires_at: datetime | None = None


class Tenant(PosBaseModel):
    id: int
    name: str
    subdomain: str = ""
    subscription: Subscription | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TenantCreateRequest(PosRequestModel):
    name: str = Field(min_length=1)
    subdomain: str

    @field_validator("subdomain")
    @classmethod
    def _valid_subdomain(cls, value: str) -> str:
        if not _SUBDOMAIN_RE.match(value):
            raise ValueError("subdomain may only contain lowercase letters, digits and inner hyphens")
        return value


class TenantUpdateRequest(PosRequestModel):
    name: str | None = None
    subdomain: str | None = None

    @field_validator("subdomain")
    @classmethod
    def _valid_subdomain(cls, value: str | None) -> str | None:
        if value is not None and not _SUBDOMAIN_RE.match(value):
            raise ValueError("subdomain may only contain lowercase letters, digits and inner hyphens")
        return value
