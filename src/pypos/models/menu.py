"""Menu item models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pypos.models._base import Amount, PosBaseModel, PosRequestModel


class MenuItem(PosBaseModel):
    """A menu item.

    Customer and store endpoints only list available items; the tenant
    endpoint returns every item including unavailable ones.
    """

    id: int
    name: str
    price: Amount
    category: str = ""
    category_order: int | None = None
    description: str | None = None
    available: bool = True
    image_url: str | None = None
    allergens: str | None = None
    spice_level: int | None = Field(default=None, ge=0, le=5)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MenuItemCreateRequest(PosRequestModel):
    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    category: str = ""
    description: str | None = None
    available: bool = True
    image_url: str | None = None
    allergens: str | None = None
    spice_level: int | None = Field(default=None, ge=0, le=5)


class MenuItemUpdateRequest(PosRequestModel):
    name: str | None = None
    price: int | None = Field(default=None, ge=0)
    category: str | None = None
    description: str | None = None
    available: bool | None = None
    image_url: str | None = None
    allergens: str | None = None
    spice_level: int | None = Field(default=None, ge=0, le=5)
