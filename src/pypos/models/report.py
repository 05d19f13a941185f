"""Sales report models.

Store reports are built from payments; tenant reports are built from
orders across all stores, hence the two families of shapes.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import Field

from pypos.models._base import Amount, PosBaseModel

_ZERO = Decimal(0)


class MenuItemSales(PosBaseModel):
    menu_item_id: int
    name: str = ""
    quantity: int = 0
    sales: Amount = _ZERO


class HourlySales(PosBaseModel):
    hour: int = Field(ge=0, le=23)
    sales: Amount = _ZERO
    count: int = 0


class DailySales(PosBaseModel):
    date: dt.date
    sales: Amount = _ZERO
    payment_count: int = 0


class DailySalesReport(PosBaseModel):
    """Store-level daily takings."""

    date: dt.date
    total_sales: Amount = _ZERO
    payment_count: int = 0
    session_count: int = 0
    customer_count: int = 0
    average_bill: Amount = _ZERO
    by_payment_method: dict[str, Amount] = Field(default_factory=dict)
    top_menu_items: list[MenuItemSales] = Field(default_factory=list)
    hourly_breakdown: list[HourlySales] = Field(default_factory=list)


class MonthlySalesReport(PosBaseModel):
    """Store-level monthly takings."""

    year: int
    month: int = Field(ge=1, le=12)
    total_sales: Amount = _ZERO
    total_payments: int = 0
    daily_breakdown: list[DailySales] = Field(default_factory=list)


class ReportOrder(PosBaseModel):
    id: int
    order_number: str = ""
    total_amount: Amount = _ZERO
    created_at: dt.datetime | None = None


class OrderTotals(PosBaseModel):
    total_orders: int = 0
    total_amount: Amount = _ZERO


class DailyReport(PosBaseModel):
    """Tenant-wide orders for one day."""

    date: dt.date
    total_orders: int = 0
    total_amount: Amount = _ZERO
    active_orders: int = 0
    orders: list[ReportOrder] = Field(default_factory=list)

    @property
    def average_order_amount(self) -> Decimal:
        if self.total_orders == 0:
            return _ZERO
        return self.total_amount / self.total_orders


class MonthlyReport(PosBaseModel):
    """Tenant-wide orders for one month, keyed by ISO date."""

    year: int
    month: int = Field(ge=1, le=12)
    total_orders: int = 0
    total_amount: Amount = _ZERO
    daily_breakdown: dict[dt.date, OrderTotals] = Field(default_factory=dict)


class MenuItemSalesTotal(PosBaseModel):
    menu_item_id: int
    menu_item_name: str = ""
    total_quantity: int = 0
    total_sales: Amount = _ZERO
