"""Tenant back-office endpoints.

Tenant owners and managers administer every store of their tenant:
stores, tables, tags, users, menu items, reports and the audit log.
"""

from __future__ import annotations

import datetime as dt

from pypos._api._common import RoleApi, activity_log_params, build_params, parse_list, parse_one
from pypos.models.activity_log import ActivityLog, ActivityLogDetail, ActivityLogFilters, ActivityLogStats
from pypos.models.auth import LoginResponse
from pypos.models.menu import MenuItem, MenuItemCreateRequest, MenuItemUpdateRequest
from pypos.models.report import DailyReport, MenuItemSalesTotal, MonthlyReport
from pypos.models.table import Table, TableCreateRequest, TableUpdateRequest
from pypos.models.tenant import (
    Store,
    StoreCreateRequest,
    StoreUpdateRequest,
    Tag,
    TagRequest,
    TenantUser,
    UserCreateRequest,
    UserUpdateRequest,
)
from pypos.session import AppRole, AuthSession

BASE = "/api/tenant"

_ACTIVITY_LOG_FILTERS = ("store_id", "action_type", "start_date", "end_date", "page")


class TenantApi(RoleApi):
    ROLE = AppRole.TENANT

    async def login(self, email: str, password: str) -> LoginResponse:
        payload = await self._post(f"{BASE}/auth/login", {"email": email, "password": password})
        response = parse_one(LoginResponse, payload)
        self._sessions.set(AuthSession(role=self.ROLE, token=response.token, user=dict(response.user.raw)))
        return response

    def logout(self) -> None:
        self.logout_locally()

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    async def fetch_stores(self) -> list[Store]:
        return parse_list(Store, await self._get(f"{BASE}/stores"))

    async def fetch_store(self, store_id: int) -> Store:
        return parse_one(Store, await self._get(f"{BASE}/stores/{store_id}"))

    async def create_store(self, request: StoreCreateRequest) -> Store:
        return parse_one(Store, await self._post(f"{BASE}/stores", {"store": request.payload()}))

    async def update_store(self, store_id: int, changes: StoreUpdateRequest) -> Store:
        return parse_one(Store, await self._patch(f"{BASE}/stores/{store_id}", {"store": changes.payload()}))

    async def delete_store(self, store_id: int) -> None:
        await self._delete(f"{BASE}/stores/{store_id}")

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    async def fetch_tables(self) -> list[Table]:
        return parse_list(Table, await self._get(f"{BASE}/tables"))

    async def fetch_table(self, table_id: int) -> Table:
        return parse_one(Table, await self._get(f"{BASE}/tables/{table_id}"))

    async def create_table(self, request: TableCreateRequest) -> Table:
        return parse_one(Table, await self._post(f"{BASE}/tables", {"table": request.payload()}))

    async def update_table(self, table_id: int, changes: TableUpdateRequest) -> Table:
        return parse_one(Table, await self._patch(f"{BASE}/tables/{table_id}", {"table": changes.payload()}))

    async def delete_table(self, table_id: int) -> None:
        await self._delete(f"{BASE}/tables/{table_id}")

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    async def fetch_tags(self) -> list[Tag]:
        return parse_list(Tag, await self._get(f"{BASE}/tags"))

    async def fetch_tag(self, tag_id: int) -> Tag:
        return parse_one(Tag, await self._get(f"{BASE}/tags/{tag_id}"))

    async def create_tag(self, request: TagRequest) -> Tag:
        return parse_one(Tag, await self._post(f"{BASE}/tags", {"tag": request.payload()}))

    async def update_tag(self, tag_id: int, changes: TagRequest) -> Tag:
        return parse_one(Tag, await self._patch(f"{BASE}/tags/{tag_id}", {"tag": changes.payload()}))

    async def delete_tag(self, tag_id: int) -> None:
        await self._delete(f"{BASE}/tags/{tag_id}")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def fetch_users(self) -> list[TenantUser]:
        return parse_list(TenantUser, await self._get(f"{BASE}/users"))

    async def fetch_user(self, user_id: int) -> TenantUser:
        return parse_one(TenantUser, await self._get(f"{BASE}/users/{user_id}"))

    async def create_user(self, request: UserCreateRequest) -> TenantUser:
        return parse_one(TenantUser, await self._post(f"{BASE}/users", {"user": request.payload()}))

    async def update_user(self, user_id: int, changes: UserUpdateRequest) -> TenantUser:
        return parse_one(TenantUser, await self._patch(f"{BASE}/users/{user_id}", {"user": changes.payload()}))

    async def delete_user(self, user_id: int) -> None:
        await self._delete(f"{BASE}/users/{user_id}")

    # ------------------------------------------------------------------
    # Menu items
    # ------------------------------------------------------------------

    async def fetch_menu_items(self, page: int | None = None) -> list[MenuItem]:
        return parse_list(MenuItem, await self._get(f"{BASE}/menu_items", build_params({"page": page})))

    async def fetch_menu_item(self, item_id: int) -> MenuItem:
        return parse_one(MenuItem, await self._get(f"{BASE}/menu_items/{item_id}"))

    async def create_menu_item(self, request: MenuItemCreateRequest) -> MenuItem:
        return parse_one(MenuItem, await self._post(f"{BASE}/menu_items", {"menu_item": request.payload()}))

    async def update_menu_item(self, item_id: int, changes: MenuItemUpdateRequest) -> MenuItem:
        payload = await self._patch(f"{BASE}/menu_items/{item_id}", {"menu_item": changes.payload()})
        return parse_one(MenuItem, payload)

    async def delete_menu_item(self, item_id: int) -> None:
        await self._delete(f"{BASE}/menu_items/{item_id}")

    # ------------------------------------------------------------------
    # Reports and audit
    # ------------------------------------------------------------------

    async def fetch_daily_report(self, date: dt.date | None = None) -> DailyReport:
        """Orders across all stores for *date* (the backend defaults to today)."""
        return parse_one(DailyReport, await self._get(f"{BASE}/reports/daily", build_params({"date": date})))

    async def fetch_monthly_report(self, year: int | None = None, month: int | None = None) -> MonthlyReport:
        params = build_params({"year": year, "month": month})
        return parse_one(MonthlyReport, await self._get(f"{BASE}/reports/monthly", params))

    async def fetch_menu_item_report(
        self,
        start_date: dt.date | None = None,
        end_date: dt.date | None = None,
    ) -> list[MenuItemSalesTotal]:
        params = build_params({"start_date": start_date, "end_date": end_date})
        return parse_list(MenuItemSalesTotal, await self._get(f"{BASE}/reports/by_menu_item", params))

    async def fetch_activity_logs(self, filters: ActivityLogFilters | None = None) -> list[ActivityLog]:
        params = activity_log_params(filters, _ACTIVITY_LOG_FILTERS)
        return parse_list(ActivityLog, await self._get(f"{BASE}/activity_logs", params))

    async def fetch_activity_log(self, log_id: int) -> ActivityLogDetail:
        return parse_one(ActivityLogDetail, await self._get(f"{BASE}/activity_logs/{log_id}"))

    async def fetch_activity_log_stats(self, store_id: int | None = None) -> ActivityLogStats:
        params = build_params({"store_id": store_id})
        return parse_one(ActivityLogStats, await self._get(f"{BASE}/activity_logs/stats", params))
