"""Platform staff endpoints: tenants, subscriptions and the global audit log."""

from __future__ import annotations

from pypos._api._common import RoleApi, activity_log_params, build_params, parse_list, parse_one
from pypos.models.activity_log import ActivityLog, ActivityLogDetail, ActivityLogFilters, ActivityLogStats
from pypos.models.auth import LogoutResponse, StaffLoginResponse, StaffUser
from pypos.models.tenant import (
    Subscription,
    SubscriptionUpdateRequest,
    Tenant,
    TenantCreateRequest,
    TenantUpdateRequest,
)
from pypos.session import AppRole, AuthSession

BASE = "/api/staff"

_ACTIVITY_LOG_FILTERS = (
    "tenant_id",
    "store_id",
    "action_type",
    "user_type",
    "user_id",
    "start_date",
    "end_date",
    "page",
)


class StaffApi(RoleApi):
    ROLE = AppRole.STAFF

    async def login(self, email: str, password: str) -> StaffLoginResponse:
        payload = await self._post(f"{BASE}/auth/login", {"email": email, "password": password})
        response = parse_one(StaffLoginResponse, payload)
        self._sessions.set(AuthSession(role=self.ROLE, token=response.token, user=dict(response.user.raw)))
        return response

    async def me(self) -> StaffUser:
        return parse_one(StaffUser, await self._get(f"{BASE}/auth/me"))

    async def logout(self) -> LogoutResponse:
        try:
            payload = await self._post(f"{BASE}/auth/logout")
        finally:
            self.logout_locally()
        return LogoutResponse.model_validate(payload if isinstance(payload, dict) else {})

    # ------------------------------------------------------------------
    # Tenants
    # ------------------------------------------------------------------

    async def fetch_tenants(self, page: int | None = None) -> list[Tenant]:
        return parse_list(Tenant, await self._get(f"{BASE}/tenants", build_params({"page": page})))

    async def fetch_tenant(self, tenant_id: int) -> Tenant:
        return parse_one(Tenant, await self._get(f"{BASE}/tenants/{tenant_id}"))

    async def create_tenant(self, request: TenantCreateRequest) -> Tenant:
        return parse_one(Tenant, await self._post(f"{BASE}/tenants", {"tenant": request.payload()}))

    async def update_tenant(self, tenant_id: int, changes: TenantUpdateRequest) -> Tenant:
        payload = await self._patch(f"{BASE}/tenants/{tenant_id}", {"tenant": changes.payload()})
        return parse_one(Tenant, payload)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    async def fetch_subscriptions(self, page: int | None = None) -> list[Subscription]:
        return parse_list(Subscription, await self._get(f"{BASE}/subscriptions", build_params({"page": page})))

    async def fetch_subscription(self, subscription_id: int) -> Subscription:
        return parse_one(Subscription, await self._get(f"{BASE}/subscriptions/{subscription_id}"))

    async def update_subscription(self, subscription_id: int, changes: SubscriptionUpdateRequest) -> Subscription:
        payload = await self._patch(
            f"{BASE}/subscriptions/{subscription_id}",
            {"subscription": changes.payload()},
        )
        return parse_one(Subscription, payload)

    # ------------------------------------------------------------------
    # Audit
    # ------------------------------------------------------------------

    async def fetch_activity_logs(self, filters: ActivityLogFilters | None = None) -> list[ActivityLog]:
        params = activity_log_params(filters, _ACTIVITY_LOG_FILTERS)
        return parse_list(ActivityLog, await self._get(f"{BASE}/activity_logs", params))

    async def fetch_activity_log(self, log_id: int) -> ActivityLogDetail:
        return parse_one(ActivityLogDetail, await self._get(f"{BASE}/activity_logs/{log_id}"))

    async def fetch_activity_log_stats(
        self,
        tenant_id: int | None = None,
        store_id: int | None = None,
    ) -> ActivityLogStats:
        params = build_params({"tenant_id": tenant_id, "store_id": store_id})
        return parse_one(ActivityLogStats, await self._get(f"{BASE}/activity_logs/stats", params))
