"""Customer (table-side) endpoints.

Customers authenticate by scanning the table's QR code; the resulting
token scopes every call to that table's open session.
"""

from __future__ import annotations

import logging

from pypos._api._common import RoleApi, parse_list, parse_one
from pypos.models.auth import LogoutResponse, QRLoginResponse
from pypos.models.menu import MenuItem
from pypos.models.order import CreateOrderRequest, Order
from pypos.models.staff_call import StaffCall, StaffCallRequest
from pypos.session import AppRole, AuthSession

_logger = logging.getLogger(__name__)

BASE = "/api/customer"


class CustomerApi(RoleApi):
    ROLE = AppRole.CUSTOMER

    async def login_via_qr(self, qr_code: str) -> QRLoginResponse:
        """Open a table session from a scanned QR code and remember its token."""
        payload = await self._post(f"{BASE}/auth/login_via_qr", {"qr_code": qr_code})
        response = parse_one(QRLoginResponse, payload)
        self._sessions.set(
            AuthSession(
                role=self.ROLE,
                token=response.token,
                user=dict(response.session.raw),
            )
        )
        _logger.debug("Customer session opened for table %s", response.session.table_number)
        return response

    async def logout(self) -> LogoutResponse:
        try:
            payload = await self._post(f"{BASE}/auth/logout")
        finally:
            self.logout_locally()
        return LogoutResponse.model_validate(payload if isinstance(payload, dict) else {})

    async def fetch_menu_items(self) -> list[MenuItem]:
        """Available menu items for the table's store."""
        return parse_list(MenuItem, await self._get(f"{BASE}/menu_items"))

    async def fetch_orders(self) -> list[Order]:
        """Unpaid orders of the current table."""
        return parse_list(Order, await self._get(f"{BASE}/orders"))

    async def create_order(self, request: CreateOrderRequest) -> Order:
        return parse_one(Order, await self._post(f"{BASE}/orders", {"order": request.payload()}))

    async def cancel_order(self, order_id: int, reason: str | None = None) -> Order:
        """Cancel an order; the backend refuses once cooking has started."""
        body = {"cancellation_reason": reason} if reason is not None else {}
        return parse_one(Order, await self._post(f"{BASE}/orders/{order_id}/cancel", body))

    async def call_staff(self, request: StaffCallRequest | None = None) -> StaffCall:
        body = request.payload() if request is not None else None
        return parse_one(StaffCall, await self._post(f"{BASE}/staff_calls", body))

    async def fetch_staff_calls(self) -> list[StaffCall]:
        return parse_list(StaffCall, await self._get(f"{BASE}/staff_calls"))
