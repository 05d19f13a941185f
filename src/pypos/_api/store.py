"""Store POS endpoints: orders, kitchen, payments, tables and printing."""

from __future__ import annotations

import datetime as dt

from pypos._api._common import RoleApi, activity_log_params, build_params, parse_list, parse_one
from pypos.models.activity_log import ActivityLog, ActivityLogDetail, ActivityLogFilters
from pypos.models.auth import LoginResponse
from pypos.models.kitchen import KitchenQueue, KitchenQueueUpdateRequest
from pypos.models.menu import MenuItem
from pypos.models.order import CreateOrderRequest, Order, OrderStatus, OrderUpdateRequest
from pypos.models.payment import Payment, PaymentCreateRequest
from pypos.models.printing import (
    PrintData,
    PrintLogRequest,
    PrintStatus,
    PrintTemplate,
    PrintTemplateSummary,
    PrintTemplateUpdateRequest,
)
from pypos.models.report import DailySalesReport, MonthlySalesReport
from pypos.models.staff_call import StaffCall
from pypos.models.table import Table, TableSession, TableSessionCreateRequest
from pypos.models.tenant import Store
from pypos.session import AppRole, AuthSession

BASE = "/api/store"

_ACTIVITY_LOG_FILTERS = ("action_type", "start_date", "end_date", "page")


class StoreApi(RoleApi):
    ROLE = AppRole.STORE

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def login(self, email: str, password: str) -> LoginResponse:
        payload = await self._post(f"{BASE}/auth/login", {"email": email, "password": password})
        response = parse_one(LoginResponse, payload)
        self._sessions.set(AuthSession(role=self.ROLE, token=response.token, user=dict(response.user.raw)))
        return response

    def logout(self) -> None:
        self.logout_locally()

    async def fetch_stores(self) -> list[Store]:
        """Stores of the signed-in user's tenant, for the store switcher."""
        return parse_list(Store, await self._get("/api/tenant/stores"))

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def fetch_orders(self, status: OrderStatus | str | None = None) -> list[Order]:
        return parse_list(Order, await self._get(f"{BASE}/orders", build_params({"status": status})))

    async def fetch_order(self, order_id: int) -> Order:
        return parse_one(Order, await self._get(f"{BASE}/orders/{order_id}"))

    async def create_order(self, request: CreateOrderRequest) -> Order:
        return parse_one(Order, await self._post(f"{BASE}/orders", {"order": request.payload()}))

    async def update_order(self, order_id: int, changes: OrderUpdateRequest) -> Order:
        return parse_one(Order, await self._patch(f"{BASE}/orders/{order_id}", {"order": changes.payload()}))

    async def deliver_order(self, order_id: int) -> Order:
        """Mark a ready order as served."""
        return parse_one(Order, await self._patch(f"{BASE}/orders/{order_id}/deliver", {}))

    # ------------------------------------------------------------------
    # Kitchen
    # ------------------------------------------------------------------

    async def fetch_kitchen_queues(self) -> list[KitchenQueue]:
        return parse_list(KitchenQueue, await self._get(f"{BASE}/kitchen_queues"))

    async def fetch_kitchen_queue(self, queue_id: int) -> KitchenQueue:
        return parse_one(KitchenQueue, await self._get(f"{BASE}/kitchen_queues/{queue_id}"))

    async def update_kitchen_queue(self, queue_id: int, changes: KitchenQueueUpdateRequest) -> KitchenQueue:
        payload = await self._patch(f"{BASE}/kitchen_queues/{queue_id}", {"kitchen_queue": changes.payload()})
        return parse_one(KitchenQueue, payload)

    async def start_queue(self, queue_id: int) -> KitchenQueue:
        return parse_one(KitchenQueue, await self._patch(f"{BASE}/kitchen_queues/{queue_id}/start"))

    async def complete_queue(self, queue_id: int) -> KitchenQueue:
        return parse_one(KitchenQueue, await self._patch(f"{BASE}/kitchen_queues/{queue_id}/complete"))

    # ------------------------------------------------------------------
    # Staff calls
    # ------------------------------------------------------------------

    async def fetch_staff_calls(self) -> list[StaffCall]:
        """Calls that are still pending or acknowledged."""
        return parse_list(StaffCall, await self._get(f"{BASE}/staff_calls"))

    async def acknowledge_call(self, call_id: int) -> StaffCall:
        return parse_one(StaffCall, await self._patch(f"{BASE}/staff_calls/{call_id}/acknowledge"))

    async def resolve_call(self, call_id: int) -> StaffCall:
        return parse_one(StaffCall, await self._patch(f"{BASE}/staff_calls/{call_id}/resolve"))

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    async def fetch_payments(self) -> list[Payment]:
        return parse_list(Payment, await self._get(f"{BASE}/payments"))

    async def fetch_payment(self, payment_id: int) -> Payment:
        return parse_one(Payment, await self._get(f"{BASE}/payments/{payment_id}"))

    async def create_payment(self, request: PaymentCreateRequest) -> Payment:
        return parse_one(Payment, await self._post(f"{BASE}/payments", {"payment": request.payload()}))

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    async def fetch_tables(self) -> list[Table]:
        return parse_list(Table, await self._get(f"{BASE}/tables"))

    async def fetch_table(self, table_id: int) -> Table:
        return parse_one(Table, await self._get(f"{BASE}/tables/{table_id}"))

    async def create_table_session(self, table_id: int, party_size: int | None = None) -> TableSession:
        """Seat a party at a table."""
        request = TableSessionCreateRequest(table_id=table_id, party_size=party_size)
        return parse_one(TableSession, await self._post(f"{BASE}/table_sessions", request.payload()))

    async def complete_table_session(self, session_id: int) -> TableSession:
        return parse_one(TableSession, await self._patch(f"{BASE}/table_sessions/{session_id}/complete"))

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    async def fetch_menu_items(self) -> list[MenuItem]:
        return parse_list(MenuItem, await self._get(f"{BASE}/menu_items"))

    async def fetch_menu_item(self, item_id: int) -> MenuItem:
        return parse_one(MenuItem, await self._get(f"{BASE}/menu_items/{item_id}"))

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    async def fetch_print_templates(self) -> list[PrintTemplateSummary]:
        return parse_list(PrintTemplateSummary, await self._get(f"{BASE}/print_templates"))

    async def fetch_print_template(self, template_id: int) -> PrintTemplate:
        return parse_one(PrintTemplate, await self._get(f"{BASE}/print_templates/{template_id}"))

    async def update_print_template(self, template_id: int, changes: PrintTemplateUpdateRequest) -> PrintTemplate:
        payload = await self._patch(
            f"{BASE}/print_templates/{template_id}",
            {"print_template": changes.payload()},
        )
        return parse_one(PrintTemplate, payload)

    async def get_print_data(self, order_id: int) -> PrintData:
        """Render the kitchen ticket for an order."""
        return parse_one(PrintData, await self._post(f"{BASE}/orders/{order_id}/print_kitchen_ticket"))

    async def log_print_result(
        self,
        order_id: int,
        template_id: int,
        status: PrintStatus,
        error: str | None = None,
        printer_name: str | None = None,
    ) -> None:
        request = PrintLogRequest(
            order_id=order_id,
            print_template_id=template_id,
            status=status,
            error_message=error,
            printer_name=printer_name,
        )
        await self._post(f"{BASE}/print_logs", {"print_log": request.payload()})

    # ------------------------------------------------------------------
    # Reports and audit
    # ------------------------------------------------------------------

    async def fetch_daily_sales_report(self, date: dt.date, store_id: int | None = None) -> DailySalesReport:
        params = build_params({"date": date, "store_id": store_id})
        return parse_one(DailySalesReport, await self._get(f"{BASE}/reports/daily", params))

    async def fetch_monthly_sales_report(
        self,
        year: int,
        month: int,
        store_id: int | None = None,
    ) -> MonthlySalesReport:
        params = build_params({"year": year, "month": month, "store_id": store_id})
        return parse_one(MonthlySalesReport, await self._get(f"{BASE}/reports/monthly", params))

    async def fetch_activity_logs(self, filters: ActivityLogFilters | None = None) -> list[ActivityLog]:
        params = activity_log_params(filters, _ACTIVITY_LOG_FILTERS)
        return parse_list(ActivityLog, await self._get(f"{BASE}/activity_logs", params))

    async def fetch_activity_log(self, log_id: int) -> ActivityLogDetail:
        return parse_one(ActivityLogDetail, await self._get(f"{BASE}/activity_logs/{log_id}"))
