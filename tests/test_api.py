from __future__ import annotations

import dataclasses
import datetime as dt
from typing import Any

import pytest

from pypos._api import CustomerApi, StaffApi, StoreApi, TenantApi
from pypos._api._common import build_params, parse_list
from pypos.exceptions import PosTransportError
from pypos.models.activity_log import ActivityLogActionType, ActivityLogFilters
from pypos.models.menu import MenuItem
from pypos.models.order import CreateOrderRequest, OrderItemRequest, OrderStatus
from pypos.models.payment import PaymentCreateRequest, PaymentMethod
from pypos.models.printing import PrintStatus
from pypos.models.staff_call import CallType, StaffCallRequest
from pypos.models.tenant import StoreUpdateRequest, SubscriptionPlan, SubscriptionUpdateRequest
from pypos.session import AppRole, AuthSession, SessionStore

_ORDER = {"id": 1, "order_number": "ORD-1", "status": "pending"}


@dataclasses.dataclass
class _Call:
    method: str
    path: str
    role: AppRole
    json_body: Any
    params: Any


class _RecordingTransport:
    def __init__(self, responses: dict[tuple[str, str], Any] | None = None, *, fail: Exception | None = None) -> None:
        self._responses = responses or {}
        self._fail = fail
        self.calls: list[_Call] = []

    async def request(
        self,
        method: str,
        path: str,
        *,
        role: AppRole,
        json_body: Any = None,
        params: Any = None,
    ) -> Any:
        self.calls.append(_Call(method, path, role, json_body, params))
        if self._fail is not None:
            raise self._fail
        return self._responses.get((method, path))


def test_build_params_drops_unset_values() -> None:
    params = build_params(
        {
            "status": OrderStatus.READY,
            "date": dt.date(2026, 3, 1),
            "page": None,
            "store_id": "",
            "flag": True,
        }
    )
    assert params == {"status": "ready", "date": "2026-03-01", "flag": "true"}
    assert build_params({"page": None}) is None


def test_parse_list_tolerates_missing_payload() -> None:
    assert parse_list(MenuItem, None) == []


def test_parse_list_rejects_non_list_payload() -> None:
    with pytest.raises(PosTransportError, match="Expected a list of MenuItem"):
        parse_list(MenuItem, {"error": "unexpected envelope"})


# ----------------------------------------------------------------------
# Customer
# ----------------------------------------------------------------------


@pytest.mark.asyncio
async def test_customer_qr_login_stores_table_session() -> None:
    transport = _RecordingTransport(
        {
            ("POST", "/api/customer/auth/login_via_qr"): {
                "token": "customer-jwt",
                "session": {"table_id": 7, "table_number": "A7", "store_id": 1, "tenant_id": 2},
            }
        }
    )
    sessions = SessionStore()
    api = CustomerApi(transport, sessions)

    response = await api.login_via_qr("QR-ABC")

    assert transport.calls[0].json_body == {"qr_code": "QR-ABC"}
    assert transport.calls[0].role is AppRole.CUSTOMER
    assert response.session.table_id == 7
    stored = sessions.get(AppRole.CUSTOMER)
    assert stored is not None
    assert stored.token == "customer-jwt"
    assert stored.user["table_number"] == "A7"
    assert api.is_authenticated


@pytest.mark.asyncio
async def test_customer_logout_clears_session_even_when_backend_fails() -> None:
    sessions = SessionStore()
    sessions.set(AuthSession(role=AppRole.CUSTOMER, token="t"))
    api = CustomerApi(_RecordingTransport(fail=PosTransportError("offline")), sessions)

    with pytest.raises(PosTransportError):
        await api.logout()

    assert AppRole.CUSTOMER not in sessions


@pytest.mark.asyncio
async def test_customer_order_cancel_and_staff_call() -> None:
    transport = _RecordingTransport(
        {
            ("POST", "/api/customer/orders"): _ORDER,
            ("POST", "/api/customer/orders/1/cancel"): {**_ORDER, "cancelled": True},
            ("POST", "/api/customer/staff_calls"): {"id": 3, "table_id": 7, "status": "pending"},
        }
    )
    api = CustomerApi(transport, SessionStore())

    order = await api.create_order(CreateOrderRequest(order_items_attributes=[OrderItemRequest(menu_item_id=4)]))
    cancelled = await api.cancel_order(order.id, reason="changed mind")
    call = await api.call_staff(StaffCallRequest(call_type=CallType.PAYMENT_REQUEST))
    await api.call_staff()

    assert transport.calls[0].json_body == {"order": {"order_items_attributes": [{"menu_item_id": 4, "quantity": 1}]}}
    assert transport.calls[1].json_body == {"cancellation_reason": "changed mind"}
    assert cancelled.cancelled
    assert transport.calls[2].json_body == {"call_type": "payment_request"}
    assert call.id == 3
    assert transport.calls[3].json_body is None


# ----------------------------------------------------------------------
# Store
# ----------------------------------------------------------------------


@pytest.mark.asyncio
async def test_store_login_and_local_logout() -> None:
    transport = _RecordingTransport(
        {
            ("POST", "/api/store/auth/login"): {
                "token": "store-jwt",
                "user": {"id": 5, "name": "Aki", "email": "aki@example.com", "role": "manager"},
            }
        }
    )
    sessions = SessionStore()
    api = StoreApi(transport, sessions)

    response = await api.login("aki@example.com", "secret")
    assert response.user.name == "Aki"
    assert sessions.token_for(AppRole.STORE) == "store-jwt"

    api.logout()
    assert not api.is_authenticated
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_store_order_and_kitchen_paths() -> None:
    transport = _RecordingTransport(
        {
            ("GET", "/api/store/orders"): [_ORDER],
            ("PATCH", "/api/store/orders/1/deliver"): {**_ORDER, "status": "delivered"},
            ("PATCH", "/api/store/kitchen_queues/9/start"): {"id": 9, "order_id": 1, "status": "in_progress"},
        }
    )
    api = StoreApi(transport, SessionStore())

    orders = await api.fetch_orders(status=OrderStatus.PENDING)
    delivered = await api.deliver_order(1)
    queue = await api.start_queue(9)

    assert [o.id for o in orders] == [1]
    assert transport.calls[0].params == {"status": "pending"}
    assert delivered.status is OrderStatus.DELIVERED
    assert queue.is_started
    assert all(call.role is AppRole.STORE for call in transport.calls)


@pytest.mark.asyncio
async def test_store_payment_and_table_session_bodies() -> None:
    transport = _RecordingTransport(
        {
            ("POST", "/api/store/payments"): {"id": 2, "order_id": 1, "payment_method": "credit_card"},
            ("POST", "/api/store/table_sessions"): {"id": 4, "table_id": 3, "party_size": 2, "status": "active"},
        }
    )
    api = StoreApi(transport, SessionStore())

    payment = await api.create_payment(PaymentCreateRequest(order_id=1, payment_method=PaymentMethod.CREDIT_CARD))
    session = await api.create_table_session(3, party_size=2)

    assert transport.calls[0].json_body == {"payment": {"order_id": 1, "payment_method": "credit_card"}}
    assert payment.payment_method is PaymentMethod.CREDIT_CARD
    assert transport.calls[1].json_body == {"table_id": 3, "party_size": 2}
    assert session.party_size == 2


@pytest.mark.asyncio
async def test_store_print_flow() -> None:
    transport = _RecordingTransport(
        {("POST", "/api/store/orders/1/print_kitchen_ticket"): {"html": "<p>1</p>", "order_id": 1, "template_id": 2}}
    )
    api = StoreApi(transport, SessionStore())

    data = await api.get_print_data(1)
    await api.log_print_result(1, data.template_id, PrintStatus.SUCCESS, printer_name="kitchen")

    body = transport.calls[1].json_body["print_log"]
    assert transport.calls[1].path == "/api/store/print_logs"
    assert body["order_id"] == 1
    assert body["print_template_id"] == 2
    assert body["status"] == "success"
    assert body["printer_name"] == "kitchen"
    assert "error_message" not in body
    assert "printed_at" in body


@pytest.mark.asyncio
async def test_store_reports_and_filtered_activity_logs() -> None:
    transport = _RecordingTransport(
        {("GET", "/api/store/reports/daily"): {"date": "2026-03-01", "total_sales": "12000", "payment_count": 8}}
    )
    api = StoreApi(transport, SessionStore())

    report = await api.fetch_daily_sales_report(dt.date(2026, 3, 1))
    await api.fetch_activity_logs(
        ActivityLogFilters(
            tenant_id=1,
            action_type=ActivityLogActionType.LOGIN,
            start_date=dt.date(2026, 3, 1),
            page=2,
        )
    )
    await api.fetch_activity_logs()

    assert transport.calls[0].params == {"date": "2026-03-01"}
    assert report.payment_count == 8
    assert transport.calls[1].params == {"action_type": "login", "start_date": "2026-03-01", "page": "2"}
    assert transport.calls[2].params is None


@pytest.mark.asyncio
async def test_store_switcher_lists_tenant_stores() -> None:
    transport = _RecordingTransport({("GET", "/api/tenant/stores"): [{"id": 1, "name": "Shibuya"}]})
    stores = await StoreApi(transport, SessionStore()).fetch_stores()

    assert stores[0].name == "Shibuya"
    assert transport.calls[0].role is AppRole.STORE


# ----------------------------------------------------------------------
# Tenant
# ----------------------------------------------------------------------


@pytest.mark.asyncio
async def test_tenant_crud_paths() -> None:
    transport = _RecordingTransport({("PATCH", "/api/tenant/stores/3"): {"id": 3, "name": "Shinjuku", "active": False}})
    api = TenantApi(transport, SessionStore())

    store = await api.update_store(3, StoreUpdateRequest(active=False))
    await api.delete_store(3)
    await api.fetch_menu_items(page=2)
    await api.fetch_menu_items()

    assert transport.calls[0].json_body == {"store": {"active": False}}
    assert not store.active
    assert (transport.calls[1].method, transport.calls[1].path) == ("DELETE", "/api/tenant/stores/3")
    assert transport.calls[2].params == {"page": "2"}
    assert transport.calls[3].params is None


@pytest.mark.asyncio
async def test_tenant_reports() -> None:
    transport = _RecordingTransport(
        {
            ("GET", "/api/tenant/reports/by_menu_item"): [
                {"menu_item_id": 1, "menu_item_name": "Gyoza", "total_quantity": 30, "total_sales": "15000"}
            ],
            ("GET", "/api/tenant/reports/monthly"): {"year": 2026, "month": 3},
            ("GET", "/api/tenant/activity_logs/stats"): {"total_count": 12},
        }
    )
    api = TenantApi(transport, SessionStore())

    items = await api.fetch_menu_item_report(start_date=dt.date(2026, 3, 1))
    await api.fetch_monthly_report(2026, 3)
    await api.fetch_activity_log_stats()

    assert items[0].total_quantity == 30
    assert transport.calls[0].params == {"start_date": "2026-03-01"}
    assert transport.calls[1].params == {"year": "2026", "month": "3"}
    assert transport.calls[2].path == "/api/tenant/activity_logs/stats"


# ----------------------------------------------------------------------
# Staff
# ----------------------------------------------------------------------


@pytest.mark.asyncio
async def test_staff_login_me_and_logout() -> None:
    transport = _RecordingTransport(
        {
            ("POST", "/api/staff/auth/login"): {"token": "staff-jwt", "user": {"id": 1, "name": "Ops"}},
            ("GET", "/api/staff/auth/me"): {"id": 1, "name": "Ops", "role": "admin"},
            ("POST", "/api/staff/auth/logout"): {"message": "Logged out"},
        }
    )
    sessions = SessionStore()
    api = StaffApi(transport, sessions)

    await api.login("ops@example.com", "pw")
    assert sessions.token_for(AppRole.STAFF) == "staff-jwt"
    me = await api.me()
    result = await api.logout()

    assert me.role == "admin"
    assert result.message == "Logged out"
    assert AppRole.STAFF not in sessions


@pytest.mark.asyncio
async def test_staff_subscription_update_and_stats_filters() -> None:
    transport = _RecordingTransport(
        {
            ("PATCH", "/api/staff/subscriptions/4"): {"id": 4, "plan": "enterprise", "realtime_enabled": True},
            ("GET", "/api/staff/activity_logs/stats"): {"total_count": 3},
        }
    )
    api = StaffApi(transport, SessionStore())

    subscription = await api.update_subscription(
        4,
        SubscriptionUpdateRequest(plan=SubscriptionPlan.ENTERPRISE, realtime_enabled=True),
    )
    await api.fetch_activity_log_stats(tenant_id=2)
    await api.fetch_activity_logs(ActivityLogFilters(tenant_id=2, user_type="StaffUser"))

    assert transport.calls[0].json_body == {"subscription": {"plan": "enterprise", "realtime_enabled": True}}
    assert subscription.plan is SubscriptionPlan.ENTERPRISE
    assert transport.calls[1].params == {"tenant_id": "2"}
    assert transport.calls[2].params == {"tenant_id": "2", "user_type": "StaffUser"}
