"""Data models for POS API requests and responses."""

from pypos.models._base import Amount, PosBaseModel, PosEnum, PosRequestModel
from pypos.models.activity_log import (
    ActivityLog,
    ActivityLogActionType,
    ActivityLogDetail,
    ActivityLogFilters,
    ActivityLogStats,
)
from pypos.models.auth import (
    CustomerSessionInfo,
    LoginResponse,
    LogoutResponse,
    QRLoginResponse,
    StaffLoginResponse,
    StaffUser,
)
from pypos.models.kitchen import KitchenQueue, KitchenQueueStatus, KitchenQueueUpdateRequest
from pypos.models.menu import MenuItem, MenuItemCreateRequest, MenuItemUpdateRequest
from pypos.models.order import (
    CreateOrderRequest,
    Order,
    OrderItem,
    OrderItemRequest,
    OrderStatus,
    OrderUpdateRequest,
)
from pypos.models.payment import Payment, PaymentCreateRequest, PaymentMethod, PaymentStatus
from pypos.models.printing import (
    PrintData,
    PrintLogRequest,
    PrintStatus,
    PrintTemplate,
    PrintTemplateSummary,
    PrintTemplateUpdateRequest,
    TemplateScope,
    TemplateType,
)
from pypos.models.report import (
    DailyReport,
    DailySales,
    DailySalesReport,
    HourlySales,
    MenuItemSales,
    MenuItemSalesTotal,
    MonthlyReport,
    MonthlySalesReport,
    OrderTotals,
    ReportOrder,
)
from pypos.models.staff_call import CallType, StaffCall, StaffCallRequest, StaffCallStatus
from pypos.models.table import (
    Table,
    TableCreateRequest,
    TableSession,
    TableSessionCreateRequest,
    TableSessionStatus,
    TableShape,
    TableStatus,
    TableUpdateRequest,
)
from pypos.models.tenant import (
    Store,
    StoreCreateRequest,
    StoreUpdateRequest,
    Subscription,
    SubscriptionPlan,
    SubscriptionUpdateRequest,
    Tag,
    TagRequest,
    Tenant,
    TenantCreateRequest,
    TenantSummary,
    TenantUpdateRequest,
    TenantUser,
    UserCreateRequest,
    UserRole,
    UserUpdateRequest,
)

__all__ = [
    "ActivityLog",
    "ActivityLogActionType",
    "ActivityLogDetail",
    "ActivityLogFilters",
    "ActivityLogStats",
    "Amount",
    "CallType",
    "CreateOrderRequest",
    "CustomerSessionInfo",
    "DailyReport",
    "DailySales",
    "DailySalesReport",
    "HourlySales",
    "KitchenQueue",
    "KitchenQueueStatus",
    "KitchenQueueUpdateRequest",
    "LoginResponse",
    "LogoutResponse",
    "MenuItem",
    "MenuItemCreateRequest",
    "MenuItemSales",
    "MenuItemSalesTotal",
    "MenuItemUpdateRequest",
    "MonthlyReport",
    "MonthlySalesReport",
    "Order",
    "OrderItem",
    "OrderItemRequest",
    "OrderStatus",
    "OrderTotals",
    "OrderUpdateRequest",
    "Payment",
    "PaymentCreateRequest",
    "PaymentMethod",
    "PaymentStatus",
    "PosBaseModel",
    "PosEnum",
    "PosRequestModel",
    "PrintData",
    "PrintLogRequest",
    "PrintStatus",
    "PrintTemplate",
    "PrintTemplateSummary",
    "PrintTemplateUpdateRequest",
    "QRLoginResponse",
    "ReportOrder",
    "StaffCall",
    "StaffCallRequest",
    "StaffCallStatus",
    "StaffLoginResponse",
    "StaffUser",
    "Store",
    "StoreCreateRequest",
    "StoreUpdateRequest",
    "Subscription",
    "SubscriptionPlan",
    "SubscriptionUpdateRequest",
    "Table",
    "TableCreateRequest",
    "TableSession",
    "TableSessionCreateRequest",
    "TableSessionStatus",
    "TableShape",
    "TableStatus",
    "TableUpdateRequest",
    "Tag",
    "TagRequest",
    "Tenant",
    "TenantCreateRequest",
    "TenantSummary",
    "TenantUpdateRequest",
    "TenantUser",
    "TemplateScope",
    "TemplateType",
    "UserCreateRequest",
    "UserRole",
    "UserUpdateRequest",
]
