"""Role-scoped resource APIs."""

from pypos._api.customer import CustomerApi
from pypos._api.staff import StaffApi
from pypos._api.store import StoreApi
from pypos._api.tenant import TenantApi

__all__ = ["CustomerApi", "StaffApi", "StoreApi", "TenantApi"]
