"""Shared helpers for the role-scoped API modules.

This module centralizes the most repeated patterns:
- building query strings without unset parameters
- wrapping request bodies in the backend's resource envelope
- validating list and single-object responses into models

It is internal to pypos and may change at any time.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel

from pypos._transport import Transport
from pypos.exceptions import PosTransportError
from pypos.models.activity_log import ActivityLogFilters
from pypos.session import AppRole, SessionStore

M = TypeVar("M", bound=BaseModel)


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    return str(value)


def build_params(values: Mapping[str, Any]) -> dict[str, str] | None:
    """Drop unset values and stringify the rest; ``None`` when nothing is left."""
    params = {key: _param_value(value) for key, value in values.items() if value is not None and value != ""}
    return params or None


def activity_log_params(filters: ActivityLogFilters | None, allowed: Iterable[str]) -> dict[str, str] | None:
    """Query parameters for the activity log endpoints.

    Each role's endpoint honours a different subset of the filters.
    """
    if filters is None:
        return None
    values = filters.model_dump(exclude_none=True)
    return build_params({key: values.get(key) for key in allowed})


def parse_list(model: type[M], payload: Any) -> list[M]:
    """Validate a list response; an empty body yields ``[]``."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise PosTransportError(f"Expected a list of {model.__name__}, got {type(payload).__name__}")
    return [model.model_validate(item) for item in payload]


def parse_one(model: type[M], payload: Any) -> M:
    return model.model_validate(payload)


class RoleApi:
    """Base for the per-role API facades.

    Every call is made on behalf of ``ROLE`` so the transport attaches that
    role's token and clears it on a 401.
    """

    ROLE: AppRole

    def __init__(self, transport: Transport, sessions: SessionStore) -> None:
        self._transport = transport
        self._sessions = sessions

    async def _get(self, path: str, params: Mapping[str, str] | None = None) -> Any:
        return await self._transport.request("GET", path, role=self.ROLE, params=params)

    async def _post(self, path: str, body: Any = None) -> Any:
        return await self._transport.request("POST", path, role=self.ROLE, json_body=body)

    async def _patch(self, path: str, body: Any = None) -> Any:
        return await self._transport.request("PATCH", path, role=self.ROLE, json_body=body)

    async def _delete(self, path: str) -> None:
        await self._transport.request("DELETE", path, role=self.ROLE)

    @property
    def is_authenticated(self) -> bool:
        return self.ROLE in self._sessions

    def logout_locally(self) -> None:
        """Forget this role's token without calling the backend."""
        self._sessions.clear(self.ROLE)
