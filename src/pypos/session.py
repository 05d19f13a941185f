"""Per-role credential state shared by a client's transport and pollers."""

from __future__ import annotations

import logging
import time
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_logger = logging.getLogger(__name__)


class AppRole(StrEnum):
    """Application identity a token belongs to."""

    CUSTOMER = "customer"
    STORE = "store"
    TENANT = "tenant"
    STAFF = "staff"

    @property
    def login_path(self) -> str:
        """Route the front-end sends the user to after a 401."""
        if self is AppRole.CUSTOMER:
            return "/customer/scan"
        return "/login"


class AuthSession(BaseModel):
    """An authenticated session for a single role.

    Parameters
    ----------
    role : AppRole
        Application identity the token was issued for.
    token : str
        Bearer token sent as ``Authorization: Bearer <token>``.
    user : dict
        Profile returned at login (user record, or the table/store
        context for a customer QR login).
    created_at : float
        Monotonic timestamp when the session was stored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    role: AppRole
    token: str
    user: dict[str, Any] = Field(default_factory=dict)
    created_at: float = Field(default_factory=time.monotonic)

    @field_validator("token")
    @classmethod
    def _token_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("token must be non-empty")
        return value

    @property
    def age(self) -> float:
        """Seconds since the session was stored."""
        return time.monotonic() - self.created_at


class SessionStore:
    """In-memory replacement for the browser's token storage.

    One store is shared by everything built from a single client, so a
    401 seen by any poller clears the role for all of them.
    """

    def __init__(self) -> None:
        self._sessions: dict[AppRole, AuthSession] = {}

    def get(self, role: AppRole) -> AuthSession | None:
        return self._sessions.get(role)

    def set(self, session: AuthSession) -> None:
        self._sessions[session.role] = session

    def token_for(self, role: AppRole) -> str | None:
        session = self._sessions.get(role)
        return session.token if session is not None else None

    def clear(self, role: AppRole) -> None:
        if self._sessions.pop(role, None) is not None:
            _logger.info("Cleared %s session", role)

    def clear_all(self) -> None:
        self._sessions.clear()

    def __contains__(self, role: object) -> bool:
        return role in self._sessions
