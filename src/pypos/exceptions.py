"""Custom exception hierarchy for pypos."""

from __future__ import annotations

from typing import Any


class PosError(Exception):
    """Base exception for all pypos errors."""


class PosConfigError(PosError):
    """Invalid or missing configuration."""


class PosTransportError(PosError):
    """Network-level failure (connection error, timeout, invalid JSON)."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class PosApiError(PosError):
    """Backend answered with a non-2xx status.

    ``data`` holds the parsed JSON error body, or ``{}`` when the body
    could not be decoded.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int,
        status_text: str = "",
        data: Any = None,
        endpoint: str = "",
    ) -> None:
        self.status = status
        self.status_text = status_text
        self.data = data if data is not None else {}
        self.endpoint = endpoint
        super().__init__(message)


class PosAuthenticationError(PosApiError):
    """Token rejected (HTTP 401).

    By the time this is raised the stored session for the calling role
    has already been cleared and the unauthorized hook has run.
    """


class PosServiceUnavailableError(PosApiError):
    """Backend is in maintenance or overloaded (HTTP 503)."""
