"""HTTP transport with bearer auth, status mapping and bounded retry."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

import aiohttp

from pypos._constants import HTTP_NO_CONTENT, HTTP_SERVICE_UNAVAILABLE, HTTP_UNAUTHORIZED, USER_AGENT
from pypos._redact import redact_for_log
from pypos.config import PosConfig
from pypos.exceptions import (
    PosApiError,
    PosAuthenticationError,
    PosServiceUnavailableError,
    PosTransportError,
)
from pypos.session import AppRole, SessionStore

_logger = logging.getLogger(__name__)

UnauthorizedHook = Callable[[AppRole, str], None]


class Transport(Protocol):
    """Structural transport interface used by the resource API modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        role: AppRole,
        json_body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        ...


def _is_retryable(exc: PosTransportError | PosApiError) -> bool:
    if isinstance(exc, PosTransportError):
        return True
    return exc.status >= 500


def _decode_error_body(text: str) -> Any:
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return {}


class HttpTransport:
    """JSON-over-HTTP transport for the POS backend.

    Tokens are looked up in the shared :class:`SessionStore` for the role
    making the call. A 401 clears that role and fires *on_unauthorized*
    with the role's login path before raising.
    """

    def __init__(
        self,
        config: PosConfig,
        sessions: SessionStore,
        http_session: aiohttp.ClientSession,
        *,
        on_unauthorized: UnauthorizedHook | None = None,
    ) -> None:
        self._config = config
        self._sessions = sessions
        self._http = http_session
        self._on_unauthorized = on_unauthorized

    def _build_headers(self, role: AppRole) -> dict[str, str]:
        headers: dict[str, str] = {
            "accept": "application/json",
            "content-type": "application/json",
            "user-agent": USER_AGENT,
        }
        token = self._sessions.token_for(role)
        if token:
            headers["authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        role: AppRole,
        json_body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request, retrying 5xx and network failures.

        Returns the decoded JSON body, or ``None`` for 204 / empty bodies.
        """
        attempts = self._config.max_attempts
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self._send(method, path, role=role, json_body=json_body, params=params)
            except (PosTransportError, PosApiError) as exc:
                if isinstance(exc, PosAuthenticationError) or attempt >= attempts or not _is_retryable(exc):
                    raise
                delay = self._config.retry_delay * attempt
                _logger.debug(
                    "%s %s failed (%s); retry %d/%d in %.1fs",
                    method,
                    path,
                    exc,
                    attempt,
                    attempts - 1,
                    delay,
                )
                if delay > 0:
                    await asyncio.sleep(delay)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        role: AppRole,
        json_body: Any,
        params: Mapping[str, str] | None,
    ) -> Any:
        url = f"{self._config.base_url}{path}"
        headers = self._build_headers(role)
        body = json.dumps(json_body) if json_body is not None else None

        _logger.debug("%s %s params=%s body=%s", method, url, params, redact_for_log(json_body))

        try:
            async with self._http.request(
                method,
                url,
                data=body,
                headers=headers,
                params=params,
                timeout=aiohttp.ClientTimeout(total=self._config.request_timeout),
            ) as resp:
                status = resp.status
                reason = resp.reason or ""
                raw_body = await resp.read()
        except aiohttp.ClientError as exc:
            raise PosTransportError(f"Request to {path} failed: {exc}", endpoint=path) from exc
        except TimeoutError as exc:
            raise PosTransportError(f"Request to {path} timed out", endpoint=path) from exc

        ok = 200 <= status < 300
        try:
            text = raw_body.decode("utf-8", errors="strict" if ok else "replace")
        except UnicodeDecodeError as exc:
            raise PosTransportError(f"Response from {path} is not valid UTF-8", endpoint=path) from exc

        if status == HTTP_UNAUTHORIZED:
            self._handle_unauthorized(role)
            raise PosAuthenticationError(
                f"API Error: {status} Unauthorized",
                status=status,
                status_text="Unauthorized",
                endpoint=path,
            )

        if status == HTTP_SERVICE_UNAVAILABLE:
            # TODO: surface a maintenance hook once the backend exposes a maintenance route.
            raise PosServiceUnavailableError(
                f"API Error: {status} Service Unavailable",
                status=status,
                status_text="Service Unavailable",
                endpoint=path,
            )

        if not ok:
            data = _decode_error_body(text)
            _logger.debug("%s %s -> %d %s", method, path, status, redact_for_log(data))
            raise PosApiError(
                f"API Error: {status} {reason}".rstrip(),
                status=status,
                status_text=reason,
                data=data,
                endpoint=path,
            )

        if status == HTTP_NO_CONTENT or not text.strip():
            return None

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise PosTransportError(
                f"Invalid JSON from {path}: {text[:200]}",
                endpoint=path,
            ) from exc

    def _handle_unauthorized(self, role: AppRole) -> None:
        self._sessions.clear(role)
        if self._on_unauthorized is None:
            return
        try:
            self._on_unauthorized(role, role.login_path)
        except Exception:
            _logger.debug("on_unauthorized callback failed", exc_info=True)
