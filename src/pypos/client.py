"""High-level async client for the POS backend."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, TypeVar

import aiohttp

from pypos._api import CustomerApi, StaffApi, StoreApi, TenantApi
from pypos._transport import HttpTransport, UnauthorizedHook
from pypos.config import PosConfig
from pypos.exceptions import PosError
from pypos.polling import Fetcher, Poller, PollingOptions
from pypos.session import SessionStore

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class PosClient:
    """Async client for the POS backend.

    Usage::

        async with PosClient(PosConfig.from_env()) as client:
            await client.store.login("manager@example.com", "secret")
            async with client.poll(client.store.fetch_staff_calls) as calls:
                ...

    One :class:`SessionStore` is shared by every role API and every poller
    created from this client, so a 401 seen by any of them signs the role
    out everywhere.
    """

    def __init__(
        self,
        config: PosConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        sessions: SessionStore | None = None,
        on_unauthorized: UnauthorizedHook | None = None,
    ) -> None:
        self._config = config or PosConfig()
        self._external_session = session is not None
        self._http_session = session
        self._sessions = sessions if sessions is not None else SessionStore()
        self._on_unauthorized = on_unauthorized
        self._transport: HttpTransport | None = None
        self._customer: CustomerApi | None = None
        self._store: StoreApi | None = None
        self._tenant: TenantApi | None = None
        self._staff: StaffApi | None = None
        self._pollers: list[Poller[Any]] = []

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> PosClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(
            self._config,
            self._sessions,
            self._http_session,
            on_unauthorized=self._on_unauthorized,
        )
        self._customer = CustomerApi(self._transport, self._sessions)
        self._store = StoreApi(self._transport, self._sessions)
        self._tenant = TenantApi(self._transport, self._sessions)
        self._staff = StaffApi(self._transport, self._sessions)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        pollers, self._pollers = self._pollers, []
        for poller in pollers:
            await poller.close()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None
        self._customer = self._store = self._tenant = self._staff = None

    # ------------------------------------------------------------------
    # Role APIs
    # ------------------------------------------------------------------

    @property
    def config(self) -> PosConfig:
        return self._config

    @property
    def sessions(self) -> SessionStore:
        return self._sessions

    @property
    def customer(self) -> CustomerApi:
        return self._require(self._customer)

    @property
    def store(self) -> StoreApi:
        return self._require(self._store)

    @property
    def tenant(self) -> TenantApi:
        return self._require(self._tenant)

    @property
    def staff(self) -> StaffApi:
        return self._require(self._staff)

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    def poll(self, fetcher: Fetcher[T], options: PollingOptions | None = None, **overrides: Any) -> Poller[T]:
        """Create a :class:`Poller` for *fetcher*.

        The interval defaults to ``config.poll_interval``; keyword overrides
        are applied on top of *options*. Failed fetches are logged before
        any ``on_error`` callback runs. The poller is closed when the client
        exits.
        """
        if options is None:
            options = PollingOptions(interval=self._config.poll_interval)
        if overrides:
            options = dataclasses.replace(options, **overrides)

        user_on_error = options.on_error
        name = getattr(fetcher, "__qualname__", repr(fetcher))

        def _on_error(exc: Exception) -> None:
            _logger.warning("Polling %s failed: %s", name, exc)
            if user_on_error is not None:
                user_on_error(exc)

        poller: Poller[T] = Poller(fetcher, dataclasses.replace(options, on_error=_on_error))
        self._pollers = [p for p in self._pollers if not p.is_closed]
        self._pollers.append(poller)
        return poller

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require(api: T | None) -> T:
        if api is None:
            raise PosError("Client not initialized. Use 'async with PosClient(...) as client:'")
        return api
