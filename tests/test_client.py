from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest

from pypos.client import PosClient
from pypos.config import PosConfig
from pypos.exceptions import PosAuthenticationError, PosError
from pypos.polling import PollingOptions
from pypos.session import AppRole


class _FakeResponse:
    def __init__(self, status: int, body: Any = None) -> None:
        self.status = status
        self.reason = ""
        self._raw = b"" if body is None else json.dumps(body).encode()

    async def read(self) -> bytes:
        return self._raw

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


class _FakeHttpSession:
    def __init__(self, *responses: _FakeResponse) -> None:
        self._responses = list(responses)
        self.urls: list[str] = []
        self.closed = False

    def request(self, method: str, url: str, **_kwargs: Any) -> _FakeResponse:
        self.urls.append(url)
        return self._responses.pop(0)

    async def close(self) -> None:
        self.closed = True


def _config(**overrides: Any) -> PosConfig:
    return PosConfig(base_url="http://pos.test", retry_delay=0, **overrides)


def test_role_apis_require_context_manager() -> None:
    client = PosClient(_config())
    with pytest.raises(PosError, match="not initialized"):
        _ = client.store


@pytest.mark.asyncio
async def test_login_then_unauthorized_signs_role_out() -> None:
    http = _FakeHttpSession(
        _FakeResponse(200, {"token": "jwt", "user": {"id": 1, "name": "Aki", "email": "aki@example.com"}}),
        _FakeResponse(401),
    )
    redirects: list[str] = []

    async with PosClient(
        _config(),
        session=http,  # type: ignore[arg-type]
        on_unauthorized=lambda _role, path: redirects.append(path),
    ) as client:
        await client.store.login("aki@example.com", "pw")
        assert client.sessions.token_for(AppRole.STORE) == "jwt"

        with pytest.raises(PosAuthenticationError):
            await client.store.fetch_orders()

        assert not client.store.is_authenticated

    assert redirects == ["/login"]
    assert http.urls == ["http://pos.test/api/store/auth/login", "http://pos.test/api/store/orders"]
    assert not http.closed


@pytest.mark.asyncio
async def test_poll_uses_configured_interval_and_overrides() -> None:
    async def _fetch() -> int:
        return 1

    async with PosClient(_config(poll_interval=12.0), session=_FakeHttpSession()) as client:  # type: ignore[arg-type]
        default = client.poll(_fetch)
        overridden = client.poll(_fetch, PollingOptions(interval=2.0), stop_on_error=True)

        assert default.options.interval == 12.0
        assert overridden.options.interval == 2.0
        assert overridden.options.stop_on_error


@pytest.mark.asyncio
async def test_poll_logs_failures_and_closes_with_client(caplog: pytest.LogCaptureFixture) -> None:
    errors: list[Exception] = []

    async def _fetch() -> int:
        raise RuntimeError("kitchen offline")

    async with PosClient(_config(), session=_FakeHttpSession()) as client:  # type: ignore[arg-type]
        poller = client.poll(_fetch, interval=3600.0, on_error=errors.append)
        with caplog.at_level("WARNING", logger="pypos.client"):
            poller.start()
            async with asyncio.timeout(2.0):
                while not errors:
                    await asyncio.sleep(0.001)

    assert poller.is_closed
    assert str(errors[0]) == "kitchen offline"
    assert "kitchen offline" in caplog.text


@pytest.mark.asyncio
async def test_poll_forgets_pollers_closed_by_the_caller() -> None:
    async def _fetch() -> int:
        return 1

    async with PosClient(_config(), session=_FakeHttpSession()) as client:  # type: ignore[arg-type]
        first = client.poll(_fetch)
        await first.close()
        second = client.poll(_fetch)

        assert client._pollers == [second]
