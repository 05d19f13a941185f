from __future__ import annotations

import math

import pytest

from pypos.config import PosConfig
from pypos.exceptions import PosConfigError

_ENV_KEYS = ("POS_BASE_URL", "POS_REQUEST_TIMEOUT", "POS_MAX_ATTEMPTS", "POS_RETRY_DELAY", "POS_POLL_INTERVAL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = PosConfig()
    assert config.base_url == "http://localhost:3000"
    assert config.poll_interval == 5.0
    assert config.max_attempts == 3


def test_from_env_reads_variables_and_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POS_BASE_URL", "https://pos.example.com/")
    monkeypatch.setenv("POS_MAX_ATTEMPTS", "5")
    monkeypatch.setenv("POS_POLL_INTERVAL", "30")
    monkeypatch.setenv("POS_RETRY_DELAY", "0.25")

    config = PosConfig.from_env(max_attempts=1)

    assert config.base_url == "https://pos.example.com"
    assert config.max_attempts == 1
    assert config.poll_interval == 30.0
    assert config.retry_delay == 0.25


def test_from_env_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POS_MAX_ATTEMPTS", "three")
    with pytest.raises(PosConfigError, match="POS_MAX_ATTEMPTS"):
        PosConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_url": ""},
        {"request_timeout": 0},
        {"max_attempts": 0},
        {"retry_delay": -1},
        {"poll_interval": 0},
        {"poll_interval": math.nan},
        {"request_timeout": math.nan},
        {"retry_delay": math.nan},
    ],
)
def test_invalid_values_raise(kwargs: dict[str, object]) -> None:
    with pytest.raises(PosConfigError):
        PosConfig(**kwargs)  # type: ignore[arg-type]
