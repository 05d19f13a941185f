"""Client configuration for pypos."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from pypos._constants import (
    BASE_URL,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RETRY_DELAY,
)
from pypos.exceptions import PosConfigError


def _env_float(env: Mapping[str, str], key: str) -> float | None:
    value = env.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise PosConfigError(f"{key} must be a number, got {value!r}") from exc


def _env_int(env: Mapping[str, str], key: str) -> int | None:
    value = env.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise PosConfigError(f"{key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class PosConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Backend origin, without a trailing slash. Resource paths such as
        ``/api/store/orders`` are appended to it.
    request_timeout : float
        Total timeout for a single HTTP attempt, in seconds.
    max_attempts : int
        Upper bound on attempts for retryable failures (5xx responses and
        network errors). ``1`` disables retries. 4xx responses, including
        401, are never retried.
    retry_delay : float
        Base retry delay in seconds. The wait before attempt *n + 1* is
        ``retry_delay * n`` (linear backoff).
    poll_interval : float
        Default interval, in seconds, for pollers created through
        :meth:`pypos.client.PosClient.poll`.
    """

    base_url: str = BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_delay: float = DEFAULT_RETRY_DELAY
    poll_interval: float = DEFAULT_POLL_INTERVAL

    def __post_init__(self) -> None:
        if not self.base_url:
            raise PosConfigError("base_url must be non-empty")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if not self.request_timeout > 0:
            raise PosConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.max_attempts < 1:
            raise PosConfigError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if not self.retry_delay >= 0:
            raise PosConfigError(f"retry_delay must not be negative, got {self.retry_delay}")
        if not self.poll_interval > 0:
            raise PosConfigError(f"poll_interval must be positive, got {self.poll_interval}")

    @classmethod
    def from_env(cls, **overrides: Any) -> PosConfig:
        """Create configuration from ``POS_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("POS_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        _ENV_FLOAT_MAP = {
            "POS_REQUEST_TIMEOUT": "request_timeout",
            "POS_RETRY_DELAY": "retry_delay",
            "POS_POLL_INTERVAL": "poll_interval",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            value = _env_float(env, env_key)
            if value is not None:
                config_kwargs[field_name] = value

        attempts = _env_int(env, "POS_MAX_ATTEMPTS")
        if attempts is not None:
            config_kwargs["max_attempts"] = attempts

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
