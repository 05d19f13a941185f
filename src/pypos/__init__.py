"""pypos - Async Python client for the restaurant POS backend."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypos")
except PackageNotFoundError:
    __version__ = "0+local"
from pypos.client import PosClient
from pypos.config import PosConfig
from pypos.exceptions import (
    PosApiError,
    PosAuthenticationError,
    PosConfigError,
    PosError,
    PosServiceUnavailableError,
    PosTransportError,
)
from pypos.polling import FetchState, Poller, PollerPhase, PollingOptions, PollingResult
from pypos.session import AppRole, AuthSession, SessionStore

__all__ = [
    "AppRole",
    "AuthSession",
    "FetchState",
    "Poller",
    "PollerPhase",
    "PollingOptions",
    "PollingResult",
    "PosApiError",
    "PosAuthenticationError",
    "PosClient",
    "PosConfig",
    "PosConfigError",
    "PosError",
    "PosServiceUnavailableError",
    "PosTransportError",
    "SessionStore",
    "__version__",
]
