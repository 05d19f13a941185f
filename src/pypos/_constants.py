"""Internal constants shared across the library."""

BASE_URL = "http://localhost:3000"
USER_AGENT = "pypos/0.1"

#: Default polling interval in seconds.
DEFAULT_POLL_INTERVAL: float = 5.0

#: Default per-request timeout in seconds.
DEFAULT_REQUEST_TIMEOUT: float = 30.0

DEFAULT_MAX_ATTEMPTS: int = 3
DEFAULT_RETRY_DELAY: float = 1.0

HTTP_NO_CONTENT = 204
HTTP_UNAUTHORIZED = 401
HTTP_SERVICE_UNAVAILABLE = 503
