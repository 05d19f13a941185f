"""Helpers for safe debug logging.

Request and response bodies carry passwords, bearer tokens and QR login
codes. Only JSON-shaped values reach the log, so this walks dicts, lists
and strings and leaves other scalars alone.
"""

from __future__ import annotations

import re
from typing import Any

REDACTED = "<redacted>"

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "password_confirmation",
        "token",
        "authorization",
        "qr_code",
    }
)

_BEARER_RE = re.compile(r"(?i)\bbearer\s+\S+")


def _redact_string(value: str, max_string: int) -> str:
    value = _BEARER_RE.sub(f"Bearer {REDACTED}", value)
    if len(value) > max_string:
        return f"{value[:max_string]}...<truncated>"
    return value


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a copy of a JSON value with credentials masked.

    Values under a sensitive key are replaced whole; ``Bearer`` tokens are
    masked wherever they appear inside a string.
    """
    if isinstance(value, dict):
        return {
            key: REDACTED if str(key).lower() in _SENSITIVE_KEYS else redact_for_log(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_for_log(item, max_string=max_string) for item in value]
    if isinstance(value, str):
        return _redact_string(value, max_string)
    return value
