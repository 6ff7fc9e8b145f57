from __future__ import annotations

import logging
from typing import Any, Dict

AUTH_ACQUIRED = "auth.acquired"
AUTH_EXPIRED = "auth.expired"
AUTH_FAILED = "auth.failed"

# event -> level it is logged at
AUTH_EVENTS: Dict[str, int] = {
    AUTH_ACQUIRED: logging.INFO,
    AUTH_EXPIRED: logging.INFO,
    AUTH_FAILED: logging.WARNING,
}

SECRET_FIELDS = frozenset({"token", "credentials", "authorization", "secret"})
REDACTED = "***"

# Attribute names LogRecord already owns; extras may not shadow them.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _auth_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, val in fields.items():
        if val is None:
            continue
        if key.lower() in SECRET_FIELDS:
            val = REDACTED
        if key in _RECORD_ATTRS:
            key = f"field_{key}"
        out[key] = val
    return out


def log_event(event: str, logger: logging.Logger | None = None, **fields: Any) -> None:
    """
    Log one step of the token lifecycle (acquired, expired, failed).
    Secret-bearing fields are masked; unknown events are a programming error.
    """
    if event not in AUTH_EVENTS:
        raise ValueError(f"Unknown auth event: {event}")
    log = logger or logging.getLogger("documize_mcp.auth")
    extra = {"event": event, **_auth_fields(fields)}
    log.log(AUTH_EVENTS[event], event, extra=extra)


__all__ = [
    "AUTH_ACQUIRED",
    "AUTH_EXPIRED",
    "AUTH_FAILED",
    "AUTH_EVENTS",
    "REDACTED",
    "log_event",
]
