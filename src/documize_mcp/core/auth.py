from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Awaitable, Callable, Optional

import httpx

from .credentials import Credentials
from .errors import AuthenticationFailed, from_exception, from_response
from .observability import AUTH_ACQUIRED, AUTH_FAILED, log_event

AUTHENTICATE_PATH = "/api/public/authenticate"

# RFC 6750 b64token: one run of token characters, no whitespace or markup.
_BEARER_TOKEN = re.compile(r"[A-Za-z0-9._~+/-]+=*")


def _bearer_safe(value: object) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value if _BEARER_TOKEN.fullmatch(value) else None


def _extract_token(resp: httpx.Response) -> Optional[str]:
    # Documize answers {"token": "...", "user": {...}}; a JSON string or a
    # text/plain body holding only the token is accepted too.
    if not resp.content:
        return None
    try:
        body = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        content_type = resp.headers.get("content-type", "")
        if content_type and not content_type.startswith("text/plain"):
            return None
        return _bearer_safe(resp.text)
    if isinstance(body, dict):
        body = body.get("token")
    return _bearer_safe(body)


class Authenticator:
    """Exchanges the long-lived credential for a bearer token."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        credentials: Credentials,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self.http = http
        self.credentials = credentials
        self.log = logger or logging.getLogger("documize_mcp.auth")

    async def authenticate(self) -> str:
        """
        POST the credential as a Basic challenge and return the bearer token.
        Raises AuthenticationFailed on any transport error, non-2xx response
        or a body without a token.
        """
        try:
            resp = await self.http.post(
                AUTHENTICATE_PATH,
                json={},
                headers={"Authorization": self.credentials.basic_header()},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            err = from_exception(exc, method="POST", path=AUTHENTICATE_PATH)
            log_event(AUTH_FAILED, self.log, reason=err.kind.value)
            raise AuthenticationFailed(
                f"Authentication failed: {err.message}", cause=err
            ) from exc

        if resp.status_code < 200 or resp.status_code >= 300:
            err = from_response(resp, method="POST")
            log_event(AUTH_FAILED, self.log, status=resp.status_code)
            raise AuthenticationFailed(
                f"Authentication failed: {err.message}",
                status=resp.status_code,
                cause=err,
            )

        token = _extract_token(resp)
        if token is None:
            log_event(
                AUTH_FAILED, self.log, status=resp.status_code, reason="no_token"
            )
            raise AuthenticationFailed(
                "Authentication failed: response did not contain a token",
                status=resp.status_code,
            )

        log_event(AUTH_ACQUIRED, self.log, status=resp.status_code)
        return token


def _consume_outcome(fut: asyncio.Future) -> None:
    if not fut.cancelled():
        fut.exception()


class TokenCell:
    """
    The client's session token.
    - The owning client is the only writer; the value is replaced wholesale.
    - At most one acquisition runs at a time; concurrent callers await it
      instead of starting their own (single-flight).
    """

    def __init__(self) -> None:
        self._value: Optional[str] = None
        self._inflight: Optional[asyncio.Future[str]] = None

    @property
    def value(self) -> Optional[str]:
        return self._value

    async def obtain(
        self,
        acquire: Callable[[], Awaitable[str]],
        *,
        stale: Optional[str] = None,
    ) -> str:
        """
        Return a usable token, acquiring one when none is held or when the held
        one is `stale` (rejected by the server). A token that already replaced
        `stale` is reused as is.
        """
        if self._value is not None and self._value != stale:
            return self._value

        if self._inflight is None:
            self._value = None
            self._inflight = asyncio.ensure_future(self._acquire(acquire))
            # Retrieve the outcome even when every waiter was cancelled.
            self._inflight.add_done_callback(_consume_outcome)

        # Abandoning caller must not cancel an acquisition others are awaiting.
        return await asyncio.shield(self._inflight)

    async def _acquire(self, acquire: Callable[[], Awaitable[str]]) -> str:
        try:
            token = await acquire()
            self._value = token
            return token
        finally:
            self._inflight = None


__all__ = ["AUTHENTICATE_PATH", "Authenticator", "TokenCell"]
