from __future__ import annotations

import logging
import mimetypes
import time
from typing import Any, Dict, Optional, Union

import httpx

from .auth import AUTHENTICATE_PATH, Authenticator, TokenCell
from .credentials import Credentials
from .errors import (
    AuthorizationExpiredRetryFailed,
    DocumizeRequestError,
    from_exception,
    from_response,
    response_body,
)
from .observability import AUTH_EXPIRED, log_event

DEFAULT_TIMEOUT_SECONDS = 30.0


class DocumizeClient:
    """
    Shared HTTP client for the Documize REST API.
    - Holds the credential and the session token; authenticates lazily
    - Recovers once from an expired token (401): re-authenticate, replay
    - Raises DocumizeClientError subclasses for every other failure
    - No business logic; tools own resource semantics
    """

    def __init__(
        self,
        *,
        base_url: str,
        credentials: Union[str, Credentials],
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")

        if not isinstance(credentials, Credentials):
            credentials = Credentials(encoded=credentials or "")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.credentials = credentials
        self.log = logger or logging.getLogger("documize_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=timeout_seconds,
        )
        self.authenticator = Authenticator(self.http, self.credentials)
        self._token = TokenCell()

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "DocumizeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def token(self) -> Optional[str]:
        """Currently held session token, None before the first call."""
        return self._token.value

    async def authenticate(self) -> str:
        """Force a fresh token, replacing whatever is held."""
        return await self._token.obtain(
            self.authenticator.authenticate, stale=self._token.value
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        files: Optional[Dict[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> Any:
        """
        Core request method.
        - Authenticates first when no token is held
        - On 401, re-authenticates once and replays the same request once
        - Raises AuthorizationExpiredRetryFailed when the replay is rejected too
        - Raises DocumizeHTTPError on other non-2xx responses
        - Raises NoResponseError / DocumizeRequestError on transport failures
        - Returns parsed JSON, raw text for non-JSON bodies, None when empty
        """
        method = method.upper()
        if path.split("?", 1)[0].rstrip("/") == AUTHENTICATE_PATH:
            raise DocumizeRequestError(
                f"{AUTHENTICATE_PATH} is reserved for authentication; "
                "use authenticate() instead."
            )

        token = await self._token.obtain(self.authenticator.authenticate)
        resp = await self._send(
            method, path, token, params=params, json=json, files=files, tool=tool
        )

        if resp.status_code == 401:
            log_event(AUTH_EXPIRED, self.log, method=method, path=path, tool=tool)
            token = await self._token.obtain(
                self.authenticator.authenticate, stale=token
            )
            resp = await self._send(
                method,
                path,
                token,
                params=params,
                json=json,
                files=files,
                tool=tool,
                attempt=1,
            )
            if resp.status_code == 401:
                err = from_response(resp, method=method)
                raise AuthorizationExpiredRetryFailed(
                    f"Documize API rejected {method} {path} again after "
                    f"re-authenticating: {err.reason}",
                    status=401,
                    cause=err,
                )

        if resp.status_code < 200 or resp.status_code >= 300:
            raise from_response(resp, method=method)

        return response_body(resp)

    async def _send(
        self,
        method: str,
        path: str,
        token: str,
        *,
        params: Optional[Dict[str, Any]],
        json: Any,
        files: Optional[Dict[str, Any]],
        tool: Optional[str],
        attempt: int = 0,
    ) -> httpx.Response:
        # Built fresh on every attempt so a replay never reuses a consumed body.
        start = time.perf_counter()
        try:
            req = self.http.build_request(
                method,
                path,
                params=params,
                json=json,
                files=files,
                headers={"Authorization": f"Bearer {token}"},
            )
            resp = await self.http.send(req)
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
            raise from_exception(exc, method=method, path=path) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)

        # structured-ish log without secrets
        self.log.debug(
            "op.request",
            extra={
                "tool": tool,
                "method": method,
                "path": path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
                "attempt": attempt,
            },
        )
        return resp

    async def get(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.request("GET", path, params=params, tool=tool)

    async def post(
        self, path: str, *, json: Any = None, tool: Optional[str] = None
    ) -> Any:
        return await self.request("POST", path, json=json, tool=tool)

    async def put(self, path: str, *, json: Any, tool: Optional[str] = None) -> Any:
        return await self.request("PUT", path, json=json, tool=tool)

    async def delete(self, path: str, *, tool: Optional[str] = None) -> Any:
        return await self.request("DELETE", path, tool=tool)

    async def post_file(
        self,
        path: str,
        *,
        filename: str,
        content: Union[str, bytes],
        field_name: str = "file",
        content_type: Optional[str] = None,
        tool: Optional[str] = None,
    ) -> Any:
        """
        Upload in-memory content using multipart/form-data.
        - httpx sets the multipart boundary; no JSON Content-Type is sent.
        - Goes through the same token and 401 handling as every other call.
        """
        if not filename:
            raise DocumizeRequestError("filename must be provided for upload.")

        if isinstance(content, str):
            content = content.encode("utf-8")
        ctype = (
            content_type
            or mimetypes.guess_type(filename)[0]
            or "application/octet-stream"
        )
        return await self.request(
            "POST",
            path,
            files={field_name: (filename, content, ctype)},
            tool=tool,
        )


__all__ = ["DocumizeClient", "DEFAULT_TIMEOUT_SECONDS"]
