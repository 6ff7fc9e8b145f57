from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Optional

import httpx


class ErrorKind(str, Enum):
    AUTHENTICATION_FAILED = "authentication_failed"
    AUTHORIZATION_EXPIRED_RETRY_FAILED = "authorization_expired_retry_failed"
    HTTP_ERROR = "http_error"
    NO_RESPONSE = "no_response"
    REQUEST_ERROR = "request_error"


class DocumizeClientError(Exception):
    """Base error for client failures. Every failure past the client is one of these."""

    kind: ErrorKind = ErrorKind.REQUEST_ERROR

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.cause = cause

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "status": self.status, "message": self.message}


class AuthenticationFailed(DocumizeClientError):
    kind = ErrorKind.AUTHENTICATION_FAILED


class AuthorizationExpiredRetryFailed(DocumizeClientError):
    kind = ErrorKind.AUTHORIZATION_EXPIRED_RETRY_FAILED


class DocumizeHTTPError(DocumizeClientError):
    kind = ErrorKind.HTTP_ERROR

    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        body: Any = None,
    ):
        super().__init__(
            f"Documize API error ({status_code}) {method} {url}: {message}",
            status=status_code,
        )
        self.status_code = status_code
        self.method = method
        self.url = url
        self.reason = message
        self.body = body

    def as_dict(self) -> Dict[str, Any]:
        data = super().as_dict()
        data["body"] = self.body
        return data


class NoResponseError(DocumizeClientError):
    kind = ErrorKind.NO_RESPONSE


class DocumizeRequestError(DocumizeClientError):
    kind = ErrorKind.REQUEST_ERROR


# --- Normalization --------------------------------------------------------- #

# Raised before anything reached the wire.
_NOT_SENT = (
    httpx.InvalidURL,
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
)


def response_body(resp: httpx.Response) -> Any:
    """Decoded body: parsed JSON when possible, text otherwise, None when empty."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return resp.text


def _extract_message(body: Any) -> str:
    if isinstance(body, dict):
        for key in ("message", "error"):
            val = body.get(key)
            if isinstance(val, str) and val:
                return val
        return json.dumps(body)
    if isinstance(body, str) and body.strip():
        return body.strip()[:500]
    if body is None:
        return "request failed"
    return json.dumps(body)


def from_response(resp: httpx.Response, *, method: str) -> DocumizeHTTPError:
    body = response_body(resp)
    return DocumizeHTTPError(
        status_code=resp.status_code,
        method=method,
        url=str(resp.request.url),
        message=_extract_message(body),
        body=body,
    )


def from_exception(exc: BaseException, *, method: str, path: str) -> DocumizeClientError:
    """Map a transport or request-construction failure to a normalized error."""
    if isinstance(exc, DocumizeClientError):
        return exc
    if isinstance(exc, _NOT_SENT) or isinstance(exc, (TypeError, ValueError)):
        return DocumizeRequestError(
            f"Request error calling {method} {path}: {exc}", cause=exc
        )
    if isinstance(exc, httpx.DecodingError):
        # The status line arrived but the body could not be decoded, so there
        # is no usable response to report as an HTTP error.
        return NoResponseError(
            f"Undecodable response from Documize API for {method} {path}: {exc}",
            cause=exc,
        )
    if isinstance(exc, httpx.TransportError):
        return NoResponseError(
            f"No response received from Documize API for {method} {path}: "
            f"{type(exc).__name__}",
            cause=exc,
        )
    return DocumizeRequestError(
        f"Request error calling {method} {path}: {exc}", cause=exc
    )


__all__ = [
    "ErrorKind",
    "DocumizeClientError",
    "AuthenticationFailed",
    "AuthorizationExpiredRetryFailed",
    "DocumizeHTTPError",
    "NoResponseError",
    "DocumizeRequestError",
    "from_response",
    "from_exception",
    "response_body",
]
