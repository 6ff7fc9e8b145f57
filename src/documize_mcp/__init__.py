"""documize_mcp package exports."""

from .core import (
    AuthenticationFailed,
    AuthorizationExpiredRetryFailed,
    Credentials,
    DocumizeClient,
    DocumizeClientError,
    DocumizeHTTPError,
    DocumizeRequestError,
    ErrorKind,
    NoResponseError,
    create_client_from_env,
    discover_tool_modules,
    register_discovered_tools,
)
from .server import main as run_server

__all__ = [
    # Client
    "DocumizeClient",
    "Credentials",
    "create_client_from_env",
    # Exceptions
    "ErrorKind",
    "DocumizeClientError",
    "AuthenticationFailed",
    "AuthorizationExpiredRetryFailed",
    "DocumizeHTTPError",
    "NoResponseError",
    "DocumizeRequestError",
    # Server utilities
    "run_server",
    "discover_tool_modules",
    "register_discovered_tools",
]
