"""Core domain surface for documize-mcp (transport-agnostic)."""

from .auth import AUTHENTICATE_PATH, Authenticator, TokenCell
from .client import DEFAULT_TIMEOUT_SECONDS, DocumizeClient
from .config import DocumizeConfig, create_client_from_env, load_env_config
from .credentials import Credentials
from .errors import (
    AuthenticationFailed,
    AuthorizationExpiredRetryFailed,
    DocumizeClientError,
    DocumizeHTTPError,
    DocumizeRequestError,
    ErrorKind,
    NoResponseError,
)
from .registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
)

__all__ = [
    # Client
    "DocumizeClient",
    "DEFAULT_TIMEOUT_SECONDS",
    "Credentials",
    "Authenticator",
    "TokenCell",
    "AUTHENTICATE_PATH",
    # Exceptions
    "ErrorKind",
    "DocumizeClientError",
    "AuthenticationFailed",
    "AuthorizationExpiredRetryFailed",
    "DocumizeHTTPError",
    "NoResponseError",
    "DocumizeRequestError",
    # Config helpers
    "DocumizeConfig",
    "create_client_from_env",
    "load_env_config",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
]
