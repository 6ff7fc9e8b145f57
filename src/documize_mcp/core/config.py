from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .client import DEFAULT_TIMEOUT_SECONDS, DocumizeClient

API_URL_ENV = "DOCUMIZE_API_URL"
API_CREDENTIALS_ENV = "DOCUMIZE_API_CREDENTIALS"
TIMEOUT_ENV = "DOCUMIZE_TIMEOUT_SECONDS"
LOG_LEVEL_ENV = "DOCUMIZE_LOG_LEVEL"


def _get_float_env(name: str, default: float) -> float:
    """Parse a positive float environment variable with a safe default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = float(raw.strip())
    except ValueError:
        return default
    return val if val > 0 else default


@dataclass(frozen=True)
class DocumizeConfig:
    base_url: str
    credentials: str = field(repr=False)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"


def load_env_config(*, use_dotenv: bool = True) -> DocumizeConfig:
    """Load Documize settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    return DocumizeConfig(
        base_url=os.getenv(API_URL_ENV, "").strip(),
        credentials=os.getenv(API_CREDENTIALS_ENV, "").strip(),
        timeout_seconds=_get_float_env(TIMEOUT_ENV, DEFAULT_TIMEOUT_SECONDS),
        log_level=os.getenv(LOG_LEVEL_ENV, "INFO").strip() or "INFO",
    )


def create_client_from_env(**kwargs) -> DocumizeClient:
    """Create a DocumizeClient from environment variables."""
    cfg = load_env_config()
    if not cfg.base_url or not cfg.credentials:
        raise ValueError(
            f"Missing {API_URL_ENV} or {API_CREDENTIALS_ENV} in environment. "
            f"{API_CREDENTIALS_ENV} is Base64 of 'tenant:email:password'."
        )
    kwargs.setdefault("timeout_seconds", cfg.timeout_seconds)
    return DocumizeClient(
        base_url=cfg.base_url, credentials=cfg.credentials, **kwargs
    )


__all__ = [
    "DocumizeConfig",
    "load_env_config",
    "create_client_from_env",
    "API_URL_ENV",
    "API_CREDENTIALS_ENV",
]
