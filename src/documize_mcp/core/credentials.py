from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """
    Long-lived Documize API credential: Base64 of "tenant:identity:secret".
    - Held opaquely; contents are not validated here, a bad value fails at auth.
    - Only ever leaves the object as a Basic challenge header.
    """

    encoded: str = field(repr=False)

    @classmethod
    def from_parts(cls, tenant: str, identity: str, secret: str) -> "Credentials":
        # tenant is empty on single-tenant (self-hosted) installs
        raw = f"{tenant or ''}:{identity}:{secret}".encode("utf-8")
        return cls(encoded=base64.b64encode(raw).decode("ascii"))

    def basic_header(self) -> str:
        return f"Basic {self.encoded}"

    def __str__(self) -> str:
        return "Credentials(***)"


__all__ = ["Credentials"]
