"""
Delete confirmation for endpoints that sometimes drop the connection instead
of answering an empty 200/204.
"""

from __future__ import annotations

import asyncio
import logging

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.errors import DocumizeHTTPError, NoResponseError

log = logging.getLogger("documize_mcp.tools.deletion")

CONFIRM_ATTEMPTS = 3
CONFIRM_BACKOFF_SECONDS = 1.0  # 1s, 2s, 3s


async def delete_and_confirm(
    client: DocumizeClient, path: str, *, probe_path: str, tool: str
) -> bool:
    """
    DELETE `path`. If the server gives no response, poll `probe_path` until it
    answers 404 and report success; otherwise re-raise the NoResponseError.
    Every other error propagates unchanged.
    """
    try:
        await client.delete(path, tool=tool)
        return True
    except NoResponseError as exc:
        original = exc

    for attempt in range(1, CONFIRM_ATTEMPTS + 1):
        await asyncio.sleep(CONFIRM_BACKOFF_SECONDS * attempt)
        try:
            await client.get(probe_path, tool=tool)
        except DocumizeHTTPError as probe_exc:
            if probe_exc.status_code == 404:
                log.info(
                    "delete confirmed by probe",
                    extra={"tool": tool, "path": path, "attempt": attempt},
                )
                return True
            raise
        except NoResponseError:
            continue

    raise original
