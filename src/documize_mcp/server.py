from __future__ import annotations

import asyncio
import logging

from mcp.server.fastmcp import FastMCP

from documize_mcp.core.config import create_client_from_env, load_env_config
from documize_mcp.core.logging import setup_logging
from documize_mcp.core.registry import register_discovered_tools

log = logging.getLogger("documize_mcp.server")


def build_app(client) -> FastMCP:
    app = FastMCP("documize-mcp")
    register_discovered_tools(app, client)
    return app


# --- Entry point ----------------------------------------------------------- #


async def main() -> None:
    cfg = load_env_config()
    setup_logging(cfg.log_level)
    client = create_client_from_env()

    app = build_app(client)
    log.info("Documize MCP server running on stdio (%s)", client.base_url)
    try:
        await app.run_stdio_async()
    finally:
        await client.aclose()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
