import time

from documize_mcp.core.client import DocumizeClient


async def system_ping(client: DocumizeClient) -> dict:
    """
    Simple connectivity and latency check against the Documize instance.
    Authenticates if needed and returns the number of visible spaces.
    """
    start = time.perf_counter()

    spaces = await client.get("/api/space", tool="system_ping")

    latency_ms = (time.perf_counter() - start) * 1000

    return {
        "status": "ok",
        "latency_ms": round(latency_ms, 2),
        "space_count": len(spaces) if isinstance(spaces, list) else 0,
        "instance_url": client.base_url,
    }
