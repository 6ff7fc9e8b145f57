import pytest
import respx
from httpx import Response
from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.tools.system import system_ping


@pytest.fixture
def client():
    return DocumizeClient(base_url="https://docs.test", credentials="Y3JlZHM=")


@pytest.mark.asyncio
@respx.mock
async def test_system_ping_success(client):
    respx.post("https://docs.test/api/public/authenticate").mock(
        return_value=Response(200, json={"token": "tok1"})
    )
    respx.get("https://docs.test/api/space").mock(
        return_value=Response(200, json=[{"id": "s1"}, {"id": "s2"}])
    )

    async with client:
        result = await system_ping(client)

    assert result["status"] == "ok"
    assert result["space_count"] == 2
    assert isinstance(result["latency_ms"], (int, float))
    assert result["instance_url"] == "https://docs.test"
