import json

import pytest
import respx
from httpx import Response
from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.errors import DocumizeHTTPError
from documize_mcp.core.tools.users import (
    create_user,
    delete_user,
    join_group,
    leave_group,
    list_groups,
    list_users,
)

BASE = "https://docs.test"


@pytest.fixture
def client():
    return DocumizeClient(base_url=BASE, credentials="Y3JlZHM=")


def _mock_auth():
    return respx.post(f"{BASE}/api/public/authenticate").mock(
        return_value=Response(200, json={"token": "tok1"})
    )


@pytest.mark.asyncio
@respx.mock
async def test_list_users_and_groups(client):
    _mock_auth()
    respx.get(f"{BASE}/api/users").mock(
        return_value=Response(200, json=[{"id": "u1", "email": "a@example.com"}])
    )
    respx.get(f"{BASE}/api/group").mock(
        return_value=Response(200, json=[{"id": "g1", "name": "Editors"}])
    )

    async with client:
        users = await list_users(client)
        groups = await list_groups(client)

    assert users[0]["email"] == "a@example.com"
    assert groups[0]["name"] == "Editors"


@pytest.mark.asyncio
@respx.mock
async def test_list_users_forbidden_for_non_admin(client):
    _mock_auth()
    respx.get(f"{BASE}/api/users").mock(return_value=Response(403, text="Forbidden"))

    async with client:
        with pytest.raises(DocumizeHTTPError) as exc:
            await list_users(client)

    assert exc.value.status_code == 403
    assert exc.value.reason == "Forbidden"


@pytest.mark.asyncio
@respx.mock
async def test_create_user_flags_default_true(client):
    _mock_auth()
    route = respx.post(f"{BASE}/api/users").mock(
        return_value=Response(200, json={"id": "u2"})
    )

    async with client:
        await create_user(client, "Ada", "Lovelace", "ada@example.com", analytics=False)

    assert json.loads(route.calls[0].request.content) == {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "email": "ada@example.com",
        "viewUsers": True,
        "editor": True,
        "analytics": False,
        "active": True,
    }


@pytest.mark.asyncio
@respx.mock
async def test_group_membership_and_delete(client):
    _mock_auth()
    join = respx.post(f"{BASE}/api/group/g1/join/u1").mock(return_value=Response(200))
    leave = respx.delete(f"{BASE}/api/group/g1/leave/u1").mock(
        return_value=Response(200)
    )
    respx.delete(f"{BASE}/api/users/u1").mock(return_value=Response(200))

    async with client:
        joined = await join_group(client, "g1", "u1")
        left = await leave_group(client, "g1", "u1")
        deleted = await delete_user(client, "u1")

    assert json.loads(join.calls[0].request.content) == {}
    assert leave.called
    assert joined["joined"] and left["left"] and deleted["deleted"]
