from __future__ import annotations

from typing import Any, Dict, List

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.models import UserCreateInput


async def list_users(client: DocumizeClient) -> List[Dict[str, Any]]:
    """List users in the organization (requires admin rights)."""
    return await client.get("/api/users", tool="list_users") or []


async def create_user(
    client: DocumizeClient,
    firstname: str,
    lastname: str,
    email: str,
    view_users: bool = True,
    editor: bool = True,
    analytics: bool = True,
    active: bool = True,
) -> Dict[str, Any]:
    """Create a user. Permission flags default to enabled."""
    payload = UserCreateInput(
        firstname=firstname,
        lastname=lastname,
        email=email,
        view_users=view_users,
        editor=editor,
        analytics=analytics,
        active=active,
    )
    return await client.post("/api/users", json=payload.to_api(), tool="create_user")


async def delete_user(client: DocumizeClient, user_id: str) -> Dict[str, Any]:
    await client.delete(f"/api/users/{user_id}", tool="delete_user")
    return {"deleted": True, "user_id": user_id}


async def list_groups(client: DocumizeClient) -> List[Dict[str, Any]]:
    """List user groups."""
    return await client.get("/api/group", tool="list_groups") or []


async def join_group(
    client: DocumizeClient, group_id: str, user_id: str
) -> Dict[str, Any]:
    """Add a user to a group."""
    await client.post(f"/api/group/{group_id}/join/{user_id}", json={}, tool="join_group")
    return {"joined": True, "group_id": group_id, "user_id": user_id}


async def leave_group(
    client: DocumizeClient, group_id: str, user_id: str
) -> Dict[str, Any]:
    """Remove a user from a group."""
    await client.delete(f"/api/group/{group_id}/leave/{user_id}", tool="leave_group")
    return {"left": True, "group_id": group_id, "user_id": user_id}
