from __future__ import annotations

from typing import Any, Dict, List, Optional

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.models import SpaceCreateInput


async def list_spaces(client: DocumizeClient) -> List[Dict[str, Any]]:
    """List all spaces (folders/areas) visible to the authenticated user."""
    return await client.get("/api/space", tool="list_spaces") or []


async def get_space(client: DocumizeClient, space_id: str) -> Dict[str, Any]:
    """Get details about a specific space."""
    return await client.get(f"/api/space/{space_id}", tool="get_space")


async def create_space(
    client: DocumizeClient, name: str, description: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a new empty space.

    The description is accepted for compatibility but Documize's create
    endpoint has no field for it.
    """
    payload = SpaceCreateInput(name=name)
    return await client.post("/api/space", json=payload.to_api(), tool="create_space")


async def delete_space(client: DocumizeClient, space_id: str) -> Dict[str, Any]:
    """Delete a space and everything in it."""
    await client.delete(f"/api/space/{space_id}", tool="delete_space")
    return {"deleted": True, "space_id": space_id}
