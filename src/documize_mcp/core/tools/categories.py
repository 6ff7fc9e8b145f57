from __future__ import annotations

from typing import Any, Dict, List

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.models import CategoryCreateInput


async def list_categories(client: DocumizeClient, space_id: str) -> List[Dict[str, Any]]:
    """List all categories in a space."""
    return (
        await client.get(f"/api/space/{space_id}/category", tool="list_categories")
        or []
    )


async def create_category(
    client: DocumizeClient, space_id: str, name: str
) -> Dict[str, Any]:
    """Create a new category in a space."""
    payload = CategoryCreateInput(space_id=space_id, name=name)
    return await client.post(
        "/api/category", json=payload.to_api(), tool="create_category"
    )
