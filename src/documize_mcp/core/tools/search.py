from __future__ import annotations

from typing import Any, Dict, List, Optional

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.models import SearchInput


async def search(
    client: DocumizeClient,
    query: str,
    space_id: Optional[str] = None,
    content: bool = True,
    doc: bool = True,
    tag: bool = True,
    attachment: bool = False,
) -> List[Dict[str, Any]]:
    """
    Full-text search across documents.

    - content/doc/tag/attachment select which fields are matched
    - space_id limits the search to one space
    """
    if not query or not query.strip():
        raise ValueError("query must not be empty.")

    payload = SearchInput(
        keywords=query.strip(),
        content=content,
        doc=doc,
        tag=tag,
        attachment=attachment,
        space_id=space_id or "",
    )
    return await client.post("/api/search", json=payload.to_api(), tool="search") or []
