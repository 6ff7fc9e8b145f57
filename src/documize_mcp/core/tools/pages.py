from __future__ import annotations

from typing import Any, Dict, List, Optional

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.models import PageCreateInput, PageUpdateInput
from documize_mcp.core.tools._deletion import delete_and_confirm


async def get_pages(client: DocumizeClient, document_id: str) -> List[Dict[str, Any]]:
    """List the pages (sections) of a document, in document order."""
    return (
        await client.get(f"/api/documents/{document_id}/pages", tool="get_pages")
        or []
    )


async def get_page(
    client: DocumizeClient, document_id: str, page_id: str
) -> Dict[str, Any]:
    """Get a single page including its body."""
    return await client.get(
        f"/api/documents/{document_id}/pages/{page_id}", tool="get_page"
    )


async def create_page(
    client: DocumizeClient,
    document_id: str,
    title: str,
    body: str,
    content_type: Optional[str] = None,
    page_type: Optional[str] = None,
    level: Optional[int] = None,
    sequence: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Add a page to a document.

    Defaults: content_type "wysiwyg", page_type "section", level 1, sequence 1.0.
    The body is HTML for wysiwyg pages.
    """
    payload = PageCreateInput.build(
        document_id,
        title,
        body,
        content_type=content_type,
        page_type=page_type,
        level=level,
        sequence=sequence,
    )
    return await client.post(
        f"/api/documents/{document_id}/pages",
        json=payload.to_api(),
        tool="create_page",
    )


async def update_page(
    client: DocumizeClient,
    document_id: str,
    page_id: str,
    title: Optional[str] = None,
    body: Optional[str] = None,
    content_type: Optional[str] = None,
    page_type: Optional[str] = None,
    level: Optional[int] = None,
    sequence: Optional[float] = None,
) -> Dict[str, Any]:
    """Update a page. Only the provided fields are sent."""
    payload = PageUpdateInput(
        title=title,
        body=body,
        content_type=content_type,
        page_type=page_type,
        level=level,
        sequence=sequence,
    ).to_api(exclude_none=True)
    if not payload:
        raise ValueError("Provide at least one page field to update.")

    return await client.put(
        f"/api/documents/{document_id}/pages/{page_id}",
        json=payload,
        tool="update_page",
    )


async def delete_page(
    client: DocumizeClient, document_id: str, page_id: str
) -> Dict[str, Any]:
    """Delete a page, confirming by probe when the server gives no response."""
    path = f"/api/documents/{document_id}/pages/{page_id}"
    await delete_and_confirm(client, path, probe_path=path, tool="delete_page")
    return {"deleted": True, "document_id": document_id, "page_id": page_id}
