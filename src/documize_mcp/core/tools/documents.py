from __future__ import annotations

from typing import Any, Dict, List, Optional

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.models import DocumentUpdateInput
from documize_mcp.core.tools._deletion import delete_and_confirm


async def list_documents(client: DocumizeClient, space_id: str) -> List[Dict[str, Any]]:
    """List all documents in a space."""
    return (
        await client.get(
            "/api/documents", params={"space": space_id}, tool="list_documents"
        )
        or []
    )


async def get_document(client: DocumizeClient, document_id: str) -> Dict[str, Any]:
    """Get a document's metadata (name, excerpt, tags, lifecycle)."""
    return await client.get(f"/api/documents/{document_id}", tool="get_document")


async def update_document(
    client: DocumizeClient,
    document_id: str,
    name: Optional[str] = None,
    excerpt: Optional[str] = None,
    tags: Optional[str] = None,
) -> Dict[str, Any]:
    """Update a document's name, excerpt and/or tags. Omitted fields are left as is."""
    payload = DocumentUpdateInput(name=name, excerpt=excerpt, tags=tags).to_api(
        exclude_none=True
    )
    if not payload:
        raise ValueError("Provide at least one of name, excerpt or tags.")

    return await client.put(
        f"/api/documents/{document_id}", json=payload, tool="update_document"
    )


async def delete_document(client: DocumizeClient, document_id: str) -> Dict[str, Any]:
    """
    Delete a document.

    Documize may drop the connection instead of answering the DELETE; in that
    case the document is probed until it is gone before reporting success.
    """
    path = f"/api/documents/{document_id}"
    await delete_and_confirm(client, path, probe_path=path, tool="delete_document")
    return {"deleted": True, "document_id": document_id}
