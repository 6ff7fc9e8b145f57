from __future__ import annotations

from typing import Any, List

from documize_mcp.core.client import DocumizeClient
from documize_mcp.core.models import ExportInput


def _unwrap(payload: Any) -> Any:
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


async def export_documents(
    client: DocumizeClient, space_id: str, document_ids: List[str]
) -> str:
    """
    Export documents from a space as a single HTML string.

    Documize has one export endpoint; it always produces HTML.
    """
    payload = ExportInput(space_id=space_id, data=document_ids)
    result = await client.post("/api/export", json=payload.to_api(), tool="export")
    return _unwrap(result) or ""


async def export_html(client: DocumizeClient, space_id: str, document_id: str) -> str:
    """Export one document as HTML."""
    return await export_documents(client, space_id, [document_id])


# PDF and DOCX are served as the same HTML; conversion is left to the caller.
async def export_pdf(client: DocumizeClient, space_id: str, document_id: str) -> str:
    """Export one document for PDF rendering (returns HTML)."""
    return await export_documents(client, space_id, [document_id])


async def export_docx(client: DocumizeClient, space_id: str, document_id: str) -> str:
    """Export one document for DOCX conversion (returns HTML)."""
    return await export_documents(client, space_id, [document_id])
