from __future__ import annotations

from typing import Any, Dict

from documize_mcp.core.client import DocumizeClient

_CONTENT_TYPES = {
    "html": "text/html",
    "htm": "text/html",
    "md": "text/markdown",
    "markdown": "text/markdown",
    "doc": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def _content_type_for(filename: str) -> str:
    ext = filename.lower().rsplit(".", 1)[-1] if "." in filename else ""
    return _CONTENT_TYPES.get(ext, "application/octet-stream")


async def import_document(
    client: DocumizeClient, space_id: str, filename: str, content: str
) -> Dict[str, Any]:
    """
    Create a document by uploading a file that Documize converts server-side.

    The filename extension selects the converter: .html/.htm, .md/.markdown,
    or .doc/.docx (the latter needs the conversion service).
    Returns the created document.
    """
    return await client.post_file(
        f"/api/import/folder/{space_id}",
        filename=filename,
        content=content,
        field_name="attachment",
        content_type=_content_type_for(filename),
        tool="import_document",
    )
