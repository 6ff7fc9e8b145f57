"""Request payload models for Documize endpoints (camelCase on the wire)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_api(self, *, exclude_none: bool = False) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=exclude_none)


class SpaceCreateInput(_Payload):
    name: str = Field(min_length=1)
    clone_id: str = Field(default="", alias="cloneId")
    copy_template: bool = Field(default=False, alias="copyTemplate")
    copy_permission: bool = Field(default=False, alias="copyPermission")
    copy_document: bool = Field(default=False, alias="copyDocument")


class CategoryCreateInput(_Payload):
    space_id: str = Field(min_length=1, alias="spaceId")
    name: str = Field(min_length=1)


class DocumentUpdateInput(_Payload):
    name: Optional[str] = None
    excerpt: Optional[str] = None
    tags: Optional[str] = None


class PageFields(_Payload):
    document_id: str = Field(alias="documentId")
    title: str
    body: str
    content_type: str = Field(default="wysiwyg", alias="contentType")
    page_type: str = Field(default="section", alias="pageType")
    level: int = 1
    sequence: float = 1.0


class PageMeta(_Payload):
    document_id: str = Field(alias="documentId")
    raw_body: str = Field(alias="rawBody")
    config: str = "{}"


class PageCreateInput(_Payload):
    """The page endpoint expects {page: {...}, meta: {...}}."""

    page: PageFields
    meta: PageMeta

    @classmethod
    def build(cls, document_id: str, title: str, body: str, **fields: Any) -> "PageCreateInput":
        fields = {k: v for k, v in fields.items() if v is not None}
        return cls(
            page=PageFields(document_id=document_id, title=title, body=body, **fields),
            meta=PageMeta(document_id=document_id, raw_body=body),
        )


class PageUpdateInput(_Payload):
    title: Optional[str] = None
    body: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias="contentType")
    page_type: Optional[str] = Field(default=None, alias="pageType")
    level: Optional[int] = None
    sequence: Optional[float] = None


class UserCreateInput(_Payload):
    firstname: str
    lastname: str
    email: str
    view_users: bool = Field(default=True, alias="viewUsers")
    editor: bool = True
    analytics: bool = True
    active: bool = True


class SearchInput(_Payload):
    keywords: str
    content: bool = True
    doc: bool = True
    tag: bool = True
    attachment: bool = False
    space_id: str = Field(default="", alias="spaceId")


class ExportInput(_Payload):
    space_id: str = Field(alias="spaceId")
    data: List[str] = Field(min_length=1)
    filter_type: str = Field(default="document", alias="filterType")


__all__ = [
    "SpaceCreateInput",
    "CategoryCreateInput",
    "DocumentUpdateInput",
    "PageCreateInput",
    "PageUpdateInput",
    "UserCreateInput",
    "SearchInput",
    "ExportInput",
]
