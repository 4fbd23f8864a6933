"""
Schemas - Page Models

Pydantic models for Docmost page data.
"""

from pydantic import Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from docmost_mcp.schemas.base import DocmostModel


class PageRef(DocmostModel):
    """Minimal page reference (subpages, breadcrumbs)."""
    id: str
    title: Optional[str] = None


class Page(DocmostModel):
    """Page metadata, optionally with converted Markdown and child pages."""
    id: str
    title: Optional[str] = None
    parent_page_id: Optional[str] = Field(None, alias="parentPageId")
    space_id: Optional[str] = Field(None, alias="spaceId")
    is_locked: Optional[bool] = Field(None, alias="isLocked")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")
    content: Optional[str] = None
    subpages: Optional[List[PageRef]] = None

    @classmethod
    def from_api(
        cls,
        data: Dict[str, Any],
        content: Optional[str] = None,
        subpages: Optional[List[Dict[str, Any]]] = None,
    ) -> "Page":
        """
        Build from a raw page payload.
        
        The raw `content` (a document tree) is dropped; pass the converted
        Markdown instead.
        """
        fields = {k: v for k, v in data.items() if k not in ("content", "subpages")}
        return cls.model_validate({
            **fields,
            "content": content,
            "subpages": subpages or None,
        })

    def to_dict(self) -> dict:
        exclude = {
            name for name in ("content", "subpages")
            if getattr(self, name) is None
        }
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


class SearchResult(DocmostModel):
    """Single full-text search hit."""
    id: str
    title: Optional[str] = None
    parent_page_id: Optional[str] = Field(None, alias="parentPageId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    rank: Optional[float] = None
    highlight: Optional[str] = None
    space_id: Optional[str] = Field(None, alias="spaceId")
    space_name: Optional[str] = Field(None, alias="spaceName")

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "SearchResult":
        space = data.get("space") or {}
        return cls.model_validate({
            **data,
            "spaceId": space.get("id"),
            "spaceName": space.get("name"),
        })
