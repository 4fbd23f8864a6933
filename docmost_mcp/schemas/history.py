"""
Schemas - History Models

Page version history entries.
"""

from pydantic import Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from docmost_mcp.schemas.base import DocmostModel


class HistoryEntry(DocmostModel):
    """One saved version of a page."""
    id: str
    page_id: Optional[str] = Field(None, alias="pageId")
    title: Optional[str] = None
    version: Optional[int] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    last_updated_by: Optional[str] = Field(None, alias="lastUpdatedBy")
    contributors: List[Optional[str]] = []

    @classmethod
    def _fields_from_api(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        updated_by = data.get("lastUpdatedBy") or {}
        return {
            "id": data.get("id"),
            "pageId": data.get("pageId"),
            "title": data.get("title"),
            "version": data.get("version"),
            "createdAt": data.get("createdAt"),
            "lastUpdatedBy": updated_by.get("name") or data.get("lastUpdatedById"),
            "contributors": [c.get("name") for c in data.get("contributors") or []],
        }

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls.model_validate(cls._fields_from_api(data))


class HistoryDetail(HistoryEntry):
    """History entry with its content converted to Markdown."""
    content: Optional[str] = None

    @classmethod
    def from_api(
        cls,
        data: Dict[str, Any],
        content: Optional[str] = None,
    ) -> "HistoryDetail":
        return cls.model_validate({**cls._fields_from_api(data), "content": content})

    def to_dict(self) -> dict:
        exclude = {"content"} if self.content is None else set()
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
