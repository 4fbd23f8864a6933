"""
Schemas Module - Pydantic Models

Trimmed views of Docmost API payloads returned by the tools.
"""

from docmost_mcp.schemas.workspace import Workspace, Space, Group
from docmost_mcp.schemas.page import Page, PageRef, SearchResult
from docmost_mcp.schemas.history import HistoryEntry, HistoryDetail

__all__ = [
    "Workspace",
    "Space",
    "Group",
    "Page",
    "PageRef",
    "SearchResult",
    "HistoryEntry",
    "HistoryDetail",
]
