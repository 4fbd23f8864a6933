"""
Services Module - Business Logic Layer

Provides services for the workspace directory, pages, history, and caching.
"""

from docmost_mcp.services.workspace_service import WorkspaceService
from docmost_mcp.services.page_service import PageService
from docmost_mcp.services.history_service import HistoryService
from docmost_mcp.services.cache_service import CacheService, shared_cache

__all__ = [
    "WorkspaceService",
    "PageService",
    "HistoryService",
    "CacheService",
    "shared_cache",
]
