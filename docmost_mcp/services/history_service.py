"""
Services - History Service

Page version history with converted content.
"""

from typing import Any, Dict, Optional

from docmost_mcp.config import get_settings
from docmost_mcp.client import DocmostClient
from docmost_mcp.converter import convert
from docmost_mcp.schemas import HistoryEntry, HistoryDetail
from docmost_mcp.services.cache_service import shared_cache


class HistoryService:
    """Reads the version history of pages."""
    
    def __init__(self, settings=None, client=None, cache=None):
        self.settings = settings or get_settings()
        self.client = client or DocmostClient(self.settings)
        self.cache = cache or shared_cache()
    
    async def get_page_history(
        self,
        page_id: str,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List versions of a page, newest first.
        
        Args:
            page_id: Page ID
            cursor: Cursor from a previous call, for the next batch
            
        Returns:
            {"items": [...], "cursor": next cursor or None}
        """
        data = await self.client.get_page_history(page_id, cursor)
        return {
            "items": [HistoryEntry.from_api(e).to_dict() for e in data.get("items") or []],
            "cursor": data.get("cursor") or None,
        }
    
    async def get_history_detail(self, history_id: str) -> Dict[str, Any]:
        """
        Get one version with its content converted to Markdown.
        
        History entries are immutable, so results are cached by ID.
        """
        cache_key = f"history:{history_id}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached
        
        entry = await self.client.get_history_info(history_id)
        content = convert(entry["content"]) if entry.get("content") else ""
        result = HistoryDetail.from_api(entry, content=content).to_dict()
        
        self.cache.set(cache_key, result)
        return result
