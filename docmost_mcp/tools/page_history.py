"""
MCP Tool - page_history

Version history of a page.
"""

from fastmcp import FastMCP
from typing import Optional

from docmost_mcp.services import HistoryService

router = FastMCP("page_history")


@router.tool()
async def page_history(page_id: str, cursor: Optional[str] = None) -> dict:
    """
    Get the version history of a page.
    
    Uses cursor-based pagination: pass the returned cursor to get the
    next batch.
    
    Args:
        page_id: ID of the page
        cursor: Cursor for next page of results
        
    Returns:
        Versions with metadata and the next cursor
    """
    service = HistoryService()
    return await service.get_page_history(page_id, cursor)
