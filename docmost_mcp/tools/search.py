"""
MCP Tool - search

Full-text search across pages.
"""

from fastmcp import FastMCP
from typing import Optional

from docmost_mcp.services import PageService

router = FastMCP("search")


@router.tool()
async def search(query: str, space_id: Optional[str] = None) -> dict:
    """
    Search for pages and content.
    
    Args:
        query: Search query
        space_id: Optional space ID to filter by
        
    Returns:
        Matching pages with rank and highlighted snippet
    """
    service = PageService()
    results = await service.search(query, space_id)
    return {
        "results": results,
        "count": len(results),
        "query": query,
    }
