"""
MCP Tool - list_pages

Recently updated pages.
"""

from fastmcp import FastMCP
from typing import Optional

from docmost_mcp.services import PageService

router = FastMCP("list_pages")


@router.tool()
async def list_pages(space_id: Optional[str] = None) -> dict:
    """
    List pages ordered by last update (newest first).
    
    Args:
        space_id: Optional space ID to restrict the listing to
        
    Returns:
        Page metadata (without content)
    """
    service = PageService()
    pages = await service.list_pages(space_id)
    return {"pages": pages, "count": len(pages)}
