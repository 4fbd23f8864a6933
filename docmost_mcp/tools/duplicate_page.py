"""
MCP Tool - duplicate_page

Copy a page.
"""

from fastmcp import FastMCP
from typing import Optional

from docmost_mcp.services import PageService

router = FastMCP("duplicate_page")


@router.tool()
async def duplicate_page(page_id: str, space_id: Optional[str] = None) -> dict:
    """
    Duplicate a page. Optionally specify a target space.
    
    Args:
        page_id: ID of the page to duplicate
        space_id: Optional target space ID (defaults to same space)
        
    Returns:
        The new page
    """
    service = PageService()
    return await service.duplicate_page(page_id, space_id)
