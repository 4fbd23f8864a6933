"""
MCP Tool - update_page

Rename a page.
"""

from fastmcp import FastMCP

from docmost_mcp.services import PageService

router = FastMCP("update_page")


@router.tool()
async def update_page(page_id: str, title: str) -> dict:
    """
    Update a page's title. The page ID and history are preserved.
    
    Args:
        page_id: ID of the page to update
        title: New title
    """
    service = PageService()
    return await service.update_page(page_id, title)
