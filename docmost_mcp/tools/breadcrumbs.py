"""
MCP Tool - breadcrumbs

Path from the space root to a page.
"""

from fastmcp import FastMCP

from docmost_mcp.services import PageService

router = FastMCP("breadcrumbs")


@router.tool()
async def breadcrumbs(page_id: str) -> dict:
    """
    Get the breadcrumb path from root to a page.
    
    Useful for understanding page hierarchy.
    
    Args:
        page_id: ID of the page
    """
    service = PageService()
    path = await service.get_breadcrumbs(page_id)
    return {"breadcrumbs": path}
