"""
MCP Tool - delete_page

Delete a single page.
"""

from fastmcp import FastMCP

from docmost_mcp.services import PageService

router = FastMCP("delete_page")


@router.tool()
async def delete_page(page_id: str) -> dict:
    """
    Delete a single page by ID (it goes to the trash).
    
    Args:
        page_id: Page to delete
    """
    service = PageService()
    await service.delete_page(page_id)
    return {"success": True, "message": f"Successfully deleted page {page_id}"}
