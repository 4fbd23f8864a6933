"""
MCP Tool - restore_page

Restore a page from the trash.
"""

from fastmcp import FastMCP

from docmost_mcp.services import PageService

router = FastMCP("restore_page")


@router.tool()
async def restore_page(page_id: str) -> dict:
    """Restore a deleted page from trash."""
    service = PageService()
    await service.restore_page(page_id)
    return {"success": True, "message": f"Successfully restored page {page_id}"}
