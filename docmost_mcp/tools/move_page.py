"""
MCP Tool - move_page

Move a page within the hierarchy.
"""

from fastmcp import FastMCP
from typing import Optional

from docmost_mcp.services import PageService

router = FastMCP("move_page")


@router.tool()
async def move_page(
    page_id: str,
    parent_page_id: Optional[str] = None,
    position: Optional[str] = None,
) -> dict:
    """
    Move a page to a new parent (nesting) or to the space root.
    
    Args:
        page_id: Page to move
        parent_page_id: Target parent page ID. Omit, or pass "" or "null",
            to move to the root.
        position: Optional position string (5-12 chars). Defaults to the end.
    """
    service = PageService()
    
    parent = None if parent_page_id in (None, "", "null") else parent_page_id
    
    try:
        await service.move_page(page_id, parent, position)
    except ValueError as e:
        return {"error": str(e)}
    
    return {
        "success": True,
        "message": f"Successfully moved page {page_id} to parent {parent or 'root'}",
    }
