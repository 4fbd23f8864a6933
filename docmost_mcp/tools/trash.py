"""
MCP Tool - trash

Deleted pages of a space.
"""

from fastmcp import FastMCP

from docmost_mcp.services import PageService

router = FastMCP("trash")


@router.tool()
async def trash(space_id: str) -> dict:
    """
    List deleted pages in a space (trash).
    
    Args:
        space_id: ID of the space
    """
    service = PageService()
    pages = await service.get_trash(space_id)
    return {"pages": pages, "count": len(pages)}
