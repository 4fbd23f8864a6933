"""
MCP Tool - delete_pages

Bulk page deletion.
"""

from fastmcp import FastMCP
from typing import List

from docmost_mcp.services import PageService

router = FastMCP("delete_pages")


@router.tool()
async def delete_pages(page_ids: List[str]) -> dict:
    """
    Delete multiple pages at once. Useful for cleanup.
    
    Args:
        page_ids: Pages to delete
        
    Returns:
        Per-page success flags; failures carry an error message
    """
    service = PageService()
    results = await service.delete_pages(page_ids)
    return {
        "results": results,
        "deleted": sum(1 for r in results if r["success"]),
        "failed": sum(1 for r in results if not r["success"]),
    }
