"""
MCP Tool - get_page

Retrieve full page content by ID.
"""

from fastmcp import FastMCP

from docmost_mcp.services import PageService

router = FastMCP("get_page")


@router.tool()
async def get_page(page_id: str) -> dict:
    """
    Get details and content of a Docmost page.
    
    Fetches live content and converts it to Markdown. Child pages are
    listed under `subpages`.
    
    Args:
        page_id: Page ID or slug ID
        
    Returns:
        Page metadata, Markdown content, and child pages
    """
    service = PageService()
    
    page = await service.get_page(page_id)
    
    if not page:
        return {"error": f"Page {page_id} not found"}
    
    return page
