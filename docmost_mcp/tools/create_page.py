"""
MCP Tool - create_page

Create a page from Markdown.
"""

from fastmcp import FastMCP
from typing import Optional

from docmost_mcp.services import PageService

router = FastMCP("create_page")


@router.tool()
async def create_page(
    title: str,
    content: str,
    space_id: str,
    parent_page_id: Optional[str] = None,
) -> dict:
    """
    Create a new page with content.
    
    The page is moved under the parent automatically when one is given.
    
    Args:
        title: Title of the page
        content: Markdown content
        space_id: Space to create the page in
        parent_page_id: Optional parent page ID to nest under
        
    Returns:
        The created page with its content
    """
    service = PageService()
    
    try:
        page = await service.create_page(
            title=title,
            content=content,
            space_id=space_id,
            parent_page_id=parent_page_id,
        )
    except ValueError as e:
        return {"error": str(e)}
    
    return page or {"error": "Page was created but could not be read back"}
