"""
MCP Tool - page_history_detail

Content of one page version.
"""

from fastmcp import FastMCP

from docmost_mcp.services import HistoryService

router = FastMCP("page_history_detail")


@router.tool()
async def page_history_detail(history_id: str) -> dict:
    """
    Get the content of a specific page version from history.
    
    Args:
        history_id: ID of the history entry
        
    Returns:
        Version metadata and Markdown content
    """
    service = HistoryService()
    return await service.get_history_detail(history_id)
