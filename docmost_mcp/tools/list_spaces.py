"""
MCP Tool - list_spaces

All spaces in the workspace.
"""

from fastmcp import FastMCP

from docmost_mcp.services import WorkspaceService

router = FastMCP("list_spaces")


@router.tool()
async def list_spaces() -> dict:
    """
    List all available spaces in Docmost.
    
    Returns:
        Spaces with ID, name, slug and visibility
    """
    service = WorkspaceService()
    spaces = await service.list_spaces()
    return {"spaces": spaces, "count": len(spaces)}
