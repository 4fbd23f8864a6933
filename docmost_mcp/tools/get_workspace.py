"""
MCP Tool - get_workspace

Current workspace information.
"""

from fastmcp import FastMCP

from docmost_mcp.services import WorkspaceService

router = FastMCP("get_workspace")


@router.tool()
async def get_workspace() -> dict:
    """
    Get the current Docmost workspace.
    
    Returns:
        Workspace name, description and default space
    """
    service = WorkspaceService()
    return await service.get_workspace()
