"""
MCP Tool - list_groups

All user groups in the workspace.
"""

from fastmcp import FastMCP

from docmost_mcp.services import WorkspaceService

router = FastMCP("list_groups")


@router.tool()
async def list_groups() -> dict:
    """List all available groups in Docmost."""
    service = WorkspaceService()
    groups = await service.list_groups()
    return {"groups": groups, "count": len(groups)}
