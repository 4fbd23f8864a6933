"""
Tools Module - MCP Tool Implementations

All MCP tools for Docmost interaction.
"""

from docmost_mcp.tools import get_workspace
from docmost_mcp.tools import list_spaces
from docmost_mcp.tools import list_groups
from docmost_mcp.tools import list_pages
from docmost_mcp.tools import get_page
from docmost_mcp.tools import create_page
from docmost_mcp.tools import update_page
from docmost_mcp.tools import move_page
from docmost_mcp.tools import delete_page
from docmost_mcp.tools import delete_pages
from docmost_mcp.tools import search
from docmost_mcp.tools import page_history
from docmost_mcp.tools import page_history_detail
from docmost_mcp.tools import restore_page
from docmost_mcp.tools import trash
from docmost_mcp.tools import duplicate_page
from docmost_mcp.tools import breadcrumbs

__all__ = [
    "get_workspace",
    "list_spaces",
    "list_groups",
    "list_pages",
    "get_page",
    "create_page",
    "update_page",
    "move_page",
    "delete_page",
    "delete_pages",
    "search",
    "page_history",
    "page_history_detail",
    "restore_page",
    "trash",
    "duplicate_page",
    "breadcrumbs",
]
