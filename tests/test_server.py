"""
Tests for MCP application wiring.
"""

import pytest

from docmost_mcp.server import create_app


EXPECTED_TOOLS = {
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
}


class TestCreateApp:
    """Tests for create_app."""
    
    @pytest.mark.asyncio
    async def test_all_tools_registered(self):
        mcp = create_app()
        
        tools = await mcp.get_tools()
        
        assert EXPECTED_TOOLS <= set(tools)
