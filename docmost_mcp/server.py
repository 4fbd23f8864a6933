"""
Docmost MCP Server - Main Entry Point

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
from fastmcp import FastMCP

from docmost_mcp.config import get_settings

# Import tools (registered with decorators)
from docmost_mcp.tools import (
    get_workspace,
    list_spaces,
    list_groups,
    list_pages,
    get_page,
    create_page,
    update_page,
    move_page,
    delete_page,
    delete_pages,
    search,
    page_history,
    page_history_detail,
    restore_page,
    trash,
    duplicate_page,
    breadcrumbs,
)

TOOL_MODULES = [
    get_workspace,
    list_spaces,
    list_groups,
    list_pages,
    get_page,
    create_page,
    update_page,
    move_page,
    delete_page,
    delete_pages,
    search,
    page_history,
    page_history_detail,
    restore_page,
    trash,
    duplicate_page,
    breadcrumbs,
]


def create_app() -> FastMCP:
    """Create and configure the MCP application."""
    mcp = FastMCP(
        name="docmost-mcp",
        instructions="Read, search and organize Docmost pages. Page content is returned as Markdown.",
    )
    
    # Register all tools
    for module in TOOL_MODULES:
        mcp.mount(module.router)
    
    return mcp


def configure_logging(level: str) -> None:
    """Log to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Docmost MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    args = parser.parse_args()
    
    settings = get_settings()
    configure_logging(settings.log.level)
    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port
    
    mcp = create_app()
    
    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
