"""MCP tool surface.

Each tool module registers its tools on a FastMCP server and binds them
to a shared EtoroClient.

Example:
    from etoro_mcp.tools import create_server

    mcp = create_server(client)
    await mcp.run_async()
"""

from etoro_mcp.tools.errors import (
    NO_CONTENT_TEXT,
    format_error_message,
    format_tool_response,
    with_error_handling,
)
from etoro_mcp.tools.server import SERVER_NAME, create_server

__all__ = [
    "NO_CONTENT_TEXT",
    "SERVER_NAME",
    "create_server",
    "format_error_message",
    "format_tool_response",
    "with_error_handling",
]
