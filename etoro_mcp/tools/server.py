"""MCP server assembly."""

import logging

from fastmcp import FastMCP

from etoro_mcp.gateway import EtoroClient
from etoro_mcp.tools.feeds import register_feeds_tools
from etoro_mcp.tools.market_data import register_market_data_tools
from etoro_mcp.tools.trading import register_trading_tools
from etoro_mcp.tools.users import register_users_tools
from etoro_mcp.tools.watchlists import register_watchlists_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "etoro-mcp"

INSTRUCTIONS = (
    "Tools for the eToro public API: market data, trading, social feeds, "
    "watchlists and user info. Trading tools act on the demo or real account "
    "selected when the server was started."
)


def create_server(client: EtoroClient) -> FastMCP:
    """Build the MCP server with every eToro tool bound to ``client``."""
    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)

    register_market_data_tools(mcp, client)
    register_trading_tools(mcp, client)
    register_feeds_tools(mcp, client)
    register_watchlists_tools(mcp, client)
    register_users_tools(mcp, client)

    logger.info(f"MCP server ready (mode={client.trading_mode.value})")
    return mcp
