"""Command-line entry point: etoro-mcp --trading-mode demo"""

import asyncio
import logging
import sys
from typing import Optional, Sequence

from etoro_mcp.gateway import ConfigError, EtoroClient, GatewayConfig
from etoro_mcp.logging_config import configure_logging
from etoro_mcp.settings import load_config
from etoro_mcp.tools import create_server

logger = logging.getLogger(__name__)


async def serve(config: GatewayConfig) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    async with EtoroClient(config) as client:
        mcp = create_server(client)
        await mcp.run_async(transport="stdio")


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging()

    try:
        config = load_config(argv)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    asyncio.run(serve(config))


if __name__ == "__main__":
    main()
