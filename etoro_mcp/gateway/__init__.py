"""eToro API Gateway.

Authenticated request construction, demo/real routing, and outcome
classification for the eToro public REST API.

Example:
    from etoro_mcp.gateway import EtoroClient, GatewayConfig, TradingMode

    config = GatewayConfig(
        api_key="YOUR_API_KEY",
        user_key="YOUR_USER_KEY",
        trading_mode=TradingMode.DEMO,
    )
    async with EtoroClient(config) as client:
        portfolio = await client.get(client.info_path("/portfolio"))
"""

from etoro_mcp.gateway.client import EtoroClient
from etoro_mcp.gateway.config import DEFAULT_BASE_URL, GatewayConfig, TradingMode
from etoro_mcp.gateway.exceptions import (
    ApiError,
    ConfigError,
    ErrorCode,
    EtoroError,
    NotFoundError,
    PositionNotFoundError,
    TransportError,
    UserNotFoundError,
)

__all__ = [
    # Client
    "EtoroClient",
    # Config
    "DEFAULT_BASE_URL",
    "GatewayConfig",
    "TradingMode",
    # Exceptions
    "ApiError",
    "ConfigError",
    "ErrorCode",
    "EtoroError",
    "NotFoundError",
    "PositionNotFoundError",
    "TransportError",
    "UserNotFoundError",
]
