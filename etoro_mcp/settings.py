"""Centralized settings for the eToro MCP server.

Uses pydantic-settings to load from environment variables (prefixed
ETORO_) and an optional .env file. Command-line flags take precedence
over the environment.
"""

import argparse
import logging
from typing import Optional, Sequence

from pydantic_settings import BaseSettings

from etoro_mcp.gateway import DEFAULT_BASE_URL, GatewayConfig, TradingMode

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """eToro MCP settings loaded from environment variables."""

    # --- Credentials ---
    api_key: str = ""
    user_key: str = ""

    # --- Gateway ---
    trading_mode: str = TradingMode.DEMO.value
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0

    model_config = {
        "env_prefix": "ETORO_",
        "env_file": ".env",
        "extra": "ignore",
    }


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="etoro-mcp",
        description="eToro MCP server - exposes the eToro public API as MCP tools over stdio",
    )
    parser.add_argument(
        "--api-key", default=None,
        help="eToro API key (env: ETORO_API_KEY)"
    )
    parser.add_argument(
        "--user-key", default=None,
        help="eToro user key (env: ETORO_USER_KEY)"
    )
    parser.add_argument(
        "--trading-mode", default=None,
        help='Trading environment, "demo" or "real" (env: ETORO_TRADING_MODE, default: demo)'
    )
    return parser


def load_config(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
) -> GatewayConfig:
    """Resolve the gateway configuration from CLI flags and environment.

    Raises:
        ConfigError: if the trading mode is neither "demo" nor "real".
    """
    args = build_arg_parser().parse_args(argv)
    settings = settings or Settings()

    # Empty values count as unset at every level.
    api_key = args.api_key or settings.api_key
    user_key = args.user_key or settings.user_key
    raw_mode = args.trading_mode or settings.trading_mode or TradingMode.DEMO.value

    trading_mode = TradingMode.parse(raw_mode)

    if not api_key:
        logger.warning("ETORO_API_KEY not set. API calls will likely fail.")
    if not user_key:
        logger.warning("ETORO_USER_KEY not set. API calls will likely fail.")

    logger.info(f"eToro MCP server starting in {trading_mode.value.upper()} mode")

    return GatewayConfig(
        api_key=api_key,
        user_key=user_key,
        trading_mode=trading_mode,
        base_url=settings.base_url,
        request_timeout=settings.request_timeout,
    )
