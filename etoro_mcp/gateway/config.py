"""Gateway Configuration.

Operating mode and connection settings for the eToro public API.
"""

from dataclasses import dataclass
from enum import Enum

from etoro_mcp.gateway.exceptions import ConfigError

DEFAULT_BASE_URL = "https://public-api.etoro.com/api/v1"


class TradingMode(str, Enum):
    """eToro trading environment."""
    DEMO = "demo"
    REAL = "real"

    @classmethod
    def parse(cls, value: str) -> "TradingMode":
        """Parse a mode string, raising ConfigError on anything else."""
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(
                f'Invalid trading mode: {value}. Must be "demo" or "real".'
            ) from None


@dataclass(frozen=True)
class GatewayConfig:
    """Immutable connection settings, fixed for the process lifetime."""
    api_key: str = ""
    user_key: str = ""
    trading_mode: TradingMode = TradingMode.DEMO
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0
