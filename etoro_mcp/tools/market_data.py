"""Market data tools."""

from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from etoro_mcp.gateway import EtoroClient
from etoro_mcp.operations import market_data
from etoro_mcp.tools.errors import format_tool_response, with_error_handling

CandlePeriod = Literal[
    "OneMinute",
    "FiveMinutes",
    "TenMinutes",
    "FifteenMinutes",
    "ThirtyMinutes",
    "OneHour",
    "FourHours",
    "OneDay",
    "OneWeek",
]


def register_market_data_tools(mcp: FastMCP, client: EtoroClient) -> None:

    @mcp.tool()
    @with_error_handling
    async def search_instruments(
        query: Annotated[str, Field(description="Search keyword (e.g. 'AAPL', 'Bitcoin', 'Tesla')")],
        exactSymbol: Annotated[Optional[bool], Field(description="If true, search by exact ticker symbol (e.g. 'AAPL') instead of free text")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
        pageSize: Annotated[Optional[int], Field(description="Results per page (default 10)")] = None,
    ) -> str:
        """Search for eToro instruments by keyword (stocks, crypto, ETFs, etc.)"""
        view = await market_data.search_instruments(
            client, query, exact_symbol=bool(exactSymbol), page=page, page_size=pageSize
        )
        return format_tool_response(view.to_dict())

    @mcp.tool()
    @with_error_handling
    async def get_instruments(
        instrumentIds: Annotated[list[int], Field(description="Array of instrument IDs")],
    ) -> str:
        """Get details for one or more instruments by their IDs"""
        return format_tool_response(await market_data.get_instruments(client, instrumentIds))

    @mcp.tool()
    @with_error_handling
    async def get_instrument_types() -> str:
        """Get all available instrument types (stocks, crypto, ETFs, etc.)"""
        return format_tool_response(await market_data.get_instrument_types(client))

    @mcp.tool()
    @with_error_handling
    async def get_industries() -> str:
        """Get all available industry classifications for instruments"""
        return format_tool_response(await market_data.get_industries(client))

    @mcp.tool()
    @with_error_handling
    async def get_exchanges() -> str:
        """Get all available stock exchanges"""
        return format_tool_response(await market_data.get_exchanges(client))

    @mcp.tool()
    @with_error_handling
    async def get_candles(
        instrumentId: Annotated[int, Field(description="Instrument ID")],
        period: Annotated[CandlePeriod, Field(description="Candle period")],
        count: Annotated[Optional[int], Field(description="Number of candles to return (max 1000, default 10)")] = None,
        direction: Annotated[Optional[Literal["asc", "desc"]], Field(description="Sort direction: 'asc' (oldest first) or 'desc' (newest first). Default: desc")] = None,
    ) -> str:
        """Get OHLCV candle data for an instrument"""
        data = await market_data.get_candles(
            client, instrumentId, period, count=count, direction=direction
        )
        return format_tool_response(data)

    @mcp.tool()
    @with_error_handling
    async def get_closing_prices() -> str:
        """Get historical closing prices for all instruments"""
        return format_tool_response(await market_data.get_closing_prices(client))

    @mcp.tool()
    @with_error_handling
    async def get_rates(
        instrumentIds: Annotated[list[int], Field(description="Array of instrument IDs (max 100)")],
    ) -> str:
        """Get live bid/ask rates for instruments"""
        return format_tool_response(await market_data.get_rates(client, instrumentIds))
