"""Trading tools. Execution and portfolio paths follow the configured mode."""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from etoro_mcp.gateway import EtoroClient
from etoro_mcp.operations import trading
from etoro_mcp.tools.errors import format_tool_response, with_error_handling


def register_trading_tools(mcp: FastMCP, client: EtoroClient) -> None:

    @mcp.tool()
    @with_error_handling
    async def open_position_by_amount(
        instrumentId: Annotated[int, Field(description="Instrument ID to trade")],
        amount: Annotated[float, Field(description="Investment amount in USD")],
        isBuy: Annotated[bool, Field(description="true = Buy/Long, false = Sell/Short")],
        leverage: Annotated[Optional[float], Field(description="Leverage multiplier (e.g. 1, 2, 5, 10)")] = None,
        stopLossRate: Annotated[Optional[float], Field(description="Stop loss price")] = None,
        takeProfitRate: Annotated[Optional[float], Field(description="Take profit price")] = None,
    ) -> str:
        """Open a new position by specifying the investment amount in USD"""
        data = await trading.open_position_by_amount(
            client, instrumentId, amount, isBuy,
            leverage=leverage, stop_loss_rate=stopLossRate, take_profit_rate=takeProfitRate,
        )
        return format_tool_response(data)

    @mcp.tool()
    @with_error_handling
    async def open_position_by_units(
        instrumentId: Annotated[int, Field(description="Instrument ID to trade")],
        units: Annotated[float, Field(description="Number of units to buy/sell")],
        isBuy: Annotated[bool, Field(description="true = Buy/Long, false = Sell/Short")],
        leverage: Annotated[Optional[float], Field(description="Leverage multiplier")] = None,
        stopLossRate: Annotated[Optional[float], Field(description="Stop loss price")] = None,
        takeProfitRate: Annotated[Optional[float], Field(description="Take profit price")] = None,
    ) -> str:
        """Open a new position by specifying the number of units (shares, coins, etc.)"""
        data = await trading.open_position_by_units(
            client, instrumentId, units, isBuy,
            leverage=leverage, stop_loss_rate=stopLossRate, take_profit_rate=takeProfitRate,
        )
        return format_tool_response(data)

    @mcp.tool()
    @with_error_handling
    async def close_position(
        positionId: Annotated[int, Field(description="The position ID to close")],
        instrumentId: Annotated[Optional[int], Field(description="The instrument ID of the position (if omitted, will be looked up from portfolio)")] = None,
        unitsToDeduct: Annotated[Optional[float], Field(description="Units to close for a partial close (omit to close the whole position)")] = None,
    ) -> str:
        """Close an open position by its position ID, fully or partially"""
        data = await trading.close_position(
            client, positionId, instrument_id=instrumentId, units_to_deduct=unitsToDeduct
        )
        return format_tool_response(data)

    @mcp.tool()
    @with_error_handling
    async def place_limit_order(
        instrumentId: Annotated[int, Field(description="Instrument ID")],
        amount: Annotated[float, Field(description="Investment amount in USD")],
        isBuy: Annotated[bool, Field(description="true = Buy/Long, false = Sell/Short")],
        rate: Annotated[float, Field(description="Limit price at which the order should execute")],
        leverage: Annotated[Optional[float], Field(description="Leverage multiplier")] = None,
        stopLossRate: Annotated[Optional[float], Field(description="Stop loss price")] = None,
        takeProfitRate: Annotated[Optional[float], Field(description="Take profit price")] = None,
    ) -> str:
        """Place a limit/entry order at a specified price"""
        data = await trading.place_limit_order(
            client, instrumentId, amount, isBuy, rate,
            leverage=leverage, stop_loss_rate=stopLossRate, take_profit_rate=takeProfitRate,
        )
        return format_tool_response(data)

    @mcp.tool()
    @with_error_handling
    async def cancel_order(
        orderId: Annotated[int, Field(description="The order ID to cancel")],
    ) -> str:
        """Cancel a pending order by its order ID"""
        return format_tool_response(await trading.cancel_order(client, orderId))

    @mcp.tool()
    @with_error_handling
    async def get_orders() -> str:
        """Get all pending orders for the current user"""
        portfolio = await trading.get_portfolio(client)
        return format_tool_response(list(portfolio.pending_orders))

    @mcp.tool()
    @with_error_handling
    async def get_portfolio() -> str:
        """Get the current user's portfolio (all open positions)"""
        portfolio = await trading.get_portfolio(client)
        return format_tool_response(portfolio.summary_dict())
