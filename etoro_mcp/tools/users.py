"""User info tools."""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from etoro_mcp.gateway import EtoroClient
from etoro_mcp.operations import users
from etoro_mcp.operations.users import Period
from etoro_mcp.tools.errors import format_tool_response, with_error_handling


def register_users_tools(mcp: FastMCP, client: EtoroClient) -> None:

    @mcp.tool()
    @with_error_handling
    async def get_user_profile(
        username: Annotated[str, Field(description="eToro username")],
    ) -> str:
        """Get a user's public profile information"""
        return format_tool_response(await users.get_user_profile(client, username))

    @mcp.tool()
    @with_error_handling
    async def get_user_performance(
        username: Annotated[str, Field(description="eToro username")],
    ) -> str:
        """Get a user's trading performance summary (returns, risk score, etc.)"""
        return format_tool_response(await users.get_user_performance(client, username))

    @mcp.tool()
    @with_error_handling
    async def get_user_performance_granular(
        username: Annotated[str, Field(description="eToro username")],
        period: Annotated[Period, Field(description="Performance period")],
    ) -> str:
        """Get detailed/granular performance data for a user over a period"""
        return format_tool_response(
            await users.get_user_performance(client, username, period=period)
        )

    @mcp.tool()
    @with_error_handling
    async def get_user_trades(
        username: Annotated[str, Field(description="eToro username")],
        period: Annotated[Period, Field(description="Period to retrieve trades for")],
    ) -> str:
        """Get a user's trade info for a specific period"""
        return format_tool_response(await users.get_user_trades(client, username, period))

    @mcp.tool()
    @with_error_handling
    async def get_user_portfolio(
        username: Annotated[str, Field(description="eToro username")],
    ) -> str:
        """Get a user's live public portfolio holdings"""
        return format_tool_response(await users.get_user_portfolio(client, username))

    @mcp.tool()
    @with_error_handling
    async def discover_users(
        period: Annotated[Period, Field(description="Performance period to filter by")],
        gainMin: Annotated[Optional[float], Field(description="Minimum gain percentage")] = None,
        gainMax: Annotated[Optional[float], Field(description="Maximum gain percentage")] = None,
        maxDailyRiskScoreMax: Annotated[Optional[int], Field(description="Max daily risk score")] = None,
        maxMonthlyRiskScoreMax: Annotated[Optional[int], Field(description="Max monthly risk score")] = None,
        popularInvestor: Annotated[Optional[bool], Field(description="Filter to popular investors only")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
        pageSize: Annotated[Optional[int], Field(description="Results per page (default 20)")] = None,
    ) -> str:
        """Discover popular investors and traders on eToro (filterable)"""
        data = await users.discover_users(
            client,
            period,
            gain_min=gainMin,
            gain_max=gainMax,
            max_daily_risk_score_max=maxDailyRiskScoreMax,
            max_monthly_risk_score_max=maxMonthlyRiskScoreMax,
            popular_investor=popularInvestor,
            page=page,
            page_size=pageSize,
        )
        return format_tool_response(data)
