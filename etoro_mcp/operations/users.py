"""User info operations: profiles, performance, trades, discovery."""

from typing import Any, Literal, Optional

from etoro_mcp.gateway import EtoroClient

Period = Literal[
    "CurrMonth",
    "CurrQuarter",
    "CurrYear",
    "LastYear",
    "LastTwoYears",
    "OneMonthAgo",
    "TwoMonthsAgo",
    "ThreeMonthsAgo",
    "SixMonthsAgo",
    "OneYearAgo",
]


async def get_user_profile(client: EtoroClient, username: str) -> Any:
    return await client.get("/user-info/people", params={"usernames": username})


async def get_user_performance(
    client: EtoroClient, username: str, period: Optional[Period] = None
) -> Any:
    params = {"period": period} if period else None
    return await client.get(f"/user-info/people/{username}/gain", params=params)


async def get_user_trades(client: EtoroClient, username: str, period: Period) -> Any:
    return await client.get(
        f"/user-info/people/{username}/tradeinfo", params={"period": period}
    )


async def get_user_portfolio(client: EtoroClient, username: str) -> Any:
    return await client.get(f"/user-info/people/{username}/portfolio/live")


async def discover_users(
    client: EtoroClient,
    period: Period,
    gain_min: Optional[float] = None,
    gain_max: Optional[float] = None,
    max_daily_risk_score_max: Optional[int] = None,
    max_monthly_risk_score_max: Optional[int] = None,
    popular_investor: Optional[bool] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> Any:
    """Search popular investors; only the filters given are sent."""
    params: dict[str, Any] = {"period": period}
    if gain_min is not None:
        params["gainMin"] = gain_min
    if gain_max is not None:
        params["gainMax"] = gain_max
    if max_daily_risk_score_max is not None:
        params["maxDailyRiskScoreMax"] = max_daily_risk_score_max
    if max_monthly_risk_score_max is not None:
        params["maxMonthlyRiskScoreMax"] = max_monthly_risk_score_max
    if popular_investor is not None:
        params["popularInvestor"] = "true" if popular_investor else "false"
    if page:
        params["page"] = page
    if page_size:
        params["pageSize"] = page_size
    return await client.get("/user-info/people/search", params=params)
