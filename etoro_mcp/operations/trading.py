"""Trading operations.

Order placement and position management through the mode-routed
trading namespaces, plus portfolio reads.
"""

import logging
from typing import Any, Optional

from etoro_mcp.gateway import EtoroClient, PositionNotFoundError
from etoro_mcp.normalizers import PortfolioView, normalize_portfolio

logger = logging.getLogger(__name__)


def _order_body(
    instrument_id: int,
    is_buy: bool,
    leverage: Optional[float],
    stop_loss_rate: Optional[float],
    take_profit_rate: Optional[float],
    **sizing: Any,
) -> dict[str, Any]:
    body: dict[str, Any] = {"InstrumentID": instrument_id, **sizing, "IsBuy": is_buy}
    body["Leverage"] = leverage if leverage is not None else 1
    if stop_loss_rate is not None:
        body["StopLossRate"] = stop_loss_rate
    if take_profit_rate is not None:
        body["TakeProfitRate"] = take_profit_rate
    return body


async def get_portfolio(client: EtoroClient) -> PortfolioView:
    """Current portfolio snapshot for the configured mode."""
    data = await client.get(client.info_path("/portfolio"))
    return normalize_portfolio(data)


async def open_position_by_amount(
    client: EtoroClient,
    instrument_id: int,
    amount: float,
    is_buy: bool,
    leverage: Optional[float] = None,
    stop_loss_rate: Optional[float] = None,
    take_profit_rate: Optional[float] = None,
) -> Any:
    body = _order_body(
        instrument_id, is_buy, leverage, stop_loss_rate, take_profit_rate,
        Amount=amount,
    )
    return await client.post(client.execution_path("/market-open-orders/by-amount"), body)


async def open_position_by_units(
    client: EtoroClient,
    instrument_id: int,
    units: float,
    is_buy: bool,
    leverage: Optional[float] = None,
    stop_loss_rate: Optional[float] = None,
    take_profit_rate: Optional[float] = None,
) -> Any:
    body = _order_body(
        instrument_id, is_buy, leverage, stop_loss_rate, take_profit_rate,
        AmountInUnits=units,
    )
    return await client.post(client.execution_path("/market-open-orders/by-units"), body)


async def place_limit_order(
    client: EtoroClient,
    instrument_id: int,
    amount: float,
    is_buy: bool,
    rate: float,
    leverage: Optional[float] = None,
    stop_loss_rate: Optional[float] = None,
    take_profit_rate: Optional[float] = None,
) -> Any:
    body = _order_body(
        instrument_id, is_buy, leverage, stop_loss_rate, take_profit_rate,
        Amount=amount, Rate=rate,
    )
    return await client.post(client.execution_path("/limit-orders"), body)


async def cancel_order(client: EtoroClient, order_id: int) -> Any:
    return await client.delete(client.execution_path(f"/market-open-orders/{order_id}"))


async def close_position(
    client: EtoroClient,
    position_id: int,
    instrument_id: Optional[int] = None,
    units_to_deduct: Optional[float] = None,
) -> Any:
    """Close a position, fully or by a number of units.

    Without an instrument id, the position is looked up in the current
    portfolio first. That read and the close request are two separate
    exchanges: the upstream API offers no combined operation, so the
    position may change or disappear in between, in which case the close
    request fails upstream and surfaces as an ApiError.

    Raises:
        PositionNotFoundError: The position is absent from the snapshot.
            No close request is sent.
    """
    if instrument_id is None:
        portfolio = await get_portfolio(client)
        position = portfolio.find_position(position_id)
        if position is None:
            raise PositionNotFoundError(position_id)
        instrument_id = position.instrument_id
        logger.info(f"Resolved position {position_id} to instrument {instrument_id}")

    return await client.post(
        client.execution_path(f"/market-close-orders/positions/{position_id}"),
        {"InstrumentID": instrument_id, "UnitsToDeduct": units_to_deduct},
    )
