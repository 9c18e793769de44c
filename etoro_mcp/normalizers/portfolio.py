"""Portfolio Normalization.

Reduces the trading-info portfolio payload to balances, a fixed
projection of each open position, and the pending orders.
"""

from dataclasses import dataclass
from typing import Any, Optional

from etoro_mcp.normalizers._fields import as_dict, as_list

# Position fields kept from upstream, in output order.
POSITION_FIELDS = (
    "positionID",
    "instrumentID",
    "isBuy",
    "amount",
    "units",
    "leverage",
    "openRate",
    "openDateTime",
    "stopLossRate",
    "takeProfitRate",
)

# Order collections that count as pending, concatenated in this order.
# ordersForClose and mirrors are left out on purpose.
PENDING_ORDER_COLLECTIONS = ("orders", "stockOrders", "entryOrders", "ordersForOpen")


@dataclass(frozen=True)
class PortfolioPosition:
    """An open position; fields missing upstream stay None."""
    position_id: Any = None
    instrument_id: Any = None
    is_buy: Optional[bool] = None
    amount: Optional[float] = None
    units: Optional[float] = None
    leverage: Optional[float] = None
    open_rate: Optional[float] = None
    open_date_time: Optional[str] = None
    stop_loss_rate: Optional[float] = None
    take_profit_rate: Optional[float] = None

    @classmethod
    def from_api(cls, data: Any) -> "PortfolioPosition":
        data = as_dict(data)
        return cls(
            position_id=data.get("positionID"),
            instrument_id=data.get("instrumentID"),
            is_buy=data.get("isBuy"),
            amount=data.get("amount"),
            units=data.get("units"),
            leverage=data.get("leverage"),
            open_rate=data.get("openRate"),
            open_date_time=data.get("openDateTime"),
            stop_loss_rate=data.get("stopLossRate"),
            take_profit_rate=data.get("takeProfitRate"),
        )

    def to_dict(self) -> dict:
        values = (
            self.position_id,
            self.instrument_id,
            self.is_buy,
            self.amount,
            self.units,
            self.leverage,
            self.open_rate,
            self.open_date_time,
            self.stop_loss_rate,
            self.take_profit_rate,
        )
        return dict(zip(POSITION_FIELDS, values))


@dataclass(frozen=True)
class PortfolioView:
    credit: Optional[float] = None
    bonus_credit: Optional[float] = None
    positions: tuple[PortfolioPosition, ...] = ()
    pending_orders: tuple[Any, ...] = ()

    @property
    def position_count(self) -> int:
        return len(self.positions)

    @classmethod
    def from_api(cls, data: Any) -> "PortfolioView":
        portfolio = as_dict(as_dict(data).get("clientPortfolio"))
        pending: list[Any] = []
        for key in PENDING_ORDER_COLLECTIONS:
            pending.extend(as_list(portfolio.get(key)))
        return cls(
            credit=portfolio.get("credit"),
            bonus_credit=portfolio.get("bonusCredit"),
            positions=tuple(
                PortfolioPosition.from_api(p) for p in as_list(portfolio.get("positions"))
            ),
            pending_orders=tuple(pending),
        )

    def find_position(self, position_id: int) -> Optional[PortfolioPosition]:
        """The position with this id in this snapshot, if any."""
        for position in self.positions:
            if position.position_id == position_id:
                return position
        return None

    def summary_dict(self) -> dict:
        """Balances and positions, without pending orders."""
        return {
            "credit": self.credit,
            "bonusCredit": self.bonus_credit,
            "positionCount": self.position_count,
            "positions": [p.to_dict() for p in self.positions],
        }

    def to_dict(self) -> dict:
        result = self.summary_dict()
        result["pendingOrders"] = list(self.pending_orders)
        return result


def normalize_portfolio(data: Any) -> PortfolioView:
    """Normalize a /trading/info[/demo]/portfolio response."""
    return PortfolioView.from_api(data)
