"""Watchlist Normalization."""

from dataclasses import dataclass
from typing import Any, Optional

from etoro_mcp.normalizers._fields import as_dict, as_list, as_optional_str


@dataclass(frozen=True)
class WatchlistItemView:
    """A watched instrument; every other upstream item field is dropped."""
    instrument_id: Any = None
    symbol: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "WatchlistItemView":
        data = as_dict(data)
        market = as_dict(data.get("market"))
        return cls(
            instrument_id=data.get("itemId"),
            symbol=as_optional_str(market.get("symbolName")),
            display_name=as_optional_str(market.get("displayName")),
        )

    def to_dict(self) -> dict:
        return {
            "instrumentId": self.instrument_id,
            "symbol": self.symbol,
            "displayName": self.display_name,
        }


@dataclass(frozen=True)
class WatchlistView:
    watchlist_id: Any = None
    name: Optional[str] = None
    type: Optional[str] = None
    total_items: Optional[int] = None
    is_default: Optional[bool] = None
    items: tuple[WatchlistItemView, ...] = ()

    @classmethod
    def from_api(cls, data: Any) -> "WatchlistView":
        data = as_dict(data)
        return cls(
            watchlist_id=data.get("watchlistId"),
            name=as_optional_str(data.get("name")),
            type=as_optional_str(data.get("watchlistType")),
            total_items=data.get("totalItems"),
            is_default=data.get("isDefault"),
            items=tuple(WatchlistItemView.from_api(i) for i in as_list(data.get("items"))),
        )

    def to_dict(self) -> dict:
        return {
            "watchlistId": self.watchlist_id,
            "name": self.name,
            "type": self.type,
            "totalItems": self.total_items,
            "isDefault": self.is_default,
            "items": [i.to_dict() for i in self.items],
        }


@dataclass(frozen=True)
class WatchlistsView:
    watchlists: tuple[WatchlistView, ...] = ()

    @classmethod
    def from_api(cls, data: Any) -> "WatchlistsView":
        return cls(
            watchlists=tuple(
                WatchlistView.from_api(w) for w in as_list(as_dict(data).get("watchlists"))
            ),
        )

    def to_dict(self) -> dict:
        return {"watchlists": [w.to_dict() for w in self.watchlists]}


def normalize_watchlists(data: Any) -> WatchlistsView:
    """Normalize a GET /watchlists response."""
    return WatchlistsView.from_api(data)
