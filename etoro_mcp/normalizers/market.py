"""Instrument Search Normalization.

Search results carry sparse instrument data; when available, the
instrument metadata endpoint fills in symbol, display name, type and
exchange. The view records whether that enrichment happened.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from etoro_mcp.normalizers._fields import as_dict, as_list, as_optional_int


class EnrichmentStatus(str, Enum):
    """Outcome of the best-effort metadata lookup."""
    ENRICHED = "enriched"
    UNAVAILABLE = "unavailable"  # lookup failed or matched no instruments
    SKIPPED = "skipped"  # no positive instrument ids to look up


def _prefer(primary: Any, fallback: Any) -> Any:
    """The metadata value unless it is missing or null."""
    return primary if primary is not None else fallback


@dataclass(frozen=True)
class SearchItemView:
    instrument_id: Optional[int] = None
    symbol: Any = None
    display_name: Any = None
    instrument_type_id: Any = None
    exchange_id: Any = None

    @classmethod
    def from_api(cls, item: Any, metadata: Optional[dict] = None) -> "SearchItemView":
        """Prefer metadata fields, falling back to the search item's own."""
        item = as_dict(item)
        meta = as_dict(metadata)
        return cls(
            instrument_id=as_optional_int(item.get("instrumentId")),
            symbol=_prefer(meta.get("symbolFull"), item.get("internalSymbolFull")),
            display_name=_prefer(meta.get("instrumentDisplayName"), item.get("displayName")),
            instrument_type_id=_prefer(meta.get("instrumentTypeID"), item.get("instrumentTypeId")),
            exchange_id=_prefer(meta.get("exchangeID"), item.get("exchangeId")),
        )

    def to_dict(self) -> dict:
        return {
            "instrumentId": self.instrument_id,
            "symbol": self.symbol,
            "displayName": self.display_name,
            "instrumentTypeId": self.instrument_type_id,
            "exchangeId": self.exchange_id,
        }


@dataclass(frozen=True)
class SearchResultsView:
    page: Any = None
    page_size: Any = None
    total_items: Any = None
    items: tuple[SearchItemView, ...] = ()
    enrichment: EnrichmentStatus = EnrichmentStatus.SKIPPED

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "totalItems": self.total_items,
            "items": [i.to_dict() for i in self.items],
        }


def search_instrument_ids(search: Any) -> list[int]:
    """Positive instrument ids from a search page, in result order."""
    ids = []
    for item in as_list(as_dict(search).get("items")):
        instrument_id = as_optional_int(as_dict(item).get("instrumentId"))
        if instrument_id is not None and instrument_id > 0:
            ids.append(instrument_id)
    return ids


def index_instrument_metadata(data: Any) -> dict[int, dict]:
    """Map instrument id to its entry in an /market-data/instruments response."""
    index = {}
    for entry in as_list(as_dict(data).get("instrumentDisplayDatas")):
        entry = as_dict(entry)
        instrument_id = as_optional_int(entry.get("instrumentID"))
        if instrument_id is not None:
            index[instrument_id] = entry
    return index


def normalize_search_results(
    search: Any,
    metadata: Optional[dict[int, dict]] = None,
    enrichment: EnrichmentStatus = EnrichmentStatus.SKIPPED,
) -> SearchResultsView:
    """Normalize a /market-data/search page, merging any metadata found."""
    search = as_dict(search)
    metadata = metadata or {}
    items = []
    for item in as_list(search.get("items")):
        instrument_id = as_optional_int(as_dict(item).get("instrumentId"))
        items.append(SearchItemView.from_api(item, metadata.get(instrument_id)))
    return SearchResultsView(
        page=search.get("page"),
        page_size=search.get("pageSize"),
        total_items=search.get("totalItems"),
        items=tuple(items),
        enrichment=enrichment,
    )
