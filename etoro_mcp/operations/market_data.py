"""Market data operations.

Instrument search with best-effort metadata enrichment, plus the plain
market-data lookups.
"""

import logging
from typing import Any, Optional

from etoro_mcp.gateway import EtoroClient, EtoroError
from etoro_mcp.normalizers import (
    EnrichmentStatus,
    SearchResultsView,
    index_instrument_metadata,
    normalize_search_results,
    search_instrument_ids,
)

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PAGE_SIZE = 10
DEFAULT_CANDLE_COUNT = 10


def _join_ids(instrument_ids: list[int]) -> str:
    return ",".join(str(i) for i in instrument_ids)


async def search_instruments(
    client: EtoroClient,
    query: str,
    exact_symbol: bool = False,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> SearchResultsView:
    """Search instruments, then enrich the hits with instrument metadata.

    The metadata call is best effort: if it fails, the search results are
    returned as-is with ``EnrichmentStatus.UNAVAILABLE``. The search call
    itself propagates its errors.
    """
    params: dict[str, Any] = {}
    if exact_symbol:
        params["internalSymbolFull"] = query
    else:
        params["searchText"] = query
    if page:
        params["pageNumber"] = page
    params["pageSize"] = page_size or DEFAULT_SEARCH_PAGE_SIZE

    search = await client.get("/market-data/search", params=params)

    ids = search_instrument_ids(search)
    if not ids:
        return normalize_search_results(search, enrichment=EnrichmentStatus.SKIPPED)

    try:
        meta = await client.get(
            "/market-data/instruments", params={"instrumentIds": _join_ids(ids)}
        )
    except EtoroError as e:
        logger.warning(f"Instrument metadata unavailable for search {query!r}: {e}")
        return normalize_search_results(search, enrichment=EnrichmentStatus.UNAVAILABLE)

    metadata = index_instrument_metadata(meta)
    if not metadata:
        logger.warning(f"Instrument metadata response for search {query!r} carried no instruments")
        return normalize_search_results(search, enrichment=EnrichmentStatus.UNAVAILABLE)

    return normalize_search_results(
        search, metadata=metadata, enrichment=EnrichmentStatus.ENRICHED
    )


async def get_instruments(client: EtoroClient, instrument_ids: list[int]) -> Any:
    return await client.get(
        "/market-data/instruments", params={"instrumentIds": _join_ids(instrument_ids)}
    )


async def get_instrument_types(client: EtoroClient) -> Any:
    return await client.get("/market-data/instrument-types")


async def get_industries(client: EtoroClient) -> Any:
    return await client.get("/market-data/stocks-industries")


async def get_exchanges(client: EtoroClient) -> Any:
    return await client.get("/market-data/exchanges")


async def get_candles(
    client: EtoroClient,
    instrument_id: int,
    period: str,
    count: Optional[int] = None,
    direction: Optional[str] = None,
) -> Any:
    """OHLCV candles, newest first unless direction is "asc"."""
    direction = direction or "desc"
    count = count or DEFAULT_CANDLE_COUNT
    return await client.get(
        f"/market-data/instruments/{instrument_id}/history/candles/{direction}/{period}/{count}"
    )


async def get_closing_prices(client: EtoroClient) -> Any:
    return await client.get("/market-data/instruments/history/closing-price")


async def get_rates(client: EtoroClient, instrument_ids: list[int]) -> Any:
    return await client.get(
        "/market-data/instruments/rates", params={"instrumentIds": _join_ids(instrument_ids)}
    )
