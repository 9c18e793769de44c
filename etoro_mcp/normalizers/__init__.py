"""Response Normalizers.

Pure transforms reshaping nested eToro payloads into small, stable
views. Missing optional fields degrade to None or a stated default;
no normalizer raises on a sparse payload.
"""

from etoro_mcp.normalizers.feed import (
    FeedAuthor,
    FeedPaging,
    FeedPost,
    FeedTag,
    FeedView,
    normalize_feed,
    resolve_user_id,
)
from etoro_mcp.normalizers.market import (
    EnrichmentStatus,
    SearchItemView,
    SearchResultsView,
    index_instrument_metadata,
    normalize_search_results,
    search_instrument_ids,
)
from etoro_mcp.normalizers.portfolio import (
    PortfolioPosition,
    PortfolioView,
    normalize_portfolio,
)
from etoro_mcp.normalizers.watchlists import (
    WatchlistItemView,
    WatchlistsView,
    WatchlistView,
    normalize_watchlists,
)

__all__ = [
    # Feed
    "FeedAuthor",
    "FeedPaging",
    "FeedPost",
    "FeedTag",
    "FeedView",
    "normalize_feed",
    "resolve_user_id",
    # Market
    "EnrichmentStatus",
    "SearchItemView",
    "SearchResultsView",
    "index_instrument_metadata",
    "normalize_search_results",
    "search_instrument_ids",
    # Portfolio
    "PortfolioPosition",
    "PortfolioView",
    "normalize_portfolio",
    # Watchlists
    "WatchlistItemView",
    "WatchlistView",
    "WatchlistsView",
    "normalize_watchlists",
]
