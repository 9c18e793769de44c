"""Watchlist operations. Watchlist paths are the same in demo and real mode."""

from typing import Any

from etoro_mcp.gateway import EtoroClient
from etoro_mcp.normalizers import WatchlistsView, normalize_watchlists


async def get_watchlists(client: EtoroClient) -> WatchlistsView:
    return normalize_watchlists(await client.get("/watchlists"))


async def create_watchlist(client: EtoroClient, name: str) -> Any:
    return await client.post("/watchlists", params={"name": name})


async def delete_watchlist(client: EtoroClient, watchlist_id: int) -> Any:
    return await client.delete(f"/watchlists/{watchlist_id}")


async def rename_watchlist(client: EtoroClient, watchlist_id: int, name: str) -> Any:
    return await client.put(f"/watchlists/{watchlist_id}", params={"newName": name})


async def add_watchlist_items(
    client: EtoroClient, watchlist_id: int, instrument_ids: list[int]
) -> Any:
    # The endpoint takes a bare array of instrument ids.
    return await client.post(f"/watchlists/{watchlist_id}/items", list(instrument_ids))


async def remove_watchlist_item(
    client: EtoroClient, watchlist_id: int, instrument_id: int
) -> Any:
    return await client.delete(
        f"/watchlists/{watchlist_id}/items",
        [{"ItemId": instrument_id, "ItemType": "Instrument"}],
    )


async def set_default_watchlist(client: EtoroClient, watchlist_id: int) -> Any:
    return await client.put(f"/watchlists/setUserSelectedUserDefault/{watchlist_id}")


async def get_curated_lists(client: EtoroClient) -> Any:
    return await client.get("/curated-lists")


async def get_public_watchlists(client: EtoroClient, user_id: int) -> Any:
    return await client.get(f"/watchlists/public/{user_id}")
