"""Watchlist tools."""

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from etoro_mcp.gateway import EtoroClient
from etoro_mcp.operations import watchlists
from etoro_mcp.tools.errors import format_tool_response, with_error_handling


def register_watchlists_tools(mcp: FastMCP, client: EtoroClient) -> None:

    @mcp.tool()
    @with_error_handling
    async def get_watchlists() -> str:
        """Get all watchlists for the current user"""
        view = await watchlists.get_watchlists(client)
        return format_tool_response(view.to_dict())

    @mcp.tool()
    @with_error_handling
    async def create_watchlist(
        name: Annotated[str, Field(description="Name for the new watchlist (max 100 chars)", max_length=100)],
    ) -> str:
        """Create a new watchlist"""
        return format_tool_response(await watchlists.create_watchlist(client, name))

    @mcp.tool()
    @with_error_handling
    async def delete_watchlist(
        watchlistId: Annotated[int, Field(description="Watchlist ID to delete")],
    ) -> str:
        """Delete a watchlist by its ID"""
        return format_tool_response(await watchlists.delete_watchlist(client, watchlistId))

    @mcp.tool()
    @with_error_handling
    async def rename_watchlist(
        watchlistId: Annotated[int, Field(description="Watchlist ID to rename")],
        name: Annotated[str, Field(description="New name for the watchlist (max 100 chars)", max_length=100)],
    ) -> str:
        """Rename an existing watchlist"""
        return format_tool_response(await watchlists.rename_watchlist(client, watchlistId, name))

    @mcp.tool()
    @with_error_handling
    async def add_watchlist_items(
        watchlistId: Annotated[int, Field(description="Watchlist ID")],
        instrumentIds: Annotated[list[int], Field(description="Instrument IDs to add")],
    ) -> str:
        """Add instruments to an existing watchlist"""
        return format_tool_response(
            await watchlists.add_watchlist_items(client, watchlistId, instrumentIds)
        )

    @mcp.tool()
    @with_error_handling
    async def remove_watchlist_item(
        watchlistId: Annotated[int, Field(description="Watchlist ID")],
        instrumentId: Annotated[int, Field(description="Instrument ID to remove")],
    ) -> str:
        """Remove an instrument from a watchlist"""
        return format_tool_response(
            await watchlists.remove_watchlist_item(client, watchlistId, instrumentId)
        )

    @mcp.tool()
    @with_error_handling
    async def set_default_watchlist(
        watchlistId: Annotated[int, Field(description="Watchlist ID to set as default")],
    ) -> str:
        """Set a watchlist as the default watchlist"""
        return format_tool_response(await watchlists.set_default_watchlist(client, watchlistId))

    @mcp.tool()
    @with_error_handling
    async def get_curated_lists() -> str:
        """Get eToro's curated/featured instrument lists"""
        return format_tool_response(await watchlists.get_curated_lists(client))

    @mcp.tool()
    @with_error_handling
    async def get_public_watchlists(
        userId: Annotated[int, Field(description="User ID whose public watchlists to retrieve")],
    ) -> str:
        """Get publicly shared watchlists from a user"""
        return format_tool_response(await watchlists.get_public_watchlists(client, userId))
