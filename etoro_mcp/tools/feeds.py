"""Social feed tools."""

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from etoro_mcp.gateway import EtoroClient
from etoro_mcp.operations import feeds
from etoro_mcp.tools.errors import format_tool_response, with_error_handling


def register_feeds_tools(mcp: FastMCP, client: EtoroClient) -> None:

    @mcp.tool()
    @with_error_handling
    async def get_instrument_feed(
        instrumentId: Annotated[int, Field(description="Instrument ID")],
        take: Annotated[Optional[int], Field(description="Number of posts to retrieve (default 20, max 100)")] = None,
        offset: Annotated[Optional[int], Field(description="Number of posts to skip (default 0)")] = None,
    ) -> str:
        """Get the social feed for a specific instrument (posts, discussions)"""
        view = await feeds.get_instrument_feed(client, instrumentId, take=take, offset=offset)
        return format_tool_response(view.to_dict())

    @mcp.tool()
    @with_error_handling
    async def get_user_feed(
        username: Annotated[str, Field(description="eToro username")],
        take: Annotated[Optional[int], Field(description="Number of posts to retrieve (default 20, max 100)")] = None,
        offset: Annotated[Optional[int], Field(description="Number of posts to skip (default 0)")] = None,
    ) -> str:
        """Get the social feed for a specific user"""
        view = await feeds.get_user_feed(client, username, take=take, offset=offset)
        return format_tool_response(view.to_dict())

    @mcp.tool()
    @with_error_handling
    async def create_post(
        content: Annotated[str, Field(description="Post content/text")],
        instrumentId: Annotated[Optional[int], Field(description="Optional instrument ID to tag")] = None,
    ) -> str:
        """Create a new post on the eToro social feed"""
        return format_tool_response(
            await feeds.create_post(client, content, instrument_id=instrumentId)
        )

    @mcp.tool()
    @with_error_handling
    async def create_comment(
        postId: Annotated[str, Field(description="ID of the post to comment on")],
        content: Annotated[str, Field(description="Comment content/text")],
    ) -> str:
        """Add a comment to an existing post on the eToro social feed"""
        return format_tool_response(await feeds.create_comment(client, postId, content))
