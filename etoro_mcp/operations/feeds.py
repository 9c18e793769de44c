"""Social feed operations."""

import logging
from typing import Any, Optional

from etoro_mcp.gateway import EtoroClient, UserNotFoundError
from etoro_mcp.normalizers import FeedView, normalize_feed, resolve_user_id

logger = logging.getLogger(__name__)


def _paging_params(take: Optional[int], offset: Optional[int]) -> dict[str, int]:
    params = {}
    if take:
        params["take"] = take
    if offset:
        params["offset"] = offset
    return params


async def get_instrument_feed(
    client: EtoroClient,
    instrument_id: int,
    take: Optional[int] = None,
    offset: Optional[int] = None,
) -> FeedView:
    data = await client.get(
        f"/feeds/instrument/{instrument_id}", params=_paging_params(take, offset)
    )
    return normalize_feed(data)


async def resolve_username(client: EtoroClient, username: str) -> int:
    """Numeric account id for a username.

    Raises:
        UserNotFoundError: No account in the people search matches.
    """
    people = await client.get("/user-info/people", params={"usernames": username})
    user_id = resolve_user_id(people, username)
    if user_id is None:
        raise UserNotFoundError(username)
    return user_id


async def get_user_feed(
    client: EtoroClient,
    username: str,
    take: Optional[int] = None,
    offset: Optional[int] = None,
) -> FeedView:
    """Feed of a user's posts, looked up by username."""
    user_id = await resolve_username(client, username)
    logger.debug(f"Resolved username {username} to user id {user_id}")
    data = await client.get(f"/feeds/user/{user_id}", params=_paging_params(take, offset))
    return normalize_feed(data)


async def create_post(
    client: EtoroClient,
    content: str,
    instrument_id: Optional[int] = None,
) -> Any:
    body: dict[str, Any] = {"message": content}
    if instrument_id is not None:
        body["tags"] = {"tags": [{"name": "instrument", "id": str(instrument_id)}]}
    return await client.post("/feeds/post", body)


async def create_comment(client: EtoroClient, post_id: str, content: str) -> Any:
    return await client.post(f"/reactions/{post_id}/comment", {"content": content})
