"""Social Feed Normalization.

Flattens eToro feed payloads into compact post records. Upstream shape::

    {
      "discussions": [
        {
          "id": "...",
          "post": {
            "id": "...", "created": "...",
            "owner": {"username": "...", "firstName": "...", "lastName": "..."},
            "message": {"text": "...", "languageCode": "en"},
            "tags": [{"market": {"symbolName": "AAPL", "displayName": "Apple"}}]
          },
          "summary": {"totalCommentsAndReplies": 3, "totalShares": 1},
          "emotionsData": {"like": {"paging": {"totalCount": 12}}}
        }
      ],
      "paging": {"offSet": 0, "take": 20}
    }
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from etoro_mcp.normalizers._fields import (
    as_count,
    as_dict,
    as_list,
    as_optional_int,
    as_optional_str,
)


# ═══════════════════════════════════════════════════════════════════════
# Views
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FeedAuthor:
    username: Optional[str] = None
    full_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {"username": self.username, "fullName": self.full_name}


@dataclass(frozen=True)
class FeedTag:
    """An instrument tag on a post."""
    symbol: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> dict:
        return {"symbol": self.symbol, "name": self.name}


@dataclass(frozen=True)
class FeedPost:
    """One discussion reduced to the fields a reader needs."""
    id: Optional[str] = None
    created: Optional[str] = None
    author: FeedAuthor = field(default_factory=FeedAuthor)
    text: Optional[str] = None
    language: Optional[str] = None
    tags: tuple[FeedTag, ...] = ()
    likes: int = 0
    comments: int = 0
    shares: int = 0

    @classmethod
    def from_api(cls, discussion: Any) -> "FeedPost":
        discussion = as_dict(discussion)
        post = as_dict(discussion.get("post"))
        return cls(
            id=_post_id(discussion, post),
            created=as_optional_str(post.get("created")),
            author=_author(post),
            text=_message_text(post),
            language=_message_language(post),
            tags=_market_tags(post),
            likes=_like_count(discussion),
            comments=_comment_count(discussion),
            shares=_share_count(discussion),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "created": self.created,
            "author": self.author.to_dict(),
            "text": self.text,
            "language": self.language,
            "tags": [t.to_dict() for t in self.tags],
            "likes": self.likes,
            "comments": self.comments,
            "shares": self.shares,
        }


@dataclass(frozen=True)
class FeedPaging:
    offset: Optional[int] = None
    take: Optional[int] = None

    def to_dict(self) -> dict:
        return {"offset": self.offset, "take": self.take}


@dataclass(frozen=True)
class FeedView:
    posts: tuple[FeedPost, ...] = ()
    paging: Optional[FeedPaging] = None

    @classmethod
    def from_api(cls, data: Any) -> "FeedView":
        data = as_dict(data)
        return cls(
            posts=tuple(FeedPost.from_api(d) for d in as_list(data.get("discussions"))),
            paging=_paging(data),
        )

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"posts": [p.to_dict() for p in self.posts]}
        if self.paging is not None:
            result["paging"] = self.paging.to_dict()
        return result


def normalize_feed(data: Any) -> FeedView:
    """Normalize a feed response (instrument or user feed)."""
    return FeedView.from_api(data)


# ═══════════════════════════════════════════════════════════════════════
# Accessors
# ═══════════════════════════════════════════════════════════════════════


def _post_id(discussion: dict, post: dict) -> Optional[str]:
    """The post id, falling back to the discussion id."""
    value = post.get("id", discussion.get("id"))
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return str(value)
    return None


def _author(post: dict) -> FeedAuthor:
    owner = as_dict(post.get("owner"))
    names = [
        n for n in (
            as_optional_str(owner.get("firstName")),
            as_optional_str(owner.get("lastName")),
        ) if n
    ]
    return FeedAuthor(
        username=as_optional_str(owner.get("username")),
        full_name=" ".join(names) if names else None,
    )


def _message_text(post: dict) -> Optional[str]:
    message = post.get("message")
    if isinstance(message, str):
        return message
    return as_optional_str(as_dict(message).get("text"))


def _message_language(post: dict) -> Optional[str]:
    return as_optional_str(as_dict(post.get("message")).get("languageCode"))


def _market_tags(post: dict) -> tuple[FeedTag, ...]:
    """Instrument tags only; entries without a market object are dropped.

    Tags arrive either as a bare list or wrapped as {"tags": [...]}.
    """
    raw = post.get("tags")
    entries = as_list(raw) or as_list(as_dict(raw).get("tags"))
    tags = []
    for entry in entries:
        market = as_dict(entry).get("market")
        if not isinstance(market, dict):
            continue
        tags.append(FeedTag(
            symbol=as_optional_str(market.get("symbolName")),
            name=as_optional_str(market.get("displayName")),
        ))
    return tuple(tags)


def _like_count(discussion: dict) -> int:
    like = as_dict(as_dict(discussion.get("emotionsData")).get("like"))
    return as_count(as_dict(like.get("paging")).get("totalCount"))


def _comment_count(discussion: dict) -> int:
    return as_count(as_dict(discussion.get("summary")).get("totalCommentsAndReplies"))


def _share_count(discussion: dict) -> int:
    return as_count(as_dict(discussion.get("summary")).get("totalShares"))


def _paging(data: dict) -> Optional[FeedPaging]:
    paging = data.get("paging")
    if not isinstance(paging, dict):
        return None
    return FeedPaging(
        offset=as_optional_int(paging.get("offSet")),
        take=as_optional_int(paging.get("take")),
    )


# ═══════════════════════════════════════════════════════════════════════
# People search
# ═══════════════════════════════════════════════════════════════════════


def resolve_user_id(people: Any, username: str) -> Optional[int]:
    """Numeric account id for a username from a people-search response.

    Matches usernames case-insensitively over the "users" entries and
    reads "realCID", falling back to "gcid". None when nothing matches.
    """
    wanted = username.lower()
    for user in as_list(as_dict(people).get("users")):
        user = as_dict(user)
        name = as_optional_str(user.get("username"))
        if name is None or name.lower() != wanted:
            continue
        user_id = as_optional_int(user.get("realCID"))
        if user_id is None:
            user_id = as_optional_int(user.get("gcid"))
        if user_id is not None:
            return user_id
    return None
