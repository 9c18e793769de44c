"""Call-scoped logging context.

A tool call binds its request id and tool name once; every log line
emitted while the call is in flight picks them up. Each asyncio task
runs in its own context copy, so concurrent calls never see each
other's values.
"""

import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from typing import Any, Optional

_request_id_var: ContextVar[str] = ContextVar("etoro_request_id", default="")
_extra_context_var: ContextVar[dict] = ContextVar("etoro_extra_context", default={})


def generate_request_id() -> str:
    return str(uuid.uuid4())


def get_request_id() -> str:
    return _request_id_var.get()


def get_context_dict() -> dict[str, Any]:
    """The bound request id (if any) merged with extra fields."""
    request_id = _request_id_var.get()
    base = {"request_id": request_id} if request_id else {}
    return {**base, **_extra_context_var.get()}


@dataclass
class RequestContext:
    """Bind a request id and extra fields for the duration of a block.

    Example:
        with RequestContext(extra={"tool": "get_portfolio"}) as ctx:
            ctx.bind(position_id=42)
            logger.info("closing")  # carries request_id, tool, position_id
    """

    request_id: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    _id_token: Optional[Token] = field(default=None, repr=False)
    _extra_token: Optional[Token] = field(default=None, repr=False)

    def __post_init__(self):
        self.request_id = self.request_id or generate_request_id()

    def __enter__(self) -> "RequestContext":
        self._id_token = _request_id_var.set(self.request_id)
        self._extra_token = _extra_context_var.set(dict(self.extra))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _extra_context_var.reset(self._extra_token)
        _request_id_var.reset(self._id_token)
        self._id_token = self._extra_token = None

    def bind(self, **fields: Any) -> None:
        """Add fields to the active context and to this instance."""
        self.extra.update(fields)
        _extra_context_var.set({**_extra_context_var.get(), **fields})
