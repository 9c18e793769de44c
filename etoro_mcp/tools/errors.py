"""Tool response formatting and the uniform error boundary.

Every tool body runs inside ``with_error_handling``: whatever it raises
is logged and turned into a FastMCP ``ToolError``, which the server
reports as a result with ``isError`` set. No tool failure reaches the
server loop.
"""

import functools
import json
import logging
from typing import Any, Awaitable, Callable

from fastmcp.exceptions import ToolError

from etoro_mcp.gateway import ApiError
from etoro_mcp.logging_config import RequestContext

logger = logging.getLogger(__name__)

NO_CONTENT_TEXT = "No content."


def format_tool_response(data: Any) -> str:
    """Render a result as the text payload of a tool response."""
    if data is None:
        return NO_CONTENT_TEXT
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, default=str)


def format_error_message(error: BaseException) -> str:
    """Readable message for a failed tool call."""
    if isinstance(error, ApiError):
        message = f"eToro API Error ({error.status_code}): {error.message}"
        if error.response_body:
            message += f"\nDetails: {json.dumps(error.response_body, indent=2, default=str)}"
        return message
    return str(error) or type(error).__name__


def with_error_handling(fn: Callable[..., Awaitable[str]]) -> Callable[..., Awaitable[str]]:
    """Wrap a tool coroutine with request-scoped logging and error capture."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> str:
        with RequestContext(extra={"tool": fn.__name__}):
            logger.info(f"{fn.__name__} called")
            try:
                return await fn(*args, **kwargs)
            except Exception as e:
                logger.error(f"Tool error: {type(e).__name__}: {e}")
                raise ToolError(format_error_message(e)) from e

    return wrapper
