"""Gateway Exception Hierarchy.

Typed exceptions for every failure the gateway and the call-composition
layer can surface. A single handler in the tool layer catches the whole
hierarchy through ``EtoroError``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(Enum):
    """Error codes carried by every gateway exception."""

    API_ERROR = "API_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    POSITION_NOT_FOUND = "POSITION_NOT_FOUND"
    CONFIG_ERROR = "CONFIG_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class EtoroError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or []


class ApiError(EtoroError):
    """A response was received but its status was outside 200-299.

    ``response_body`` holds the JSON-decoded error body, or the raw text
    when the body is not valid JSON.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Any = None,
    ):
        super().__init__(message, ErrorCode.API_ERROR)
        self.status_code = status_code
        self.response_body = response_body


class TransportError(EtoroError):
    """The HTTP exchange could not complete (DNS, connection, timeout)."""

    def __init__(self, message: str, method: str = "", url: str = ""):
        super().__init__(message, ErrorCode.TRANSPORT_ERROR)
        self.method = method
        self.url = url


class NotFoundError(EtoroError):
    """A domain lookup did not resolve. Not an HTTP error."""

    def __init__(
        self,
        message: str = "Resource not found",
        error_code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        details = []
        if resource_type or resource_id:
            details = [{"resource_type": resource_type, "resource_id": resource_id}]
        super().__init__(message, error_code, details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class UserNotFoundError(NotFoundError):
    """No account matched a username in the people search."""

    def __init__(self, username: str):
        super().__init__(
            f"User {username} not found",
            ErrorCode.USER_NOT_FOUND,
            resource_type="user",
            resource_id=username,
        )
        self.username = username


class PositionNotFoundError(NotFoundError):
    """A position id is absent from the current portfolio snapshot."""

    def __init__(self, position_id: int):
        super().__init__(
            f"Position {position_id} not found in portfolio",
            ErrorCode.POSITION_NOT_FOUND,
            resource_type="position",
            resource_id=str(position_id),
        )
        self.position_id = position_id


class ConfigError(EtoroError):
    """Invalid startup configuration. Fatal, never raised per request."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)
