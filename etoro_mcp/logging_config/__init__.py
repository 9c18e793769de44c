"""Structured Logging & Request Tracing.

Structured JSON logging to stderr, request ID propagation for tool
calls, and performance timing for gateway requests.
"""

from etoro_mcp.logging_config.config import LogFormat, LoggingConfig, LogLevel
from etoro_mcp.logging_config.context import RequestContext, generate_request_id
from etoro_mcp.logging_config.performance import log_performance
from etoro_mcp.logging_config.setup import configure_logging

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RequestContext",
    "configure_logging",
    "generate_request_id",
    "log_performance",
]
