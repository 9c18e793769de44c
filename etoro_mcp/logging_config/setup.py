"""Logging Setup.

One call wires the root logger to stderr. stdout carries the MCP
JSON-RPC stream, so nothing in this process may log there.
"""

import dataclasses
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from etoro_mcp.logging_config.config import DEFAULT_LOGGING_CONFIG, LogFormat, LoggingConfig, LogLevel
from etoro_mcp.logging_config.context import get_context_dict

LEVEL_ENV_VAR = "ETORO_LOG_LEVEL"
FORMAT_ENV_VAR = "ETORO_LOG_FORMAT"

# Record attributes copied into JSON output when a caller passes them via extra=
PASSTHROUGH_FIELDS = ("duration_ms", "status_code", "method", "url")

QUIET_LOGGERS = ("httpx", "httpcore", "mcp", "asyncio")


class StructuredFormatter(logging.Formatter):
    """One JSON object per line, carrying the bound call context."""

    def __init__(self, service_name: str = "etoro-mcp", include_caller: bool = False):
        super().__init__()
        self.service_name = service_name
        self.include_caller = include_caller

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            **get_context_dict(),
        }
        if self.include_caller:
            entry["caller"] = f"{record.module}.{record.funcName}:{record.lineno}"
        entry.update(
            {name: getattr(record, name) for name in PASSTHROUGH_FIELDS if hasattr(record, name)}
        )
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable colored lines for running the server by hand."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, "")
        stamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%H:%M:%S.%f")[:-3]
        line = f"{color}{stamp} {record.levelname:<8}{self.RESET} {record.name}: {record.getMessage()}"

        ctx = get_context_dict()
        if ctx:
            line += " [" + ", ".join(f"{k}={v}" for k, v in ctx.items()) + "]"
        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _apply_env_overrides(config: LoggingConfig) -> LoggingConfig:
    """Apply ETORO_LOG_LEVEL / ETORO_LOG_FORMAT; unknown values are ignored."""
    level = os.environ.get(LEVEL_ENV_VAR, "").upper()
    if level in LogLevel.__members__:
        config = dataclasses.replace(config, level=LogLevel(level))

    fmt = os.environ.get(FORMAT_ENV_VAR, "").lower()
    if fmt in {f.value for f in LogFormat}:
        config = dataclasses.replace(config, format=LogFormat(fmt))
    return config


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Route all logging through a single stderr handler.

    Call once at startup. Replaces any handlers already on the root
    logger and quiets chatty third-party loggers to WARNING.
    """
    config = _apply_env_overrides(config or DEFAULT_LOGGING_CONFIG)

    if config.format == LogFormat.CONSOLE:
        formatter: logging.Formatter = ConsoleFormatter()
    else:
        formatter = StructuredFormatter(config.service_name, config.include_caller)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(config.level.value)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
