"""Core infrastructure utilities."""

from .config import EventSettings, get_settings
from .exceptions import ConfigurationError, McpEventsError, UnsupportedEventError
from .logging_config import configure_logging, get_logger
from .types import CapturedError, RequestId, ToolArguments, ToolCallResult

__all__ = [
    "CapturedError",
    "ConfigurationError",
    "EventSettings",
    "McpEventsError",
    "RequestId",
    "ToolArguments",
    "ToolCallResult",
    "UnsupportedEventError",
    "configure_logging",
    "get_logger",
    "get_settings",
]
