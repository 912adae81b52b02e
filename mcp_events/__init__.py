"""Immutable lifecycle events for MCP tool invocations."""

from .core.types import CapturedError
from .events import (
    ToolEventLogger,
    ToolExecutionEvent,
    ToolExecutionFailedEvent,
    ToolExecutionStartedEvent,
    ToolExecutionSucceededEvent,
    all_reasons,
    is_valid_reason,
)

__all__ = [
    "CapturedError",
    "ToolEventLogger",
    "ToolExecutionEvent",
    "ToolExecutionFailedEvent",
    "ToolExecutionStartedEvent",
    "ToolExecutionSucceededEvent",
    "all_reasons",
    "is_valid_reason",
]
