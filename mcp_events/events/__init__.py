"""Tool execution lifecycle events."""

from .base import ToolExecutionEvent
from .failed import ToolExecutionFailedEvent
from .listeners import ToolEventLogger
from .reasons import all_reasons, is_valid_reason
from .started import ToolExecutionStartedEvent
from .succeeded import ToolExecutionSucceededEvent

__all__ = [
    "ToolEventLogger",
    "ToolExecutionEvent",
    "ToolExecutionFailedEvent",
    "ToolExecutionStartedEvent",
    "ToolExecutionSucceededEvent",
    "all_reasons",
    "is_valid_reason",
]
