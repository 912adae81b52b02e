"""Structlog listener for tool execution events."""

from __future__ import annotations

from typing import Any

import structlog

from ..core.config import get_settings
from ..core.exceptions import UnsupportedEventError
from .base import ToolExecutionEvent
from .failed import ToolExecutionFailedEvent


class ToolEventLogger:
    """Write each tool execution event to a structlog logger.

    Register an instance with the event dispatcher. Started and succeeded
    events are logged at info, policy failures at warning and every other
    failure at error.
    """

    def __init__(self, logger: Any = None, *, include_arguments: bool | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(__name__)
        if include_arguments is None:
            include_arguments = get_settings().log_arguments
        self._include_arguments = include_arguments

    def __call__(self, event: ToolExecutionEvent) -> None:
        if not isinstance(event, ToolExecutionEvent):
            raise UnsupportedEventError(
                f"Expected a tool execution event, got {type(event).__name__}"
            )

        payload = event.to_json()
        event_name = payload.pop("event")
        if not self._include_arguments:
            payload.pop("arguments", None)
        if "timestamp" in payload:
            # structlog stamps its own "timestamp" key
            payload["started_at"] = payload.pop("timestamp")

        log = getattr(self._logger, self._level_for(event))
        log(event_name, **payload)

    @staticmethod
    def _level_for(event: ToolExecutionEvent) -> str:
        if isinstance(event, ToolExecutionFailedEvent):
            return "warning" if event.is_policy_failure() else "error"
        return "info"
