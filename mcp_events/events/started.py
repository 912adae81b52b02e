"""Event dispatched when an MCP tool execution begins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..core.types import RequestId, ToolArguments
from .base import ToolExecutionEvent


@dataclass(frozen=True, slots=True)
class ToolExecutionStartedEvent(ToolExecutionEvent):
    """Snapshot taken when a tool invocation starts.

    Typical listeners log the invocation, start performance timers, trace
    requests or apply rate limits.

    Attributes:
        tool_name: MCP tool name.
        plugin_id: Identifier of the plugin that registered the tool.
        arguments: Tool arguments, already sanitised by the caller.
        request_id: MCP request id used to correlate the invocation's events.
        timestamp: UNIX time in fractional seconds when execution started.
    """

    event_name: ClassVar[str] = "tool_execution_started"

    tool_name: str
    plugin_id: str
    arguments: ToolArguments
    request_id: RequestId
    timestamp: float

    def to_json(self) -> dict[str, Any]:
        payload = self._base_payload()
        payload["request_id"] = self.request_id
        payload["timestamp"] = self.timestamp
        return payload
