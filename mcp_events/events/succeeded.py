"""Event dispatched when an MCP tool execution completes successfully."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..core.types import RequestId, ToolArguments
from .base import ToolExecutionEvent


@dataclass(frozen=True, slots=True)
class ToolExecutionSucceededEvent(ToolExecutionEvent):
    """Snapshot taken when a tool invocation returns without error.

    ``result`` is the MCP ``CallToolResult`` (see ``ToolCallResult``). It is
    available to in-process listeners only; ``to_json`` leaves it out because
    tool output may be large or sensitive.
    """

    event_name: ClassVar[str] = "tool_execution_succeeded"

    tool_name: str
    plugin_id: str
    arguments: ToolArguments
    result: Any
    duration_ms: float
    request_id: RequestId

    def to_json(self) -> dict[str, Any]:
        payload = self._base_payload()
        payload["duration_ms"] = self.duration_ms
        payload["request_id"] = self.request_id
        return payload
