"""Behaviour shared by the tool execution lifecycle events."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class ToolExecutionEvent:
    """Mixin for the frozen event dataclasses.

    Subclasses declare ``tool_name``, ``plugin_id`` and ``arguments`` fields and
    implement ``to_json``.
    """

    __slots__ = ()

    event_name: ClassVar[str]

    def __post_init__(self) -> None:
        # Detach from the caller's mapping so a dispatched event cannot change later.
        object.__setattr__(self, "arguments", dict(self.arguments))

    def _base_payload(self) -> dict[str, Any]:
        return {
            "event": self.event_name,
            "tool_name": self.tool_name,
            "plugin_id": self.plugin_id,
            "arguments": dict(self.arguments),
        }

    def to_json_string(self) -> str:
        """Encode the canonical projection as a JSON document."""

        return json.dumps(self.to_json(), ensure_ascii=False)
