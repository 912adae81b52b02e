"""Event dispatched when an MCP tool execution fails."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from ..core.types import ErrorCause, RequestId, ToolArguments, describe_error
from . import reasons
from .base import ToolExecutionEvent


@dataclass(frozen=True, slots=True)
class ToolExecutionFailedEvent(ToolExecutionEvent):
    """Snapshot taken when a tool invocation fails.

    Typical listeners handle error logging and alerting, troubleshooting, error
    rate monitoring and incident tracking.

    Attributes:
        tool_name: MCP tool name.
        plugin_id: Identifier of the plugin that registered the tool.
        arguments: Tool arguments, already sanitised by the caller.
        reason: Failure reason, normally one of the ``REASON_*`` codes. Unknown
            codes are accepted as-is.
        result: MCP call tool result (see ``ToolCallResult``), if one was
            produced before the failure.
        exception: Error raised during execution, either the exception itself or
            a ``CapturedError``.
        duration_ms: Milliseconds elapsed until the failure was recognised.
        request_id: MCP request id used to correlate the invocation's events.
    """

    event_name: ClassVar[str] = "tool_execution_failed"

    REASON_VALIDATION: ClassVar[str] = reasons.REASON_VALIDATION
    REASON_ACCESS_DENIED: ClassVar[str] = reasons.REASON_ACCESS_DENIED
    REASON_INSTANTIATION: ClassVar[str] = reasons.REASON_INSTANTIATION
    REASON_INVALID_TOOL: ClassVar[str] = reasons.REASON_INVALID_TOOL
    REASON_RESULT: ClassVar[str] = reasons.REASON_RESULT
    REASON_EXECUTION: ClassVar[str] = reasons.REASON_EXECUTION

    REASON_POLICY: ClassVar[str] = reasons.REASON_POLICY
    REASON_POLICY_APPROVAL: ClassVar[str] = reasons.REASON_POLICY_APPROVAL
    REASON_POLICY_BUDGET: ClassVar[str] = reasons.REASON_POLICY_BUDGET
    REASON_POLICY_DRY_RUN: ClassVar[str] = reasons.REASON_POLICY_DRY_RUN
    REASON_POLICY_SCOPE: ClassVar[str] = reasons.REASON_POLICY_SCOPE

    tool_name: str
    plugin_id: str
    arguments: ToolArguments
    reason: str
    result: Any
    exception: ErrorCause | None
    duration_ms: float
    request_id: RequestId

    @staticmethod
    def all_reasons() -> Mapping[str, str]:
        return reasons.all_reasons()

    @staticmethod
    def is_valid_reason(code: str) -> bool:
        return reasons.is_valid_reason(code)

    def is_policy_failure(self) -> bool:
        """Check whether the failure came from a policy restriction.

        This is a prefix test on ``reason``: an unknown ``policy_*`` code still
        counts as a policy failure.
        """

        return reasons.is_policy_reason(self.reason)

    def has_exception(self) -> bool:
        return self.exception is not None

    @property
    def exception_class(self) -> str | None:
        if self.exception is None:
            return None
        return describe_error(self.exception)[0]

    @property
    def exception_message(self) -> str | None:
        if self.exception is None:
            return None
        return describe_error(self.exception)[1]

    def to_json(self) -> dict[str, Any]:
        payload = self._base_payload()
        payload["reason"] = self.reason
        payload["duration_ms"] = self.duration_ms
        payload["request_id"] = self.request_id
        payload["is_policy_failure"] = self.is_policy_failure()
        payload["has_exception"] = self.has_exception()

        if self.exception is not None:
            kind, message = describe_error(self.exception)
            payload["exception_class"] = kind
            payload["exception_message"] = message

        return payload
