"""Shared type definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

RequestId = str | int | None
ToolArguments = Mapping[str, Any]


@runtime_checkable
class ToolCallResult(Protocol):
    """Shape of the MCP ``CallToolResult`` carried by success and failure events.

    Events never read the result; the protocol only documents what callers hand over.
    """

    isError: bool
    content: Sequence[Any]


@dataclass(frozen=True, slots=True)
class CapturedError:
    """Kind and message of an error that caused a tool invocation to fail."""

    kind: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> CapturedError:
        return cls(kind=type(exc).__name__, message=str(exc))


ErrorCause = BaseException | CapturedError


def describe_error(cause: ErrorCause) -> tuple[str, str]:
    """Return ``(kind, message)`` for a live exception or a captured error."""

    if isinstance(cause, CapturedError):
        return cause.kind, cause.message
    return type(cause).__name__, str(cause)
