"""Failure reason codes reported by ``ToolExecutionFailedEvent``.

Reasons are plain strings. The codes below are the ones the runtime emits, but a
failed event accepts any string so that newer producers can report reasons this
build does not know yet.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

# Execution-layer failures
REASON_VALIDATION = "validation_failed"
REASON_ACCESS_DENIED = "access_denied"
REASON_INSTANTIATION = "instantiation_failed"
REASON_INVALID_TOOL = "invalid_tool"
REASON_RESULT = "result_failed"
REASON_EXECUTION = "execution_failed"

# Policy-layer failures
REASON_POLICY = "policy_blocked"
REASON_POLICY_APPROVAL = "policy_approval_required"
REASON_POLICY_BUDGET = "policy_budget_exceeded"
REASON_POLICY_DRY_RUN = "policy_dry_run"
REASON_POLICY_SCOPE = "policy_scope_required"

POLICY_PREFIX = "policy_"

_EXECUTION_REASONS: tuple[tuple[str, str], ...] = (
    ("REASON_VALIDATION", REASON_VALIDATION),
    ("REASON_ACCESS_DENIED", REASON_ACCESS_DENIED),
    ("REASON_INSTANTIATION", REASON_INSTANTIATION),
    ("REASON_INVALID_TOOL", REASON_INVALID_TOOL),
    ("REASON_RESULT", REASON_RESULT),
    ("REASON_EXECUTION", REASON_EXECUTION),
)

_POLICY_REASONS: tuple[tuple[str, str], ...] = (
    ("REASON_POLICY", REASON_POLICY),
    ("REASON_POLICY_APPROVAL", REASON_POLICY_APPROVAL),
    ("REASON_POLICY_BUDGET", REASON_POLICY_BUDGET),
    ("REASON_POLICY_DRY_RUN", REASON_POLICY_DRY_RUN),
    ("REASON_POLICY_SCOPE", REASON_POLICY_SCOPE),
)


@lru_cache(maxsize=None)
def all_reasons() -> Mapping[str, str]:
    """Return every known reason keyed by its constant name.

    The mapping is read-only and the same object is returned on every call.
    """

    return MappingProxyType(dict(_EXECUTION_REASONS + _POLICY_REASONS))


def is_valid_reason(code: str) -> bool:
    """Return True when ``code`` is exactly one of the known reason codes."""

    return code in all_reasons().values()


def is_policy_reason(code: str) -> bool:
    return code.startswith(POLICY_PREFIX)


def execution_reasons() -> tuple[str, ...]:
    return tuple(code for _, code in _EXECUTION_REASONS)


def policy_reasons() -> tuple[str, ...]:
    return tuple(code for _, code in _POLICY_REASONS)
