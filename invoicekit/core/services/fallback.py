"""
Outcome type and per-operation fallback policies for the dual-path store.

A remote attempt never raises past this module: it yields an Outcome that is
either ``ok`` with a value or a fallback with the reason. The policy table
decides, without touching any transport, whether the local path runs and
which result the caller gets.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from invoicekit.config import get_logger
from invoicekit.core.exceptions import RemoteUnavailable

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Tagged result of one remote attempt."""

    ok: bool
    value: T | None = None
    reason: str | None = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def fallback(cls, reason: str) -> "Outcome[T]":
        return cls(ok=False, reason=reason)


class FallbackPolicy(str, Enum):
    """How a store operation combines its remote and local paths."""

    # Reads: the local store answers only when the remote fell back.
    REMOTE_ELSE_LOCAL = "remote_else_local"
    # Writes: the local store always runs; the remote is best-effort.
    REMOTE_THEN_LOCAL = "remote_then_local"
    # No local path: a fallback yields the operation's default.
    REMOTE_ELSE_DEFAULT = "remote_else_default"


OPERATION_POLICIES: dict[str, FallbackPolicy] = {
    "get_all": FallbackPolicy.REMOTE_ELSE_LOCAL,
    "get_by_id": FallbackPolicy.REMOTE_ELSE_LOCAL,
    "save": FallbackPolicy.REMOTE_THEN_LOCAL,
    "delete": FallbackPolicy.REMOTE_THEN_LOCAL,
    "bulk_delete": FallbackPolicy.REMOTE_THEN_LOCAL,
    "import_all": FallbackPolicy.REMOTE_THEN_LOCAL,
    "get_default_date": FallbackPolicy.REMOTE_ELSE_DEFAULT,
}


def runs_local(policy: FallbackPolicy, outcome: Outcome) -> bool:
    """Whether the local path must run after this remote outcome."""
    if policy is FallbackPolicy.REMOTE_THEN_LOCAL:
        return True
    if policy is FallbackPolicy.REMOTE_ELSE_LOCAL:
        return not outcome.ok
    return False


def uses_local_result(policy: FallbackPolicy, outcome: Outcome) -> bool:
    """Whether the caller receives the local result instead of the remote one."""
    if policy is FallbackPolicy.REMOTE_THEN_LOCAL:
        return True
    return policy is FallbackPolicy.REMOTE_ELSE_LOCAL and not outcome.ok


async def attempt_remote(
    operation: str,
    call: Callable[[], Awaitable[T]],
) -> Outcome[T]:
    """Run one remote call, converting RemoteUnavailable into a fallback outcome."""
    try:
        return Outcome.success(await call())
    except RemoteUnavailable as e:
        logger.warning(
            "remote_unavailable_fallback",
            operation=operation,
            reason=e.reason,
            status_code=e.status_code,
        )
        return Outcome.fallback(e.reason)
