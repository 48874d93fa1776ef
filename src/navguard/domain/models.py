"""
Domain models for navguard.

Pure value objects shared by every guard. All models are immutable
(frozen dataclasses) so a single instance can be reused across any number
of concurrent evaluations.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from navguard.domain.exceptions import ConfigurationError

# Redirect target meaning "stay where you are". The host adapter decides
# what that resolves to.
BLOCK_TARGET = "#blocked"


# =============================================================================
# DECISION
# =============================================================================


class DecisionKind(Enum):
    """Which variant of a Decision is active."""

    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class Decision:
    """
    Outcome of a guard evaluation: allow, or redirect to ``path``.

    Build instances with :meth:`allow`, :meth:`redirect` or :meth:`block`.
    A block is a redirect whose target is :data:`BLOCK_TARGET`.
    """

    kind: DecisionKind
    path: str | None = None
    reevaluate_on_change: bool = False  # Opaque hint passed through to the host

    def __post_init__(self) -> None:
        if self.kind is DecisionKind.ALLOW and self.path is not None:
            raise ConfigurationError("An allow decision cannot carry a path", "path")
        if self.kind is DecisionKind.REDIRECT and self.path is None:
            raise ConfigurationError("A redirect decision requires a path", "path")

    @classmethod
    def allow(cls, reevaluate_on_change: bool = False) -> "Decision":
        return cls(DecisionKind.ALLOW, reevaluate_on_change=reevaluate_on_change)

    @classmethod
    def redirect(cls, path: str, reevaluate_on_change: bool = False) -> "Decision":
        return cls(DecisionKind.REDIRECT, path, reevaluate_on_change)

    @classmethod
    def block(cls, reevaluate_on_change: bool = False) -> "Decision":
        return cls(DecisionKind.REDIRECT, BLOCK_TARGET, reevaluate_on_change)

    @property
    def is_allowed(self) -> bool:
        return self.kind is DecisionKind.ALLOW

    @property
    def is_redirect(self) -> bool:
        return self.kind is DecisionKind.REDIRECT

    @property
    def is_block(self) -> bool:
        return self.is_redirect and self.path == BLOCK_TARGET


# =============================================================================
# EXECUTION ORDER
# =============================================================================


class ExecutionOrder(Enum):
    """How a combinator schedules its children."""

    SEQUENTIAL = "sequential"  # Declaration order, one after another
    REVERSE = "reverse"  # Reverse declaration order, one after another
    PARALLEL = "parallel"  # All started at once on the running event loop


# =============================================================================
# SETTINGS
# =============================================================================


def _always_active(_context: Any) -> bool:
    return True


@dataclass(frozen=True)
class GuardSettings:
    """
    Explicit configuration threaded into combinators and host adapters.

    Attributes:
        fallback_path: Where a block resolves when the current location is
            unknown or is itself the blocked target.
        is_context_active: Continuation-validity check consulted between
            sequential child evaluations. Returning False aborts the
            evaluation with an allow decision.
    """

    fallback_path: str = "/"
    is_context_active: Callable[[Any], bool] = field(default=_always_active)

    def __post_init__(self) -> None:
        if not self.fallback_path:
            raise ConfigurationError(
                "fallback_path cannot be empty", "fallback_path"
            )


DEFAULT_SETTINGS = GuardSettings()
