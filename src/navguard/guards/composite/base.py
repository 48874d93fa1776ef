"""
Shared evaluation engine for combinator guards.

Every combinator evaluates its children in *precedence order*: declaration
order for SEQUENTIAL and PARALLEL, reverse declaration order for REVERSE.
Tie-breaks ("first redirect", "first failure") always refer to that order,
so in PARALLEL mode the winner depends on list index, never on which child
finished first. This covers decisions only: when children raise in PARALLEL
mode, the exception that surfaces is the first one raised in time.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import Any

from navguard.domain.exceptions import ConfigurationError
from navguard.domain.interfaces import GuardInterface
from navguard.domain.models import (
    DEFAULT_SETTINGS,
    Decision,
    ExecutionOrder,
    GuardSettings,
)

logger = logging.getLogger(__name__)


def _never(_decision: Decision) -> bool:
    return False


def _is_redirect(decision: Decision) -> bool:
    return decision.is_redirect


def _is_allowed(decision: Decision) -> bool:
    return decision.is_allowed


class CompositeGuard(GuardInterface):
    """
    Base class for guards composed of other guards.

    Subclasses pick a fold (all-pass, any-pass or exactly-one-pass) and
    implement :meth:`evaluate` on top of it.
    """

    def __init__(
        self,
        guards: Iterable[GuardInterface],
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL,
        settings: GuardSettings | None = None,
    ):
        """
        Args:
            guards: Child guards, in declaration order
            execution_order: Scheduling policy for the children
            settings: Explicit settings (continuation-validity check)

        Raises:
            ConfigurationError: If no guards are given
        """
        self._guards = tuple(guards)
        if not self._guards:
            raise ConfigurationError(
                f"{type(self).__name__} guards list cannot be empty", "guards"
            )
        self._execution_order = ExecutionOrder(execution_order)
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def guards(self) -> tuple[GuardInterface, ...]:
        return self._guards

    @property
    def execution_order(self) -> ExecutionOrder:
        return self._execution_order

    @property
    def settings(self) -> GuardSettings:
        return self._settings

    def _precedence(self) -> tuple[GuardInterface, ...]:
        if self._execution_order is ExecutionOrder.REVERSE:
            return self._guards[::-1]
        return self._guards

    async def _collect(
        self,
        context: Any,
        state: Any,
        stop: Callable[[Decision], bool] = _never,
    ) -> list[Decision] | None:
        """
        Evaluate children and return their decisions in precedence order.

        Sequential modes stop after the first decision for which ``stop``
        is true. Parallel mode always runs every child to completion.

        Returns:
            The decisions, or None if the context went stale between two
            sequential steps.
        """
        if self._execution_order is ExecutionOrder.PARALLEL:
            results = await asyncio.gather(
                *(guard.evaluate(context, state) for guard in self._guards)
            )
            return list(results)

        decisions: list[Decision] = []
        for guard in self._precedence():
            if decisions and not self._settings.is_context_active(context):
                logger.debug(
                    "%s: context no longer active after %d of %d guards, aborting",
                    type(self).__name__,
                    len(decisions),
                    len(self._guards),
                )
                return None
            decision = await guard.evaluate(context, state)
            decisions.append(decision)
            if stop(decision):
                if len(decisions) < len(self._guards):
                    logger.debug(
                        "%s: short-circuit after %d of %d guards",
                        type(self).__name__,
                        len(decisions),
                        len(self._guards),
                    )
                break
        return decisions

    async def _all_pass(self, context: Any, state: Any) -> Decision:
        """First redirect wins; otherwise the last allow decision."""
        decisions = await self._collect(context, state, stop=_is_redirect)
        if decisions is None:
            return Decision.allow()
        for decision in decisions:
            if decision.is_redirect:
                return decision
        return decisions[-1]

    async def _any_pass(
        self, context: Any, state: Any, fallback: str | None = None
    ) -> Decision:
        """First allow wins; otherwise ``fallback`` or the first failure."""
        decisions = await self._collect(context, state, stop=_is_allowed)
        if decisions is None:
            return Decision.allow()
        for decision in decisions:
            if decision.is_allowed:
                return decision
        if fallback is not None:
            return Decision.redirect(fallback)
        return decisions[0]

    async def _exactly_one_pass(
        self, context: Any, state: Any, fallback: str | None = None
    ) -> Decision:
        """
        Allow iff exactly one child allows.

        Every child is evaluated. On violation, redirect to ``fallback``,
        else to the first failure, else block.
        """
        decisions = await self._collect(context, state)
        if decisions is None:
            return Decision.allow()
        passed = sum(1 for d in decisions if d.is_allowed)
        if passed == 1:
            return Decision.allow()

        logger.debug(
            "%s: exclusivity violated (%d of %d guards passed)",
            type(self).__name__,
            passed,
            len(decisions),
        )
        if fallback is not None:
            return Decision.redirect(fallback)
        for decision in decisions:
            if decision.is_redirect:
                return decision
        return Decision.block()

    def __repr__(self) -> str:
        children = ", ".join(repr(g) for g in self._guards)
        return f"{type(self).__name__}([{children}], {self._execution_order.value})"


def require_path(path: str | None, field: str, optional: bool = False) -> str | None:
    """Reject empty redirect/fallback paths at construction time."""
    if path is None and optional:
        return None
    if not path:
        raise ConfigurationError(f"{field} cannot be empty", field)
    return path
