"""
N-ary combinators: All, AnyOf, OneOf (and the XorAll variant).

These generalise And/Or/Xor to any non-empty list of guards.
"""

from collections.abc import Iterable
from typing import Any

from navguard.domain.interfaces import GuardInterface
from navguard.domain.models import Decision, ExecutionOrder, GuardSettings
from navguard.guards.composite.base import CompositeGuard, require_path


class All(CompositeGuard):
    """
    Every guard must allow.

    The first redirect (in precedence order) is returned; sequential modes
    stop evaluating at that point.

    Example:
        All([AuthGuard(), RoleGuard("admin"), SubscriptionGuard()])
    """

    async def evaluate(self, context: Any, state: Any) -> Decision:
        return await self._all_pass(context, state)


class AnyOf(CompositeGuard):
    """
    At least one guard must allow.

    Sequential modes stop at the first allow. If every guard redirects, the
    result is ``fallback_redirect`` when given, else the first failure.
    """

    def __init__(
        self,
        guards: Iterable[GuardInterface],
        fallback_redirect: str | None = None,
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL,
        settings: GuardSettings | None = None,
    ):
        """
        Raises:
            ConfigurationError: If guards is empty or fallback_redirect is ""
        """
        super().__init__(guards, execution_order, settings)
        self._fallback_redirect = require_path(
            fallback_redirect, "fallback_redirect", optional=True
        )

    @property
    def fallback_redirect(self) -> str | None:
        return self._fallback_redirect

    async def evaluate(self, context: Any, state: Any) -> Decision:
        return await self._any_pass(context, state, self._fallback_redirect)


class OneOf(CompositeGuard):
    """
    Exactly one guard must allow.

    Every guard is always evaluated, whatever the execution order: the
    number of passing guards is only known once all of them have run. On
    violation the result is ``fallback_redirect`` when given, else the
    first failure, else a block (every guard passed).
    """

    def __init__(
        self,
        guards: Iterable[GuardInterface],
        fallback_redirect: str | None = None,
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL,
        settings: GuardSettings | None = None,
    ):
        """
        Raises:
            ConfigurationError: If guards is empty or fallback_redirect is ""
        """
        super().__init__(guards, execution_order, settings)
        self._fallback_redirect = require_path(
            fallback_redirect, "fallback_redirect", optional=True
        )

    @property
    def fallback_redirect(self) -> str | None:
        return self._fallback_redirect

    async def evaluate(self, context: Any, state: Any) -> Decision:
        return await self._exactly_one_pass(context, state, self._fallback_redirect)


class XorAll(OneOf):
    """OneOf with a mandatory redirect path."""

    def __init__(
        self,
        guards: Iterable[GuardInterface],
        redirect_path: str,
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL,
        settings: GuardSettings | None = None,
    ):
        require_path(redirect_path, "redirect_path")
        super().__init__(guards, redirect_path, execution_order, settings)

    @property
    def redirect_path(self) -> str:
        return self._fallback_redirect  # type: ignore[return-value]


AndAll = All
OrAll = AnyOf
