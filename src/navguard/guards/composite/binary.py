"""
Binary combinators: And, Or, Xor.

Each combines a ``left`` and a ``right`` guard. With REVERSE order the right
guard is evaluated first and takes precedence in tie-breaks; with PARALLEL
order both run concurrently and the left guard takes precedence.
"""

from typing import Any

from navguard.domain.interfaces import GuardInterface
from navguard.domain.models import Decision, ExecutionOrder, GuardSettings
from navguard.guards.composite.base import CompositeGuard, require_path


class _BinaryGuard(CompositeGuard):
    def __init__(
        self,
        left: GuardInterface,
        right: GuardInterface,
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL,
        settings: GuardSettings | None = None,
    ):
        super().__init__((left, right), execution_order, settings)

    @property
    def left(self) -> GuardInterface:
        return self._guards[0]

    @property
    def right(self) -> GuardInterface:
        return self._guards[1]


class And(_BinaryGuard):
    """
    Both guards must allow.

    A redirect from the first evaluated guard is returned immediately and
    the other guard is not evaluated. Otherwise the second guard's decision
    is returned as-is.
    """

    async def evaluate(self, context: Any, state: Any) -> Decision:
        return await self._all_pass(context, state)


class Or(_BinaryGuard):
    """
    At least one guard must allow.

    An allow from the first evaluated guard is returned immediately. If
    both redirect, the first evaluated guard's redirect is returned.
    """

    async def evaluate(self, context: Any, state: Any) -> Decision:
        return await self._any_pass(context, state)


class Xor(_BinaryGuard):
    """
    Exactly one guard must allow.

    Both guards are always evaluated. If both allow or both redirect, the
    combinator redirects to its own ``redirect_path``, overriding whatever
    targets the children asked for.
    """

    def __init__(
        self,
        left: GuardInterface,
        right: GuardInterface,
        redirect_path: str,
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL,
        settings: GuardSettings | None = None,
    ):
        """
        Raises:
            ConfigurationError: If redirect_path is empty
        """
        require_path(redirect_path, "redirect_path")
        super().__init__(left, right, execution_order, settings)
        self._redirect_path = redirect_path

    @property
    def redirect_path(self) -> str:
        return self._redirect_path

    async def evaluate(self, context: Any, state: Any) -> Decision:
        return await self._exactly_one_pass(context, state, self._redirect_path)
