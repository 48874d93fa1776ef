"""
GuardChain: immutable builder for "all of these guards" policies.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from navguard.domain.interfaces import GuardInterface
from navguard.domain.models import (
    DEFAULT_SETTINGS,
    Decision,
    ExecutionOrder,
    GuardSettings,
)
from navguard.guards.basic import AllowGuard
from navguard.guards.composite import All


class GuardChain:
    """
    Ordered, immutable collection of guards that must all allow.

    Every builder method returns a new chain; the original is unchanged.

    Example:
        chain = GuardChain().add(AuthGuard()).add(RoleGuard("admin"))
        decision = await chain.evaluate(context, state)
    """

    def __init__(
        self,
        guards: Iterable[GuardInterface] = (),
        execution_order: ExecutionOrder = ExecutionOrder.SEQUENTIAL,
        settings: GuardSettings | None = None,
    ):
        self._guards = tuple(guards)
        self._execution_order = ExecutionOrder(execution_order)
        self._settings = settings or DEFAULT_SETTINGS

    def _with(self, guards: Iterable[GuardInterface]) -> "GuardChain":
        return GuardChain(guards, self._execution_order, self._settings)

    def add(self, guard: GuardInterface) -> "GuardChain":
        return self._with((*self._guards, guard))

    def add_all(self, guards: Iterable[GuardInterface]) -> "GuardChain":
        return self._with((*self._guards, *guards))

    def clear(self) -> "GuardChain":
        return self._with(())

    @property
    def guards(self) -> tuple[GuardInterface, ...]:
        return self._guards

    def __len__(self) -> int:
        return len(self._guards)

    def __iter__(self) -> Iterator[GuardInterface]:
        return iter(self._guards)

    def to_guard(self) -> GuardInterface:
        """
        Collapse the chain into a single guard.

        Returns:
            AllowGuard for an empty chain, the only guard for a chain of
            one, otherwise an All combinator over the chain.
        """
        if not self._guards:
            return AllowGuard()
        if len(self._guards) == 1:
            return self._guards[0]
        return All(
            self._guards,
            execution_order=self._execution_order,
            settings=self._settings,
        )

    async def evaluate(self, context: Any, state: Any) -> Decision:
        return await self.to_guard().evaluate(context, state)
