"""
NavigationResolver: the single-assignment handle a guard settles.

A fresh resolver is created for every evaluation. The first call to
allow(), redirect(), block() or resolve() wins; later calls are ignored so
guards may call more than one of them defensively.
"""

import asyncio
from typing import Any

from navguard.domain.models import Decision


class NavigationResolver:
    """
    One-shot completion cell scoped to a single guard evaluation.

    Awaiting :meth:`wait` suspends until the guard settles the resolver.
    There is no timeout: a guard that never settles its resolver leaves the
    caller waiting forever.
    """

    def __init__(self, context: Any, state: Any):
        """
        Args:
            context: Opaque request context being evaluated
            state: Opaque request state being evaluated
        """
        self._context = context
        self._state = state
        self._decision: Decision | None = None
        self._settled = asyncio.Event()

    @property
    def context(self) -> Any:
        return self._context

    @property
    def state(self) -> Any:
        return self._state

    @property
    def is_resolved(self) -> bool:
        """Whether a decision has been recorded."""
        return self._decision is not None

    @property
    def decision(self) -> Decision | None:
        """The recorded decision, or None while unsettled."""
        return self._decision

    def allow(self, reevaluate_on_change: bool = False) -> None:
        """Let the navigation proceed."""
        self.resolve(Decision.allow(reevaluate_on_change))

    def redirect(self, path: str, reevaluate_on_change: bool = False) -> None:
        """Send the navigation to ``path`` instead."""
        self.resolve(Decision.redirect(path, reevaluate_on_change))

    def block(self, reevaluate_on_change: bool = False) -> None:
        """
        Keep the user where they are.

        What "where they are" means is decided by the host adapter; see
        navguard.application.adapter.resolve_redirect_path.
        """
        self.resolve(Decision.block(reevaluate_on_change))

    def allow_or_block(self, continue_navigation: bool = True) -> None:
        """Allow when ``continue_navigation`` is true, block otherwise."""
        if continue_navigation:
            self.allow()
        else:
            self.block()

    def resolve(self, decision: Decision) -> None:
        """Record ``decision`` unless one is already recorded."""
        if self.is_resolved:
            return
        self._decision = decision
        self._settled.set()

    async def wait(self) -> Decision:
        """Suspend until the resolver is settled and return the decision."""
        await self._settled.wait()
        assert self._decision is not None
        return self._decision
