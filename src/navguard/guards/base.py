"""
Resolver-driven base class for leaf guards.

Host applications implement their policy (authentication, roles,
subscriptions...) by subclassing RouteGuard and settling the resolver.
"""

from abc import abstractmethod
from collections.abc import Awaitable
from typing import Any

from navguard.domain.interfaces import GuardInterface, maybe_await
from navguard.domain.models import Decision
from navguard.domain.resolver import NavigationResolver


class RouteGuard(GuardInterface):
    """
    Middleware-style guard.

    Subclasses implement :meth:`on_navigation` and call exactly one of
    ``resolver.allow()``, ``resolver.redirect(path)`` or ``resolver.block()``.
    ``on_navigation`` may be a plain method or a coroutine.

    Example:
        class AuthGuard(RouteGuard):
            async def on_navigation(self, resolver, context, state):
                if await context.session.is_authenticated():
                    resolver.allow()
                else:
                    resolver.redirect("/login")
    """

    @abstractmethod
    def on_navigation(
        self, resolver: NavigationResolver, context: Any, state: Any
    ) -> Awaitable[None] | None:
        """
        Settle ``resolver`` for this navigation.

        Args:
            resolver: Fresh single-use resolver for this evaluation
            context: Opaque request context
            state: Opaque request state
        """
        pass

    async def evaluate(self, context: Any, state: Any) -> Decision:
        """Run on_navigation with a fresh resolver and await its decision."""
        resolver = NavigationResolver(context, state)
        await maybe_await(self.on_navigation(resolver, context, state))
        return await resolver.wait()
