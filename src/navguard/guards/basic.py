"""
Constant and callable-backed leaf guards.

AllowGuard and RedirectGuard are the identity elements used when composing
policies; the callable guards let hosts express policy as plain functions
instead of subclasses.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from navguard.domain.exceptions import ConfigurationError
from navguard.domain.interfaces import maybe_await
from navguard.domain.resolver import NavigationResolver
from navguard.guards.base import RouteGuard

OnNavigation = Callable[[NavigationResolver, Any, Any], Awaitable[None] | None]
RedirectFunction = Callable[[Any, Any], Awaitable[str | None] | str | None]
Condition = Callable[[Any, Any], Awaitable[bool] | bool]


def _require_path(path: str, field: str = "path") -> str:
    if not path:
        raise ConfigurationError(f"{field} cannot be empty", field)
    return path


class AllowGuard(RouteGuard):
    """Always allows navigation."""

    def on_navigation(
        self, resolver: NavigationResolver, context: Any, state: Any
    ) -> None:
        resolver.allow()

    def __repr__(self) -> str:
        return "AllowGuard()"


class RedirectGuard(RouteGuard):
    """Always redirects to a fixed path."""

    def __init__(self, path: str):
        """
        Args:
            path: Non-empty redirect target

        Raises:
            ConfigurationError: If path is empty
        """
        self._path = _require_path(path)

    @property
    def path(self) -> str:
        return self._path

    def on_navigation(
        self, resolver: NavigationResolver, context: Any, state: Any
    ) -> None:
        resolver.redirect(self._path)

    def __repr__(self) -> str:
        return f"RedirectGuard({self._path!r})"


class CallbackGuard(RouteGuard):
    """Delegates to a ``(resolver, context, state)`` callable."""

    def __init__(self, callback: OnNavigation):
        self._callback = callback

    async def on_navigation(
        self, resolver: NavigationResolver, context: Any, state: Any
    ) -> None:
        await maybe_await(self._callback(resolver, context, state))


class RedirectFunctionGuard(RouteGuard):
    """
    Adapts a function returning a redirect path.

    The function returns ``None`` to allow navigation, or a path to
    redirect to. Both sync and async functions are accepted.
    """

    def __init__(self, redirect: RedirectFunction):
        self._redirect = redirect

    async def on_navigation(
        self, resolver: NavigationResolver, context: Any, state: Any
    ) -> None:
        path = await maybe_await(self._redirect(context, state))
        if path is None:
            resolver.allow()
        else:
            resolver.redirect(path)


class RedirectIfGuard(RouteGuard):
    """Redirects to ``path`` whenever ``condition`` is true."""

    def __init__(self, condition: Condition, path: str):
        """
        Args:
            condition: Sync or async predicate over (context, state)
            path: Non-empty redirect target used when the condition holds

        Raises:
            ConfigurationError: If path is empty
        """
        self._condition = condition
        self._path = _require_path(path)

    @property
    def path(self) -> str:
        return self._path

    async def on_navigation(
        self, resolver: NavigationResolver, context: Any, state: Any
    ) -> None:
        if await maybe_await(self._condition(context, state)):
            resolver.redirect(self._path)
        else:
            resolver.allow()


def always_allow() -> AllowGuard:
    """Guard that always allows."""
    return AllowGuard()


def always_redirect(path: str) -> RedirectGuard:
    """Guard that always redirects to ``path``."""
    return RedirectGuard(path)
