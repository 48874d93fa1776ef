"""
Host adapter: turn a guard into a routing-layer redirect callback.

Routing layers typically want ``(context, state) -> path | None`` where None
means "proceed". This module builds such callbacks from any guard and owns
the policy for what a block decision means.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from navguard.domain.interfaces import GuardInterface, maybe_await
from navguard.domain.models import DEFAULT_SETTINGS, Decision, GuardSettings

logger = logging.getLogger(__name__)

LocationAccessor = Callable[[Any, Any], Awaitable[str | None] | str | None]
RedirectCallback = Callable[[Any, Any], Awaitable[str | None]]


def _state_path(_context: Any, state: Any) -> str | None:
    return getattr(state, "path", None)


def resolve_redirect_path(
    decision: Decision,
    current_location: str | None,
    target_location: str | None,
    fallback_path: str,
) -> str | None:
    """
    Translate a decision into the path the router should go to.

    A block keeps the user at ``current_location``. When that location is
    unknown, or is the very location being navigated to (deep links,
    first navigation), the block resolves to ``fallback_path`` instead.

    Returns:
        None to proceed, otherwise the redirect path
    """
    if decision.is_allowed:
        return None
    if not decision.is_block:
        return decision.path
    if not current_location or current_location == target_location:
        logger.debug(
            "Block resolved to fallback %r (current=%r, target=%r)",
            fallback_path,
            current_location,
            target_location,
        )
        return fallback_path
    return current_location


def to_redirect(
    guard: GuardInterface,
    *,
    current_location: LocationAccessor | None = None,
    target_location: LocationAccessor | None = None,
    settings: GuardSettings | None = None,
) -> RedirectCallback:
    """
    Build a redirect callback for a host router.

    Args:
        guard: Guard to evaluate on every navigation
        current_location: Reads where the user currently is. Without it,
            every block resolves to the settings' fallback path.
        target_location: Reads where the user is going (default: ``state.path``)
        settings: Supplies the fallback path for blocks

    Returns:
        Coroutine function ``(context, state) -> str | None``. Exceptions
        raised by the guard propagate to the router unchanged.
    """
    settings = settings or DEFAULT_SETTINGS
    read_target = target_location or _state_path

    async def redirect(context: Any, state: Any) -> str | None:
        decision = await guard.evaluate(context, state)
        if not decision.is_block:
            return resolve_redirect_path(decision, None, None, settings.fallback_path)
        current = (
            await maybe_await(current_location(context, state))
            if current_location
            else None
        )
        target = await maybe_await(read_target(context, state))
        return resolve_redirect_path(decision, current, target, settings.fallback_path)

    return redirect
