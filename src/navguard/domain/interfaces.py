"""
Domain interfaces (Ports) for navguard.

The host routing layer only ever talks to guards through GuardInterface:
it hands over an opaque context and state, and gets a Decision back.
"""

import inspect
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from navguard.domain.models import Decision

T = TypeVar("T")


class GuardInterface(ABC):
    """
    Port for navigation decisions.

    Implementations must be immutable after construction: the same guard
    instance is shared by every request the host evaluates, possibly
    concurrently.

    Note (Failure semantics):
        Exceptions raised while evaluating are not caught by navguard.
        They propagate to whoever called evaluate(), aborting any
        combinator logic that was in flight.
    """

    @abstractmethod
    async def evaluate(self, context: Any, state: Any) -> "Decision":
        """
        Decide whether a navigation may proceed.

        Args:
            context: Opaque request context supplied by the host
            state: Opaque request state supplied by the host

        Returns:
            Decision.allow() or a redirect Decision
        """
        pass


async def maybe_await(value: "T | Awaitable[T]") -> T:
    """Await ``value`` if it is awaitable, otherwise return it as-is."""
    if inspect.isawaitable(value):
        return await value
    return value
