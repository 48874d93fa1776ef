"""
ConditionalGuard: apply a guard only on some paths.

Inclusion rules restrict where the wrapped guard runs, exclusion rules
always skip it. With no inclusion rules the guard applies everywhere that
is not excluded.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from navguard.domain.exceptions import ConfigurationError
from navguard.domain.interfaces import GuardInterface
from navguard.domain.models import Decision
from navguard.domain.path_matcher import PathMatcher, PathRule

logger = logging.getLogger(__name__)

PathAccessor = Callable[[Any], str]


def _state_path(state: Any) -> str:
    return state.path


class ConditionalGuard(GuardInterface):
    """
    Decorates a guard with path-based inclusion and exclusion rules.

    Example:
        # Everywhere except the public pages
        ConditionalGuard.excluding(AuthGuard(), ["/login", "/register"])

        # Only the admin area, but not its status page
        ConditionalGuard(
            AdminGuard(),
            included_patterns=["/admin/**"],
            excluded_paths=["/admin/status"],
        )
    """

    def __init__(
        self,
        guard: GuardInterface,
        *,
        included_paths: Iterable[str] = (),
        included_patterns: Iterable[PathRule] = (),
        excluded_paths: Iterable[str] = (),
        excluded_patterns: Iterable[PathRule] = (),
        path_of: PathAccessor | None = None,
        matcher: PathMatcher | None = None,
    ):
        """
        Args:
            guard: Guard to run when the path matches
            included_paths: Exact paths where the guard applies
            included_patterns: Regexes or glob strings where the guard applies
            excluded_paths: Exact paths that always skip the guard
            excluded_patterns: Regexes or glob strings that always skip the guard
            path_of: Reads the path from the host state (default: ``state.path``)
            matcher: Prebuilt matcher, used instead of the four rule collections

        Raises:
            ConfigurationError: If ``matcher`` is combined with rule
                collections, or a rule collection is a bare string
        """
        self._guard = guard
        if matcher is None:
            matcher = PathMatcher.create(
                included_paths=included_paths,
                included_patterns=included_patterns,
                excluded_paths=excluded_paths,
                excluded_patterns=excluded_patterns,
            )
        elif any(
            isinstance(rules, str) or tuple(rules)
            for rules in (
                included_paths,
                included_patterns,
                excluded_paths,
                excluded_patterns,
            )
        ):
            raise ConfigurationError(
                "Pass either a matcher or path rules, not both", "matcher"
            )
        self._matcher = matcher
        self._path_of = path_of or _state_path

    @classmethod
    def including(
        cls,
        guard: GuardInterface,
        paths: Iterable[PathRule],
        path_of: PathAccessor | None = None,
    ) -> "ConditionalGuard":
        """Apply ``guard`` only on paths matching exact/glob/regex ``paths``."""
        matcher = PathMatcher.from_rules(include=paths)
        return cls(guard, path_of=path_of, matcher=matcher)

    @classmethod
    def excluding(
        cls,
        guard: GuardInterface,
        paths: Iterable[PathRule],
        path_of: PathAccessor | None = None,
    ) -> "ConditionalGuard":
        """Apply ``guard`` everywhere except paths matching ``paths``."""
        matcher = PathMatcher.from_rules(exclude=paths)
        return cls(guard, path_of=path_of, matcher=matcher)

    @property
    def guard(self) -> GuardInterface:
        return self._guard

    @property
    def matcher(self) -> PathMatcher:
        return self._matcher

    async def evaluate(self, context: Any, state: Any) -> Decision:
        path = self._path_of(state)
        if not self._matcher.matches(path):
            logger.debug("ConditionalGuard: %r not matched, skipping guard", path)
            return Decision.allow()
        return await self._guard.evaluate(context, state)

    def __repr__(self) -> str:
        return f"ConditionalGuard({self._guard!r}, {self._matcher!r})"
