"""
Path matching for conditional guard application.

A PathMatcher combines exact paths and compiled patterns into a single
predicate. Exclusion is checked first and always wins; with no inclusion
rules every non-excluded path matches.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from navguard.domain.exceptions import ConfigurationError

PathRule = str | re.Pattern[str]

_GLOB_CHARS = ("*", "?")


def compile_glob(pattern: str) -> re.Pattern[str]:
    """
    Compile a glob into an anchored regular expression.

    Supported wildcards:
        ``**`` matches any run of characters, including ``/``
        ``*``  matches any run of characters except ``/``
        ``?``  matches a single character except ``/``

    Everything else is matched literally.

    Args:
        pattern: Glob such as ``/admin/**`` or ``/users/?/edit``

    Returns:
        Compiled pattern matching the whole path

    Raises:
        ConfigurationError: If the pattern is empty
    """
    if not pattern:
        raise ConfigurationError("Glob pattern cannot be empty", "pattern")

    parts = ["^"]
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "*":
            if pattern.startswith("**", i):
                parts.append(".*")
                i += 2
            else:
                parts.append("[^/]*")
                i += 1
            continue
        if char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        i += 1
    parts.append("$")
    return re.compile("".join(parts))


def _require_collection(rules: Iterable[PathRule], field: str) -> None:
    if isinstance(rules, str):
        raise ConfigurationError(
            f"{field} must be a collection of rules, not a single string", field
        )


def split_patterns(
    rules: Iterable[PathRule],
    field: str = "rules",
) -> tuple[frozenset[str], tuple[re.Pattern[str], ...]]:
    """
    Split mixed rules into exact paths and compiled patterns.

    Compiled regexes are kept unmodified, strings containing ``*`` or ``?``
    are compiled as globs, and any other string is an exact path.

    Returns:
        Tuple of (exact paths, patterns)

    Raises:
        ConfigurationError: If ``rules`` is a bare string
    """
    _require_collection(rules, field)
    exact: set[str] = set()
    patterns: list[re.Pattern[str]] = []
    for rule in rules:
        if isinstance(rule, re.Pattern):
            patterns.append(rule)
        elif any(c in rule for c in _GLOB_CHARS):
            patterns.append(compile_glob(rule))
        else:
            exact.add(rule)
    return frozenset(exact), tuple(patterns)


def _coerce_patterns(
    rules: Iterable[PathRule], field: str
) -> tuple[re.Pattern[str], ...]:
    _require_collection(rules, field)
    return tuple(
        rule if isinstance(rule, re.Pattern) else compile_glob(rule) for rule in rules
    )


@dataclass(frozen=True)
class PathMatcher:
    """
    Inclusion/exclusion predicate over path strings.

    Patterns are applied with ``Pattern.search``: regexes supplied directly
    behave exactly as written, compiled globs are anchored at both ends.
    """

    included_exact: frozenset[str] = frozenset()
    included_patterns: tuple[re.Pattern[str], ...] = ()
    excluded_exact: frozenset[str] = frozenset()
    excluded_patterns: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def from_rules(
        cls,
        include: Iterable[PathRule] = (),
        exclude: Iterable[PathRule] = (),
    ) -> "PathMatcher":
        """Build a matcher from mixed exact/glob/regex rules."""
        included_exact, included_patterns = split_patterns(include, "include")
        excluded_exact, excluded_patterns = split_patterns(exclude, "exclude")
        return cls(
            included_exact=included_exact,
            included_patterns=included_patterns,
            excluded_exact=excluded_exact,
            excluded_patterns=excluded_patterns,
        )

    @classmethod
    def create(
        cls,
        included_paths: Iterable[str] = (),
        included_patterns: Iterable[PathRule] = (),
        excluded_paths: Iterable[str] = (),
        excluded_patterns: Iterable[PathRule] = (),
    ) -> "PathMatcher":
        """
        Build a matcher from explicit exact and pattern collections.

        String entries in the pattern collections are compiled as globs.

        Raises:
            ConfigurationError: If any collection is a bare string
        """
        _require_collection(included_paths, "included_paths")
        _require_collection(excluded_paths, "excluded_paths")
        return cls(
            included_exact=frozenset(included_paths),
            included_patterns=_coerce_patterns(included_patterns, "included_patterns"),
            excluded_exact=frozenset(excluded_paths),
            excluded_patterns=_coerce_patterns(excluded_patterns, "excluded_patterns"),
        )

    @property
    def has_inclusion_rules(self) -> bool:
        return bool(self.included_exact or self.included_patterns)

    def is_excluded(self, path: str) -> bool:
        if path in self.excluded_exact:
            return True
        return any(p.search(path) for p in self.excluded_patterns)

    def is_included(self, path: str) -> bool:
        if not self.has_inclusion_rules:
            return True
        if path in self.included_exact:
            return True
        return any(p.search(path) for p in self.included_patterns)

    def matches(self, path: str) -> bool:
        """Whether a guard should apply to ``path``."""
        if self.is_excluded(path):
            return False
        return self.is_included(path)
