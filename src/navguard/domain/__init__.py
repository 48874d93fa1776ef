"""
Domain layer for navguard.

Contains the decision model, the resolver and path matching, with no
dependencies on the other layers.
"""

from navguard.domain.exceptions import ConfigurationError, GuardError
from navguard.domain.interfaces import GuardInterface, maybe_await
from navguard.domain.models import (
    BLOCK_TARGET,
    DEFAULT_SETTINGS,
    Decision,
    DecisionKind,
    ExecutionOrder,
    GuardSettings,
)
from navguard.domain.path_matcher import (
    PathMatcher,
    PathRule,
    compile_glob,
    split_patterns,
)
from navguard.domain.resolver import NavigationResolver

__all__ = [
    # Models
    "BLOCK_TARGET",
    "DEFAULT_SETTINGS",
    "Decision",
    "DecisionKind",
    "ExecutionOrder",
    "GuardSettings",
    # Resolver
    "NavigationResolver",
    # Path matching
    "PathMatcher",
    "PathRule",
    "compile_glob",
    "split_patterns",
    # Interfaces
    "GuardInterface",
    "maybe_await",
    # Exceptions
    "GuardError",
    "ConfigurationError",
]
