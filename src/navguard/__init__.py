"""
navguard: asynchronous navigation guards with boolean combinators.

Guards decide whether a navigation may proceed (allow) or must go
somewhere else (redirect). Guards compose with AND/OR/XOR combinators,
sequentially or in parallel, and can be restricted to some paths.

Example:
    from navguard import All, AnyOf, ConditionalGuard, RouteGuard, to_redirect

    class AuthGuard(RouteGuard):
        async def on_navigation(self, resolver, context, state):
            if context.user is None:
                resolver.redirect("/login")
            else:
                resolver.allow()

    guard = ConditionalGuard.excluding(
        All([AuthGuard(), AnyOf([AdminGuard(), OwnerGuard()], "/forbidden")]),
        ["/login", "/public/**"],
    )
    redirect = to_redirect(guard)
    path = await redirect(context, state)  # None means "proceed"
"""

# Application layer (host integration)
from navguard.application import GuardChain, resolve_redirect_path, to_redirect

# Domain exceptions
from navguard.domain.exceptions import ConfigurationError, GuardError

# Domain interfaces (for type hints and custom implementations)
from navguard.domain.interfaces import GuardInterface

# Domain models
from navguard.domain.models import (
    BLOCK_TARGET,
    DEFAULT_SETTINGS,
    Decision,
    DecisionKind,
    ExecutionOrder,
    GuardSettings,
)
from navguard.domain.path_matcher import PathMatcher, compile_glob
from navguard.domain.resolver import NavigationResolver

# Guards
from navguard.guards import (
    All,
    AllowGuard,
    And,
    AndAll,
    AnyOf,
    CallbackGuard,
    CompositeGuard,
    ConditionalGuard,
    OneOf,
    Or,
    OrAll,
    RedirectFunctionGuard,
    RedirectGuard,
    RedirectIfGuard,
    RouteGuard,
    Xor,
    XorAll,
    always_allow,
    always_redirect,
)

# Infrastructure (explicit import encouraged for configuration loading)
from navguard.infrastructure import GuardRegistry, PolicyLoader

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "BLOCK_TARGET",
    "DEFAULT_SETTINGS",
    "Decision",
    "DecisionKind",
    "ExecutionOrder",
    "GuardSettings",
    "NavigationResolver",
    "PathMatcher",
    "compile_glob",
    # Domain interfaces
    "GuardInterface",
    # Domain exceptions
    "GuardError",
    "ConfigurationError",
    # Guards
    "RouteGuard",
    "AllowGuard",
    "RedirectGuard",
    "CallbackGuard",
    "RedirectFunctionGuard",
    "RedirectIfGuard",
    "always_allow",
    "always_redirect",
    "CompositeGuard",
    "And",
    "Or",
    "Xor",
    "All",
    "AndAll",
    "AnyOf",
    "OrAll",
    "OneOf",
    "XorAll",
    "ConditionalGuard",
    # Application layer
    "GuardChain",
    "resolve_redirect_path",
    "to_redirect",
    # Infrastructure
    "GuardRegistry",
    "PolicyLoader",
]
