"""
Guards for navguard.

Leaf guards decide a single policy; composite guards combine other guards
with AND/OR/XOR semantics; ConditionalGuard restricts a guard to some paths.

Organization:
- base.py: RouteGuard, the resolver-driven base for leaf guards
- basic.py: Constant and callable-backed leaf guards
- composite/: Boolean combinators
- conditional.py: Path-based application
"""

from navguard.guards.base import RouteGuard
from navguard.guards.basic import (
    AllowGuard,
    CallbackGuard,
    RedirectFunctionGuard,
    RedirectGuard,
    RedirectIfGuard,
    always_allow,
    always_redirect,
)
from navguard.guards.composite import (
    All,
    And,
    AndAll,
    AnyOf,
    CompositeGuard,
    OneOf,
    Or,
    OrAll,
    Xor,
    XorAll,
)
from navguard.guards.conditional import ConditionalGuard

__all__ = [
    # Leaf guards
    "RouteGuard",
    "AllowGuard",
    "RedirectGuard",
    "CallbackGuard",
    "RedirectFunctionGuard",
    "RedirectIfGuard",
    "always_allow",
    "always_redirect",
    # Composition patterns
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
    # Conditional application
    "ConditionalGuard",
]
