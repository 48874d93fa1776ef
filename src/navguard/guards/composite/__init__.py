"""
Composite guards - Guard composition patterns.

These guards combine multiple guards using logical operators.
"""

from navguard.guards.composite.base import CompositeGuard
from navguard.guards.composite.binary import And, Or, Xor
from navguard.guards.composite.multi import All, AndAll, AnyOf, OneOf, OrAll, XorAll

__all__ = [
    "CompositeGuard",
    # Binary
    "And",
    "Or",
    "Xor",
    # N-ary
    "All",
    "AndAll",
    "AnyOf",
    "OrAll",
    "OneOf",
    "XorAll",
]
