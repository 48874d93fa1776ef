"""
Infrastructure layer for navguard.

Adapters around the core: guard discovery through entry points and policy
documents loaded from JSON.
"""

from navguard.infrastructure.policy import PolicyLoader
from navguard.infrastructure.registry import ENTRY_POINT_GROUP, GuardRegistry

__all__ = [
    "ENTRY_POINT_GROUP",
    "GuardRegistry",
    "PolicyLoader",
]
