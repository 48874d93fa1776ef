"""
Visualization tools for navguard.

Renders guard compositions as trees on the console.
"""

from navguard.visualization.tree import (
    build_guard_tree,
    describe_guard,
    print_guard_tree,
)

__all__ = [
    "build_guard_tree",
    "describe_guard",
    "print_guard_tree",
]
