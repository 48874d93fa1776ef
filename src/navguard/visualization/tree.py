"""
Console rendering of guard compositions.

Useful when a policy is assembled from configuration and you want to see
what was actually built.
"""

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from navguard.domain.interfaces import GuardInterface
from navguard.domain.path_matcher import PathMatcher
from navguard.guards import (
    AnyOf,
    CompositeGuard,
    ConditionalGuard,
    OneOf,
    RedirectGuard,
    RedirectIfGuard,
    Xor,
)


def _matcher_label(matcher: PathMatcher) -> str:
    parts = []
    include = sorted(matcher.included_exact) + [
        p.pattern for p in matcher.included_patterns
    ]
    exclude = sorted(matcher.excluded_exact) + [
        p.pattern for p in matcher.excluded_patterns
    ]
    if include:
        parts.append(f"include={include}")
    if exclude:
        parts.append(f"exclude={exclude}")
    return " ".join(parts) or "everywhere"


def describe_guard(guard: GuardInterface) -> str:
    """One-line label for a guard (markup-free)."""
    name = type(guard).__name__
    if isinstance(guard, CompositeGuard):
        details = [guard.execution_order.value]
        if isinstance(guard, Xor):
            details.append(f"redirect={guard.redirect_path}")
        elif isinstance(guard, AnyOf | OneOf) and guard.fallback_redirect:
            details.append(f"fallback={guard.fallback_redirect}")
        return f"{name} ({', '.join(details)})"
    if isinstance(guard, ConditionalGuard):
        return f"{name} ({_matcher_label(guard.matcher)})"
    if isinstance(guard, RedirectGuard | RedirectIfGuard):
        return f"{name} -> {guard.path}"
    return name


def build_guard_tree(guard: GuardInterface, tree: Tree | None = None) -> Tree:
    """
    Build a rich Tree mirroring the guard composition.

    Args:
        guard: Root of the composition
        tree: Existing tree to attach to (used for recursion)

    Returns:
        The tree node representing ``guard``
    """
    style = "bold cyan" if isinstance(guard, CompositeGuard) else "green"
    label = f"[{style}]{escape(describe_guard(guard))}[/{style}]"
    node = Tree(label) if tree is None else tree.add(label)

    if isinstance(guard, CompositeGuard):
        for child in guard.guards:
            build_guard_tree(child, node)
    elif isinstance(guard, ConditionalGuard):
        build_guard_tree(guard.guard, node)
    return node


def print_guard_tree(guard: GuardInterface, console: Console | None = None) -> None:
    """Print the guard composition to ``console`` (stdout by default)."""
    (console or Console()).print(build_guard_tree(guard))
