"""Tests for rich rendering of guard compositions."""

from rich.console import Console

from navguard.domain.models import ExecutionOrder
from navguard.guards import (
    All,
    AllowGuard,
    AnyOf,
    ConditionalGuard,
    RedirectGuard,
    Xor,
)
from navguard.visualization import build_guard_tree, describe_guard, print_guard_tree


class TestDescribeGuard:
    def test_leaf_guards(self) -> None:
        assert describe_guard(AllowGuard()) == "AllowGuard"
        assert describe_guard(RedirectGuard("/login")) == "RedirectGuard -> /login"

    def test_combinators_show_order_and_targets(self) -> None:
        xor = Xor(AllowGuard(), AllowGuard(), "/x", ExecutionOrder.PARALLEL)
        any_of = AnyOf([AllowGuard()], "/forbidden")

        assert describe_guard(xor) == "Xor (parallel, redirect=/x)"
        assert describe_guard(any_of) == "AnyOf (sequential, fallback=/forbidden)"
        assert describe_guard(All([AllowGuard()])) == "All (sequential)"

    def test_conditional_shows_rules(self) -> None:
        guard = ConditionalGuard.excluding(AllowGuard(), ["/login"])

        assert describe_guard(guard) == "ConditionalGuard (exclude=['/login'])"
        assert "everywhere" in describe_guard(ConditionalGuard(AllowGuard()))


class TestBuildGuardTree:
    def test_tree_mirrors_composition(self) -> None:
        guard = ConditionalGuard.including(
            All([AllowGuard(), AnyOf([RedirectGuard("/a"), AllowGuard()])]),
            ["/admin/**"],
        )

        tree = build_guard_tree(guard)

        assert len(tree.children) == 1
        all_node = tree.children[0]
        assert len(all_node.children) == 2
        assert len(all_node.children[1].children) == 2

    def test_print_renders_labels(self) -> None:
        console = Console(record=True, width=120)
        guard = ConditionalGuard.including(
            All([RedirectGuard("/login")]), ["/admin/**"]
        )

        print_guard_tree(guard, console)
        output = console.export_text()

        assert "ConditionalGuard" in output
        assert "RedirectGuard -> /login" in output
        assert "^/admin/.*$" in output
