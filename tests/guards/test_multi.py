"""Tests for the n-ary combinators All, AnyOf, OneOf and XorAll."""

import asyncio

import pytest

from navguard.domain.exceptions import ConfigurationError
from navguard.domain.models import Decision, ExecutionOrder
from navguard.guards import (
    All,
    AllowGuard,
    AndAll,
    AnyOf,
    OneOf,
    OrAll,
    RedirectGuard,
    RouteGuard,
    XorAll,
)


class CountingGuard(RouteGuard):
    """Settles with a fixed decision and counts evaluations."""

    def __init__(self, decision: Decision, delay: float = 0.0):
        self.decision = decision
        self.delay = delay
        self.call_count = 0

    async def on_navigation(self, resolver, context, state):
        self.call_count += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        resolver.resolve(self.decision)


class DeactivatingGuard(RouteGuard):
    def __init__(self, decision: Decision):
        self.decision = decision

    def on_navigation(self, resolver, context, state):
        context.active = False
        resolver.resolve(self.decision)


def allow(delay: float = 0.0) -> CountingGuard:
    return CountingGuard(Decision.allow(), delay)


def redirect(path: str, delay: float = 0.0) -> CountingGuard:
    return CountingGuard(Decision.redirect(path), delay)


class TestConstruction:
    @pytest.mark.parametrize("cls", [All, AnyOf, OneOf])
    def test_empty_guard_list_rejected(self, cls) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            cls([])

        assert exc_info.value.field == "guards"
        assert cls.__name__ in str(exc_info.value)

    @pytest.mark.parametrize("cls", [All, AnyOf, OneOf])
    def test_empty_generator_rejected(self, cls) -> None:
        """Emptiness is checked after the children are materialised."""
        with pytest.raises(ConfigurationError) as exc_info:
            cls(RedirectGuard(p) for p in [])

        assert exc_info.value.field == "guards"

    def test_generator_of_guards_accepted(self, evaluate) -> None:
        guard = AnyOf(RedirectGuard(p) for p in ["/a", "/b"])

        assert len(guard.guards) == 2
        assert evaluate(guard) == Decision.redirect("/a")

    @pytest.mark.parametrize("cls", [AnyOf, OneOf])
    def test_empty_fallback_rejected(self, cls) -> None:
        with pytest.raises(ConfigurationError):
            cls([AllowGuard()], fallback_redirect="")

    def test_xor_all_requires_redirect_path(self) -> None:
        with pytest.raises(ConfigurationError):
            XorAll([AllowGuard()], "")

    def test_aliases(self) -> None:
        assert AndAll is All
        assert OrAll is AnyOf

    def test_guards_are_stored_as_tuple(self) -> None:
        children = [AllowGuard(), AllowGuard()]
        guard = All(children)
        children.append(RedirectGuard("/late"))

        assert len(guard.guards) == 2
        assert isinstance(guard.guards, tuple)


class TestAll:
    def test_all_allow(self, evaluate) -> None:
        assert evaluate(All([allow(), allow(), allow()])) == Decision.allow()

    def test_single_child_is_transparent(self, evaluate) -> None:
        assert evaluate(All([RedirectGuard("/x")])) == Decision.redirect("/x")

    def test_stops_at_first_redirect(self, evaluate) -> None:
        tail = allow()
        guards = [allow(), redirect("/b"), redirect("/c"), tail]

        assert evaluate(All(guards)) == Decision.redirect("/b")
        assert tail.call_count == 0

    def test_reverse(self, evaluate) -> None:
        head = redirect("/a")
        guard = All([head, allow(), redirect("/c")], ExecutionOrder.REVERSE)

        assert evaluate(guard) == Decision.redirect("/c")
        assert head.call_count == 0

    def test_parallel_first_redirect_by_index(self, evaluate) -> None:
        guards = [allow(), redirect("/b", delay=0.02), redirect("/c")]

        result = evaluate(All(guards, ExecutionOrder.PARALLEL))

        assert result == Decision.redirect("/b")
        assert all(g.call_count == 1 for g in guards)

    def test_returns_last_allow_decision(self, evaluate) -> None:
        hinted = CountingGuard(Decision.allow(reevaluate_on_change=True))

        result = evaluate(All([allow(), hinted]))

        assert result.reevaluate_on_change is True

    def test_stale_context(self, evaluate, live_settings) -> None:
        tail = redirect("/never")
        guard = All(
            [DeactivatingGuard(Decision.allow()), tail], settings=live_settings
        )

        assert evaluate(guard) == Decision.allow()
        assert tail.call_count == 0

    def test_reevaluation_is_deterministic(self, evaluate) -> None:
        guard = All([allow(), redirect("/b")], ExecutionOrder.PARALLEL)

        assert evaluate(guard) == evaluate(guard)


class TestAnyOf:
    def test_stops_at_first_allow(self, evaluate) -> None:
        tail = redirect("/c")
        guards = [redirect("/a"), allow(), tail]

        assert evaluate(AnyOf(guards)) == Decision.allow()
        assert tail.call_count == 0

    def test_all_fail_without_fallback_returns_first(self, evaluate) -> None:
        guard = AnyOf([redirect("/a"), redirect("/b")])

        assert evaluate(guard) == Decision.redirect("/a")

    def test_all_fail_with_fallback(self, evaluate) -> None:
        guard = AnyOf([redirect("/a"), redirect("/b")], "/forbidden")

        assert evaluate(guard) == Decision.redirect("/forbidden")

    def test_fallback_unused_when_one_passes(self, evaluate) -> None:
        guard = AnyOf([redirect("/a"), allow()], "/forbidden")

        assert evaluate(guard) == Decision.allow()

    def test_reverse_first_failure(self, evaluate) -> None:
        guard = AnyOf([redirect("/a"), redirect("/b")], None, ExecutionOrder.REVERSE)

        assert evaluate(guard) == Decision.redirect("/b")

    def test_parallel_first_failure_by_index(self, evaluate) -> None:
        guard = AnyOf(
            [redirect("/a", delay=0.02), redirect("/b")],
            execution_order=ExecutionOrder.PARALLEL,
        )

        assert evaluate(guard) == Decision.redirect("/a")

    def test_stale_context(self, evaluate, live_settings) -> None:
        guard = AnyOf(
            [DeactivatingGuard(Decision.redirect("/a")), redirect("/b")],
            "/forbidden",
            settings=live_settings,
        )

        assert evaluate(guard) == Decision.allow()


class TestOneOf:
    def test_exactly_one(self, evaluate) -> None:
        guard = OneOf([redirect("/a"), allow(), redirect("/c")])

        assert evaluate(guard) == Decision.allow()

    @pytest.mark.parametrize("order", list(ExecutionOrder))
    @pytest.mark.parametrize(
        "pattern",
        [
            ("allow", "allow", "redirect"),
            ("allow", "redirect", "redirect"),
            ("allow", "allow", "allow"),
            ("redirect", "redirect", "redirect"),
        ],
    )
    def test_evaluates_every_child(self, evaluate, order, pattern) -> None:
        guards = [allow() if kind == "allow" else redirect("/r") for kind in pattern]

        evaluate(OneOf(guards, execution_order=order))

        assert [g.call_count for g in guards] == [1, 1, 1]

    def test_two_pass_with_fallback(self, evaluate) -> None:
        guard = OneOf([allow(), allow(), redirect("/c")], "/conflict")

        assert evaluate(guard) == Decision.redirect("/conflict")

    def test_two_pass_returns_first_failure(self, evaluate) -> None:
        guard = OneOf([allow(), redirect("/b"), allow(), redirect("/d")])

        assert evaluate(guard) == Decision.redirect("/b")

    def test_none_pass_returns_first_failure(self, evaluate) -> None:
        guard = OneOf([redirect("/a"), redirect("/b")])

        assert evaluate(guard) == Decision.redirect("/a")

    def test_all_pass_without_failures_blocks(self, evaluate) -> None:
        assert evaluate(OneOf([allow(), allow()])).is_block

    def test_reverse_first_failure(self, evaluate) -> None:
        guard = OneOf([redirect("/a"), redirect("/b")], None, ExecutionOrder.REVERSE)

        assert evaluate(guard) == Decision.redirect("/b")

    def test_parallel(self, evaluate) -> None:
        guard = OneOf(
            [redirect("/a", delay=0.01), allow(), redirect("/c")],
            execution_order=ExecutionOrder.PARALLEL,
        )

        assert evaluate(guard) == Decision.allow()

    def test_xor_all(self, evaluate) -> None:
        guard = XorAll([allow(), allow()], "/x")

        assert guard.redirect_path == "/x"
        assert evaluate(guard) == Decision.redirect("/x")
        assert evaluate(XorAll([allow(), redirect("/b")], "/x")).is_allowed
