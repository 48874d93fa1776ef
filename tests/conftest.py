"""Shared pytest fixtures for navguard tests."""

import asyncio
from dataclasses import dataclass

import pytest

from navguard.domain.interfaces import GuardInterface
from navguard.domain.models import Decision, GuardSettings


@dataclass
class FakeState:
    """Host request state: only the path is read by navguard."""

    path: str


@dataclass
class FakeContext:
    """Host request context whose liveness can be toggled mid-evaluation."""

    active: bool = True


@pytest.fixture
def state() -> FakeState:
    """Request state targeting a protected page."""
    return FakeState(path="/dashboard")


@pytest.fixture
def make_state():
    """Factory for request states targeting arbitrary paths."""
    return FakeState


@pytest.fixture
def context() -> FakeContext:
    """Active request context."""
    return FakeContext()


@pytest.fixture
def live_settings() -> GuardSettings:
    """Settings whose continuation check reads FakeContext.active."""
    return GuardSettings(is_context_active=lambda ctx: ctx.active)


@pytest.fixture
def evaluate(context: FakeContext, state: FakeState):
    """Run a guard to completion on a fresh event loop."""

    def _evaluate(
        guard: GuardInterface,
        ctx: FakeContext | None = None,
        st: FakeState | None = None,
    ) -> Decision:
        return asyncio.run(guard.evaluate(ctx or context, st or state))

    return _evaluate
