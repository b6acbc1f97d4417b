"""Shared test fixtures."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from mitrai_chat.application.ports.clock import FixedClock
from tests.fakes import FakeRateLimiter, FakeUoW


@pytest.fixture
def uow() -> FakeUoW:
    return FakeUoW()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def limiter() -> FakeRateLimiter:
    return FakeRateLimiter()
