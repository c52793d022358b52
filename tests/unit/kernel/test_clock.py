"""Unit tests for the clock implementations."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from mp_catalog.kernel.time import FrozenClock, SystemClock
from mp_catalog.testing.fakes import FAKE_NOW, FakeClock


class TestSystemClock:
    def test_now_is_aware_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC


class TestFrozenClock:
    def test_reports_fixed_instant(self) -> None:
        clock = FrozenClock(datetime(2026, 3, 10, 8, 30, tzinfo=UTC))
        assert clock.now() == clock.now() == datetime(2026, 3, 10, 8, 30, tzinfo=UTC)

    def test_rejects_naive_datetime(self) -> None:
        with pytest.raises(ValueError, match="timezone-aware"):
            FrozenClock(datetime(2026, 3, 10, 8, 30))

    def test_advance_moves_now(self) -> None:
        clock = FakeClock()
        moved = clock.advance(timedelta(days=1))
        assert moved == clock.now() == FAKE_NOW + timedelta(days=1)
