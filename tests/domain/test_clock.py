"""Tests for clock implementations."""

from __future__ import annotations

import datetime as dt

from vouch.domain.clock import FixedClock, SystemClock


class TestFixedClock:
    def test_returns_instant(self) -> None:
        instant = dt.datetime(2024, 1, 2, 3, 4, tzinfo=dt.UTC)
        assert FixedClock(instant).now() == instant

    def test_naive_instant_is_utc(self) -> None:
        clock = FixedClock(dt.datetime(2024, 1, 2, 3, 4))
        assert clock.now().tzinfo is dt.UTC

    def test_today(self) -> None:
        assert FixedClock(dt.datetime(2024, 1, 2, 3, 4)).today() == dt.date(2024, 1, 2)


class TestSystemClock:
    def test_now_is_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None

    def test_explicit_zone(self) -> None:
        assert SystemClock(dt.UTC).now().utcoffset() == dt.timedelta(0)
