"""Clock abstraction for temporal constraints.

The system clock is the only external read in the engine.  Tests inject a
FixedClock to make past/future checks deterministic.
"""

from __future__ import annotations

import datetime as dt
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> dt.datetime:
        """Current time as an aware datetime."""
        ...

    def today(self) -> dt.date:
        return self.now().date()


class SystemClock(Clock):
    """Wall clock in the given zone (the local zone when *tz* is None)."""

    def __init__(self, tz: dt.tzinfo | None = None) -> None:
        self._tz = tz

    def now(self) -> dt.datetime:
        if self._tz is None:
            return dt.datetime.now().astimezone()
        return dt.datetime.now(self._tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self._tz!r})"


class FixedClock(Clock):
    """Clock frozen at one instant.  Naive instants are taken as UTC."""

    def __init__(self, instant: dt.datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=dt.UTC)
        self._instant = instant

    def now(self) -> dt.datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"
