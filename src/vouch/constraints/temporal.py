"""Temporal leaves: past and future relative to the configured clock.

Supported kinds are ``datetime.datetime``, ``datetime.date`` and
``datetime.time``.  Any other kind is rejected when the validator is
built, not when it runs.

Naive datetimes are compared against the clock's wall time with the zone
dropped; aware datetimes are compared as instants.
"""

from __future__ import annotations

import datetime as dt
import operator
from collections.abc import Callable
from typing import Any

from vouch.domain.clock import Clock
from vouch.domain.messages import templated
from vouch.domain.outcome import ConstraintResult, satisfied_if
from vouch.engine.constraint import constraint
from vouch.engine.environment import Environment
from vouch.engine.validator import Validator
from vouch.errors import MisconfigurationError

_NOW: dict[type, Callable[[Clock], Any]] = {
    dt.datetime: lambda clock: clock.now(),
    dt.date: lambda clock: clock.today(),
    dt.time: lambda clock: clock.now().time(),
}


def _resolve(kind: type) -> Callable[[Clock], Any]:
    try:
        return _NOW[kind]
    except KeyError:
        supported = ", ".join(t.__name__ for t in _NOW)
        msg = f"No clock reading for {kind.__name__}; supported kinds: {supported}"
        raise MisconfigurationError(msg) from None


def now(kind: type, clock: Clock) -> Any:
    """Current value of *kind* according to *clock*."""
    return _resolve(kind)(clock)


def _aligned(value: Any, current: Any) -> Any:
    if isinstance(value, dt.datetime) and value.tzinfo is None:
        return current.replace(tzinfo=None)
    return current


def _temporal(key: str, kind: type, compare: Callable[[Any, Any], bool]) -> Validator[Any, Any]:
    reading = _resolve(kind)

    def predicate(value: Any, env: Environment) -> ConstraintResult:
        current = _aligned(value, reading(env.clock))
        return satisfied_if(compare(value, current), lambda: templated(key))

    return constraint(key, predicate)


def past(kind: type = dt.datetime) -> Validator[Any, Any]:
    return _temporal("vouch.temporal.past", kind, operator.lt)


def past_or_present(kind: type = dt.datetime) -> Validator[Any, Any]:
    return _temporal("vouch.temporal.past_or_present", kind, operator.le)


def future(kind: type = dt.datetime) -> Validator[Any, Any]:
    return _temporal("vouch.temporal.future", kind, operator.gt)


def future_or_present(kind: type = dt.datetime) -> Validator[Any, Any]:
    return _temporal("vouch.temporal.future_or_present", kind, operator.ge)
