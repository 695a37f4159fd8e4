"""Numeric leaves.  Work with any mutually comparable values."""

from __future__ import annotations

from typing import Any

from vouch.constraints._base import leaf
from vouch.engine.validator import Validator


def at_least(minimum: Any) -> Validator[Any, Any]:
    return leaf("vouch.number.at_least", lambda value: value >= minimum, minimum)


def at_most(maximum: Any) -> Validator[Any, Any]:
    return leaf("vouch.number.at_most", lambda value: value <= maximum, maximum)


def between(low: Any, high: Any) -> Validator[Any, Any]:
    """Inclusive range check."""
    return leaf("vouch.number.between", lambda value: low <= value <= high, low, high)


def positive() -> Validator[Any, Any]:
    return leaf("vouch.number.positive", lambda value: value > 0)


def negative() -> Validator[Any, Any]:
    return leaf("vouch.number.negative", lambda value: value < 0)
