"""Shared helper for leaf constraints."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from vouch.domain.messages import templated
from vouch.domain.outcome import satisfied_if
from vouch.engine.constraint import constraint
from vouch.engine.validator import Validator


def leaf(key: str, test: Callable[[Any], bool], *args: Any) -> Validator[Any, Any]:
    """Single-predicate validator whose constraint id is also its catalog key.

    Examples:
        >>> leaf("vouch.number.positive", lambda v: v > 0).validate(3).is_success
        True
    """
    return constraint(
        key, lambda value, env: satisfied_if(test(value), lambda: templated(key, *args))
    )
