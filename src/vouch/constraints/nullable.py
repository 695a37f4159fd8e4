"""Null handling."""

from __future__ import annotations

from typing import Any

from vouch.constraints._base import leaf
from vouch.domain.outcome import Success
from vouch.engine.validator import Validator


def is_null() -> Validator[Any, Any]:
    return leaf("vouch.nullable.is_null", lambda value: value is None)


def not_null() -> Validator[Any, Any]:
    return leaf("vouch.nullable.not_null", lambda value: value is not None)


def optional(validator: Validator[Any, Any]) -> Validator[Any, Any]:
    """Accept None; run *validator* on anything else."""
    return Validator(
        lambda value, env: Success(None) if value is None else validator(value, env)
    )
