"""Choice leaves: membership and equality."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Any

from vouch.constraints._base import leaf
from vouch.engine.validator import Validator


def one_of(choices: Iterable[Any] | type[enum.Enum]) -> Validator[Any, Any]:
    """Accept a value from *choices*.

    An Enum class accepts both its members and their values.
    """
    if isinstance(choices, type) and issubclass(choices, enum.Enum):
        allowed = [member.value for member in choices]
        members = list(choices)
    else:
        allowed = list(choices)
        members = []
    return leaf(
        "vouch.choice.one_of",
        lambda value: value in members or value in allowed,
        allowed,
    )


def equals(expected: Any) -> Validator[Any, Any]:
    return leaf("vouch.choice.equals", lambda value: value == expected, expected)
