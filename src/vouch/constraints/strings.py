"""String leaves: length, blankness, patterns and integer parsing."""

from __future__ import annotations

import re

from vouch.constraints._base import leaf
from vouch.domain.messages import Templated
from vouch.engine.validator import Validator
from vouch.errors import MessageError

IS_INT = "vouch.string.is_int"


def min_length(length: int) -> Validator[str, str]:
    return leaf("vouch.string.min_length", lambda value: len(value) >= length, length)


def max_length(length: int) -> Validator[str, str]:
    return leaf("vouch.string.max_length", lambda value: len(value) <= length, length)


def exact_length(length: int) -> Validator[str, str]:
    return leaf("vouch.string.exact_length", lambda value: len(value) == length, length)


def not_blank() -> Validator[str, str]:
    return leaf("vouch.string.not_blank", lambda value: bool(value.strip()))


def matches(pattern: str | re.Pattern[str]) -> Validator[str, str]:
    """Whole-string regular expression match."""
    compiled = re.compile(pattern)
    return leaf(
        "vouch.string.matches",
        lambda value: compiled.fullmatch(value) is not None,
        compiled.pattern,
    )


def starts_with(prefix: str) -> Validator[str, str]:
    return leaf("vouch.string.starts_with", lambda value: value.startswith(prefix), prefix)


def _to_int(value: str) -> int:
    if not isinstance(value, str):
        raise MessageError(Templated(key=IS_INT, constraint_id=IS_INT))
    try:
        return int(value)
    except ValueError as exc:
        raise MessageError(Templated(key=IS_INT, constraint_id=IS_INT)) from exc


def parse_int() -> Validator[str, int]:
    """Parse a decimal integer string.  Surrounding whitespace is allowed.

    Chain further integer checks with ``>>``::

        parse_int() >> between(0, 150)
    """
    return Validator.identity().map(_to_int)
