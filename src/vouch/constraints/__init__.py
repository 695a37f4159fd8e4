"""Leaf constraints: thin wrappers over the constraint step.

Every leaf uses its constraint id as the catalog key of its message.
This layer may import from engine, domain and errors only.
"""

from vouch.constraints.choices import equals, one_of
from vouch.constraints.collections import (
    each,
    each_key,
    each_value,
    max_size,
    min_size,
    not_empty,
)
from vouch.constraints.nullable import is_null, not_null, optional
from vouch.constraints.numbers import at_least, at_most, between, negative, positive
from vouch.constraints.strings import (
    exact_length,
    matches,
    max_length,
    min_length,
    not_blank,
    parse_int,
    starts_with,
)
from vouch.constraints.temporal import future, future_or_present, now, past, past_or_present

__all__ = [
    "at_least",
    "at_most",
    "between",
    "each",
    "each_key",
    "each_value",
    "equals",
    "exact_length",
    "future",
    "future_or_present",
    "is_null",
    "matches",
    "max_length",
    "max_size",
    "min_length",
    "min_size",
    "negative",
    "not_blank",
    "not_empty",
    "not_null",
    "now",
    "one_of",
    "optional",
    "parse_int",
    "past",
    "past_or_present",
    "positive",
    "starts_with",
]
