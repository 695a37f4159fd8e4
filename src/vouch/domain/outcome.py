"""Constraint results and validation outcomes.

ConstraintResult is the answer of one predicate: Satisfied or Violated.

ValidationOutcome is the answer of a validator:
- Success(value): no violations.
- Failure(messages): violations and no usable value.
- Partial(value, messages): violations, but a value is still computable.
  Partial is an inclusive-or used so ``or`` and ``map`` keep checking in
  collect-all mode.  Entry points never return it (see ``to_result``).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from vouch.domain.messages import Message
from vouch.errors import ValidationError

T = TypeVar("T")

# --- Constraint results ---


@dataclass(frozen=True)
class Satisfied:
    """The predicate held."""


@dataclass(frozen=True)
class Violated:
    """The predicate failed with *message*."""

    message: Message


SATISFIED = Satisfied()

ConstraintResult = Union[Satisfied, Violated]


def satisfied_if(condition: bool, message: Callable[[], Message]) -> ConstraintResult:
    """Return Satisfied, or Violated with a lazily built message."""
    if condition:
        return SATISFIED
    return Violated(message())


# --- Validation outcomes ---


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    is_success = True
    is_failure = False
    has_value = True

    @property
    def messages(self) -> tuple[Message, ...]:
        return ()

    def value_or_raise(self) -> T:
        return self.value

    def to_result(self) -> Success[T]:
        return self


@dataclass(frozen=True, init=False)
class Failure:
    messages: tuple[Message, ...]

    is_success = False
    is_failure = True
    has_value = False

    def __init__(self, messages: Sequence[Message]) -> None:
        object.__setattr__(self, "messages", tuple(messages))

    def value_or_raise(self) -> Any:
        raise ValidationError(self.messages)

    def to_result(self) -> Failure:
        return self


@dataclass(frozen=True, init=False)
class Partial(Generic[T]):
    value: T
    messages: tuple[Message, ...]

    is_success = False
    is_failure = True
    has_value = True

    def __init__(self, value: T, messages: Sequence[Message]) -> None:
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "messages", tuple(messages))

    def value_or_raise(self) -> T:
        raise ValidationError(self.messages)

    def to_result(self) -> Failure:
        return Failure(self.messages)


Outcome = Union[Success[T], Failure, Partial[T]]
Result = Union[Success[T], Failure]


def merge(left: Outcome[Any], right: Outcome[T]) -> Outcome[T]:
    """Combine two outcomes computed on the same input (``and`` rules).

    Success+Success keeps the right value; any pure Failure yields a
    Failure; otherwise a Partial with the right value.  Messages are
    always ordered left then right.
    """
    messages = (*left.messages, *right.messages)
    if isinstance(left, Failure) or isinstance(right, Failure):
        return Failure(messages)
    if not messages:
        return right
    return Partial(right.value, messages)
