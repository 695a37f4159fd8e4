"""Validator combinators: and, or, then/chain, map.

A Validator wraps ``fn(input, env) -> Outcome``.  Combinators build new
validators from existing ones; the operator forms (``&``, ``|``, ``>>``)
call the named functions and add nothing of their own.

INVARIANT: Combinators never drop or reorder messages: left always
precedes right.
INVARIANT: Entry points (``validate``, ``ensure``, ``run``) never return
a Partial.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from vouch.config.models import ValidationConfig
from vouch.domain.logentry import ViolatedEntry
from vouch.domain.messages import OR_KEY, Composite, Message, Text
from vouch.domain.outcome import Failure, Outcome, Partial, Result, Success, merge
from vouch.engine.accumulate import accumulating, bind
from vouch.engine.constraint import Constraint, Predicate
from vouch.engine.environment import Environment
from vouch.errors import MessageError

logger = logging.getLogger(__name__)

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741
N = TypeVar("N")

MAP_ID = "vouch.map"
FAIL_ID = "vouch.fail"


class Validator(Generic[I, O]):
    """A composable check from an input of type I to an output of type O."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[I, Environment], Outcome[O]]) -> None:
        self._fn = fn

    def __call__(self, input: I, env: Environment) -> Outcome[O]:  # noqa: A002
        return self._fn(input, env)

    # --- Construction ---

    @classmethod
    def identity(cls) -> Validator[I, I]:
        """Accept every input unchanged."""
        return cls(lambda input, env: Success(input))

    @classmethod
    def fail(cls, message: Message | str) -> Validator[I, Any]:
        """Reject every input with *message*."""
        if isinstance(message, str):
            message = Text(content=message)

        def execute(input: I, env: Environment) -> Outcome[Any]:  # noqa: A002
            return Failure([env.stamp(message, FAIL_ID, input)])

        return cls(execute)

    @classmethod
    def from_block(cls, block: Callable[[I, Environment], O]) -> Validator[I, O]:
        """Run ``block(input, env)`` inside a fresh accumulation scope.

        The block reports violations through ``env.accumulate`` (directly or
        via constraint steps) and returns the output value.
        """

        def execute(input: I, env: Environment) -> Outcome[O]:  # noqa: A002
            return accumulating(env, lambda scoped: block(input, scoped))

        return cls(execute)

    # --- Combinators ---

    def and_(self, other: Validator[I, O]) -> Validator[I, O]:
        return and_(self, other)

    def or_(self, other: Validator[I, O]) -> Validator[I, O]:
        return or_(self, other)

    def then(self, other: Validator[O, N]) -> Validator[I, N]:
        return then(self, other)

    def map(self, transform: Callable[[O], N], name: str = "") -> Validator[I, N]:
        return map_(self, transform, name)

    def constrain(self, constraint_id: str, predicate: Predicate) -> Validator[I, O]:
        """Check one more named predicate on this validator's output."""
        check = Constraint(constraint_id, predicate).as_validator()

        def execute(input: I, env: Environment) -> Outcome[O]:  # noqa: A002
            outcome = self(input, env)
            if isinstance(outcome, Failure):
                return outcome
            if isinstance(outcome, Partial) and env.fail_fast:
                return outcome
            return merge(outcome, check(outcome.value, env))

        return Validator(execute)

    def named(self, name: str) -> Validator[I, O]:
        """Run this validator one path segment deeper."""
        return Validator(lambda input, env: self(input, env.push(name, input)))

    def with_message(
        self, message: Message | str | Callable[[Sequence[Message]], Message]
    ) -> Validator[I, O]:
        """Replace the messages of a failed outcome with a single message.

        *message* may be a callable receiving the original messages.
        """

        def execute(input: I, env: Environment) -> Outcome[O]:  # noqa: A002
            outcome = self(input, env)
            if outcome.is_success:
                return outcome
            if isinstance(message, str):
                replacement: Message = Text(content=message)
            elif isinstance(message, Message):
                replacement = message
            else:
                replacement = message(outcome.messages)
            original_id = outcome.messages[0].constraint_id if outcome.messages else ""
            stamped = env.stamp(replacement, original_id, input)
            if isinstance(outcome, Partial):
                return Partial(outcome.value, [stamped])
            return Failure([stamped])

        return Validator(execute)

    def apply(self, input: I, env: Environment) -> O:  # noqa: A002
        """Run inside the active scope of *env* and return the value.

        Messages are fed to the scope; a Failure escapes it.
        """
        return bind(self(input, env), env)

    # --- Entry points ---

    def validate(self, input: I, config: ValidationConfig | None = None) -> Result[O]:  # noqa: A002
        """Validate *input*; returns Success or Failure, never raises."""
        return self(input, Environment.create(config)).to_result()

    def ensure(self, input: I, config: ValidationConfig | None = None) -> O:  # noqa: A002
        """Validate *input* and return the value, raising ValidationError on failure."""
        return self.validate(input, config).value_or_raise()

    # --- Operator sugar ---

    def __and__(self, other: Validator[I, O]) -> Validator[I, O]:
        return and_(self, other)

    def __or__(self, other: Validator[I, O]) -> Validator[I, O]:
        return or_(self, other)

    def __rshift__(self, other: Validator[O, N]) -> Validator[I, N]:
        return then(self, other)


def and_(a: Validator[I, O], b: Validator[I, O]) -> Validator[I, O]:
    """Both validators must accept the input.

    In fail-fast mode *b* is skipped once *a* has failed.
    """

    def execute(input: I, env: Environment) -> Outcome[O]:  # noqa: A002
        left = a(input, env)
        if env.fail_fast and left.is_failure:
            return left
        return merge(left, b(input, env))

    return Validator(execute)


def or_(a: Validator[I, O], b: Validator[I, O]) -> Validator[I, O]:
    """At least one validator must accept the input.

    *b* only runs when *a* did not succeed.  When both fail the result
    carries one Composite message holding both branches.  If either branch
    still computed a value the result is Partial with that value, the
    first branch taking precedence.
    """

    def execute(input: I, env: Environment) -> Outcome[O]:  # noqa: A002
        first = a(input, env)
        if first.is_success:
            return first
        second = b(input, env)
        if second.is_success:
            return second
        composite = env.stamp(
            Composite(first_branch=first.messages, second_branch=second.messages),
            OR_KEY,
            input,
        )
        sink = env.config.logger
        if sink is not None:
            sink(
                ViolatedEntry(
                    constraint_id=OR_KEY,
                    root=env.root,
                    path=env.path.full_name,
                    input=input,
                    args=list(composite.args),
                )
            )
        for branch in (first, second):
            if isinstance(branch, Partial):
                return Partial(branch.value, [composite])
        return Failure([composite])

    return Validator(execute)


def then(a: Validator[I, O], b: Validator[O, N]) -> Validator[I, N]:
    """Feed the output of *a* into *b*.

    If *a* did not succeed its messages are returned as a Failure and *b*
    never runs; the output type changes, so no partial value carries over.
    """

    def execute(input: I, env: Environment) -> Outcome[N]:  # noqa: A002
        first = a(input, env)
        if isinstance(first, Success):
            return b(first.value, env)
        if isinstance(first, Failure):
            return first
        return Failure(first.messages)

    return Validator(execute)


def chain(*validators: Validator[Any, Any]) -> Validator[Any, Any]:
    """``then`` over any number of validators, left to right."""
    if not validators:
        return Validator.identity()
    return functools.reduce(then, validators)


def map_(
    a: Validator[I, O], transform: Callable[[O], N], name: str = ""
) -> Validator[I, N]:
    """Transform the output of *a*.

    On Success an exception from *transform* becomes a failure message
    carrying the exception as cause; a MessageError supplies the message.
    On Partial the value is still transformed when the result keeps the
    same type, so later collect-all steps see the new value.
    """

    def execute(input: I, env: Environment) -> Outcome[N]:  # noqa: A002
        scoped = env.push(name) if name else env
        outcome = a(input, scoped)
        if isinstance(outcome, Success):
            try:
                return Success(transform(outcome.value))
            except MessageError as exc:
                message = scoped.stamp(exc.message, MAP_ID, outcome.value, cause=exc)
            except Exception as exc:
                message = scoped.stamp(
                    Text(content=str(exc)), MAP_ID, outcome.value, cause=exc
                )
            logger.debug("Transform failed at %r: %s", scoped.path.full_name, message.text)
            return Failure([message])
        if isinstance(outcome, Partial):
            try:
                transformed = transform(outcome.value)
            except Exception:
                return Failure(outcome.messages)
            if type(transformed) is type(outcome.value):
                return Partial(transformed, outcome.messages)
            return Failure(outcome.messages)
        return outcome

    return Validator(execute)


def run(block: Callable[[Environment], O], config: ValidationConfig | None = None) -> Result[O]:
    """Run a validation block over a fresh environment.

    The block receives the environment, reports violations through it and
    returns the validated value.
    """
    return accumulating(Environment.create(config), block).to_result()


def run_or_raise(block: Callable[[Environment], O], config: ValidationConfig | None = None) -> O:
    """Like :func:`run`, raising ValidationError on failure."""
    return run(block, config).value_or_raise()
