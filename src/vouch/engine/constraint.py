"""Constraint step: apply one named predicate inside the active scope.

A predicate is ``(value, env) -> ConstraintResult``.  On Violated the
message is stamped with the constraint id, root label, current path and
offending input before it reaches the scope.

INVARIANT: A stamped message always carries the path it was raised at.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from vouch.domain.logentry import SatisfiedEntry, ViolatedEntry
from vouch.domain.outcome import ConstraintResult, Violated

if TYPE_CHECKING:
    from vouch.engine.environment import Environment
    from vouch.engine.validator import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[Any, "Environment"], ConstraintResult]


def apply(constraint_id: str, predicate: Predicate, input: T, env: Environment) -> T:  # noqa: A002
    """Evaluate *predicate* on *input* and pass *input* through.

    A violation is fed to ``env.accumulate``; in fail-fast mode that call
    escapes the enclosing scope and this function does not return.
    """
    result = predicate(input, env)
    path = env.path.full_name
    sink = env.config.logger

    if not isinstance(result, Violated):
        if sink is not None:
            sink(
                SatisfiedEntry(
                    constraint_id=constraint_id, root=env.root, path=path, input=input
                )
            )
        return input

    message = result.message.stamped(
        constraint_id=constraint_id, root=env.root, path=path, input=input
    )
    logger.debug("Constraint %s violated at %r", constraint_id, path or "<root>")
    if sink is not None:
        sink(
            ViolatedEntry(
                constraint_id=constraint_id,
                root=env.root,
                path=path,
                input=input,
                args=list(message.args),
            )
        )
    env.accumulate([message])
    return input


@dataclass(frozen=True)
class Constraint:
    """A named predicate.

    Attributes:
        id: Constraint identifier stamped on every violation
            (``"vouch.string.min_length"``).
        predicate: ``(value, env) -> ConstraintResult``.
    """

    id: str
    predicate: Predicate

    def apply(self, input: T, env: Environment) -> T:  # noqa: A002
        return apply(self.id, self.predicate, input, env)

    def as_validator(self) -> Validator:
        from vouch.engine.validator import Validator

        return Validator.from_block(self.apply)


def constraint(constraint_id: str, predicate: Predicate) -> Validator:
    """Build a validator that checks a single named predicate."""
    return Constraint(constraint_id, predicate).as_validator()
