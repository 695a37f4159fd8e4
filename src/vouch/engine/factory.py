"""Object factory: validate constructor arguments, then construct.

Each argument carries an explicit label used as its path segment::

    factory = ObjectFactory(
        User,
        arg("name", raw_name, not_blank()),
        arg("age", raw_age, parse_int() >> between(0, 150)),
    )
    user = factory.create()

An argument source may itself be an ObjectFactory; it is built under the
argument's path segment.

INVARIANT: The constructor runs only when every argument succeeded.
INVARIANT: Constructor exceptions become failures; ``try_create`` never raises them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from vouch.config.models import ValidationConfig
from vouch.domain.messages import Message, Text
from vouch.domain.outcome import Failure, Outcome, Result, Success
from vouch.engine.environment import Environment
from vouch.engine.validator import Validator
from vouch.errors import MessageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONSTRUCT_ID = "vouch.factory.construct"


@dataclass(frozen=True)
class Arg:
    """One labeled constructor argument.

    Attributes:
        label: Path segment and, with ``keywords=True``, the keyword name.
        source: Raw value, or an ObjectFactory built in place.
        validator: Optional validator applied to the value.
    """

    label: str
    source: Any
    validator: Validator[Any, Any] | None = None

    def evaluate(self, env: Environment) -> Outcome[Any]:
        if isinstance(self.source, ObjectFactory):
            outcome = self.source.build(env)
            if not isinstance(outcome, Success):
                return outcome
            value = outcome.value
        else:
            value = self.source
        if self.validator is None:
            return Success(value)
        return self.validator(value, env)


def arg(label: str, source: Any, validator: Validator[Any, Any] | None = None) -> Arg:
    return Arg(label, source, validator)


class ObjectFactory(Generic[T]):
    """Build a T from validated arguments.

    Parameters:
        constructor: Callable receiving the validated argument values.
        args: Labeled arguments, in call order.
        root: Root label.  Defaults to ``constructor.__qualname__``.
        validator: Optional validator run on the constructed object.
        keywords: Pass arguments as keywords named by their labels.
    """

    def __init__(
        self,
        constructor: Callable[..., T],
        *args: Arg,
        root: str | None = None,
        validator: Validator[T, T] | None = None,
        keywords: bool = False,
    ) -> None:
        self.constructor = constructor
        self.args = args
        self.root = root or getattr(constructor, "__qualname__", repr(constructor))
        self.validator = validator
        self.keywords = keywords

    def build(self, env: Environment) -> Outcome[T]:
        """Evaluate the arguments and construct within *env*."""
        env = env.with_root(self.root, self.constructor)
        values: list[Any] = []
        messages: list[Message] = []
        for argument in self.args:
            outcome = argument.evaluate(env.push(argument.label, argument.source))
            if not outcome.is_success:
                if env.fail_fast:
                    return Failure(outcome.messages)
                messages.extend(outcome.messages)
                continue
            values.append(outcome.value)
        if messages:
            return Failure(messages)

        try:
            if self.keywords:
                instance = self.constructor(
                    **{a.label: v for a, v in zip(self.args, values, strict=True)}
                )
            else:
                instance = self.constructor(*values)
        except MessageError as exc:
            logger.debug("Constructor %s rejected its arguments", self.root, exc_info=True)
            return Failure([env.stamp(exc.message, CONSTRUCT_ID, tuple(values), cause=exc)])
        except Exception as exc:
            logger.debug("Constructor %s raised", self.root, exc_info=True)
            message = Text(content=str(exc) or type(exc).__name__)
            return Failure([env.stamp(message, CONSTRUCT_ID, tuple(values), cause=exc)])

        if self.validator is None:
            return Success(instance)
        return self.validator(instance, env)

    def try_create(self, config: ValidationConfig | None = None) -> Result[T]:
        """Build the object; returns Success or Failure, never raises."""
        return self.build(Environment.create(config)).to_result()

    def create(self, config: ValidationConfig | None = None) -> T:
        """Build the object, raising ValidationError on failure."""
        return self.try_create(config).value_or_raise()

    def as_validator(self) -> Validator[Any, T]:
        """Adapt to a Validator that ignores its input."""
        return Validator(lambda _input, env: self.build(env))
