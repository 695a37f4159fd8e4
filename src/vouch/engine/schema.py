"""Schema binder: validate the named fields of an object.

A Schema is a Validator built up field by field::

    node = Schema()
    node.field("value", between(0, 100))
    node.field("next", optional(node))

Fields are read as attributes, or as keys when the object is a mapping.
A null object fails with ``vouch.schema.object``; an attribute the object
does not have fails with ``vouch.schema.field`` at that field.
A field whose value is already bound somewhere on the current path is
skipped without a message, so self-referential graphs terminate.

INVARIANT: The root label is registered once per call tree; nested
schemas inherit it.
INVARIANT: Object-level checks see the whole object at the object's path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from vouch.domain.messages import templated
from vouch.domain.outcome import Outcome, Violated
from vouch.engine.accumulate import accumulating
from vouch.engine.constraint import Constraint, Predicate
from vouch.engine.environment import Environment
from vouch.engine.validator import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")

MISSING: Any = object()

_NULL_OBJECT = Constraint(
    "vouch.schema.object", lambda obj, env: Violated(templated("vouch.schema.object"))
)
_MISSING_FIELD = Constraint(
    "vouch.schema.field", lambda value, env: Violated(templated("vouch.schema.field"))
)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    validator: Validator[Any, Any]
    getter: Callable[[Any], Any] | None = None

    def read(self, obj: Any) -> Any:
        if self.getter is not None:
            return self.getter(obj)
        if isinstance(obj, Mapping):
            return obj.get(self.name)
        return getattr(obj, self.name, MISSING)


@dataclass(frozen=True)
class ObjectCheck:
    constraint: Constraint
    require_valid_fields: bool = False


class Schema(Validator[T, T]):
    """Named-field validator for one object type.

    Parameters:
        root: Root label for messages.  Defaults to the validated object's
            type name (``__qualname__``).
    """

    __slots__ = ("root", "_fields", "_checks")

    def __init__(self, root: str | None = None) -> None:
        super().__init__(self._execute)
        self.root = root
        self._fields: list[FieldSpec] = []
        self._checks: list[ObjectCheck] = []

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return tuple(self._fields)

    def field(
        self,
        name: str,
        validator: Validator[Any, Any],
        *,
        getter: Callable[[Any], Any] | None = None,
    ) -> Schema[T]:
        """Register a field validator.  Returns the schema for chaining."""
        self._fields.append(FieldSpec(name, validator, getter))
        return self

    def check(
        self,
        constraint_id: str,
        predicate: Predicate,
        *,
        require_valid_fields: bool = False,
    ) -> Schema[T]:
        """Register an object-level predicate over the whole object.

        In collect-all mode the check also runs when a field already failed,
        unless *require_valid_fields* is set.
        """
        self._checks.append(
            ObjectCheck(Constraint(constraint_id, predicate), require_valid_fields)
        )
        return self

    def _execute(self, obj: T, env: Environment) -> Outcome[T]:
        label = self.root or type(obj).__qualname__
        env = env.with_root(label, obj)

        def block(scoped: Environment) -> T:
            if obj is None:
                _NULL_OBJECT.apply(obj, scoped)
                scoped.abort([])
            fields_failed = False
            for spec in self._fields:
                value = spec.read(obj)
                if value is MISSING:
                    fields_failed = True
                    _MISSING_FIELD.apply(None, scoped.push(spec.name))
                    continue
                if scoped.path.contains_identity(value):
                    logger.debug(
                        "Circular reference at %s.%s, skipped", scoped.path.full_name, spec.name
                    )
                    continue
                outcome = spec.validator(value, scoped.push(spec.name, value))
                if not outcome.is_success:
                    fields_failed = True
                    scoped.accumulate(outcome.messages)
            for check in self._checks:
                if check.require_valid_fields and fields_failed:
                    continue
                check.constraint.apply(obj, scoped)
            return obj

        return accumulating(env, block)
