"""vouch: composable validation with located, catalog-rendered messages."""

from vouch.config.models import ValidationConfig
from vouch.domain.clock import Clock, FixedClock, SystemClock
from vouch.domain.messages import Composite, Message, Templated, Text, templated, text
from vouch.domain.outcome import (
    SATISFIED,
    Failure,
    Partial,
    Satisfied,
    Success,
    Violated,
    satisfied_if,
)
from vouch.engine.accumulate import AccumulationScope, accumulating, bind
from vouch.engine.constraint import Constraint, apply, constraint
from vouch.engine.environment import Environment
from vouch.engine.factory import Arg, ObjectFactory, arg
from vouch.engine.schema import Schema
from vouch.engine.validator import Validator, and_, chain, map_, or_, run, run_or_raise, then
from vouch.errors import (
    MessageError,
    MisconfigurationError,
    ScopeError,
    ValidationError,
    VouchError,
)

__version__ = "0.1.0"

__all__ = [
    "SATISFIED",
    "AccumulationScope",
    "Arg",
    "Clock",
    "Composite",
    "Constraint",
    "Environment",
    "Failure",
    "FixedClock",
    "Message",
    "MessageError",
    "MisconfigurationError",
    "ObjectFactory",
    "Partial",
    "Satisfied",
    "Schema",
    "ScopeError",
    "Success",
    "SystemClock",
    "Templated",
    "Text",
    "ValidationConfig",
    "ValidationError",
    "Validator",
    "Violated",
    "VouchError",
    "accumulating",
    "and_",
    "apply",
    "arg",
    "bind",
    "chain",
    "constraint",
    "map_",
    "or_",
    "run",
    "run_or_raise",
    "satisfied_if",
    "templated",
    "text",
    "then",
]
