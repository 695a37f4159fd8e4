"""Command: validate a JSON payload against a validator from a module."""

from __future__ import annotations

import importlib
import json
import logging
from typing import IO, TYPE_CHECKING, Any

import click

from vouch.commands._base import VouchCommand
from vouch.engine.factory import ObjectFactory
from vouch.engine.validator import Validator
from vouch.errors import MisconfigurationError, VouchError

if TYPE_CHECKING:
    from vouch.commands._context import AppContext

logger = logging.getLogger(__name__)


def load_target(target: str) -> Validator[Any, Any]:
    """Resolve ``module:attribute`` to a Validator.

    The attribute may be dotted.  It must name a Validator (a Schema
    included), an ObjectFactory, or a zero-argument callable returning
    a Validator.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Target must look like 'module:attribute', got '{target}'"
        raise MisconfigurationError(msg)
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module '{module_name}': {exc}"
        raise MisconfigurationError(msg) from exc
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"'{module_name}' has no attribute '{attr_path}'"
            raise MisconfigurationError(msg) from exc

    if isinstance(obj, ObjectFactory):
        return obj.as_validator()
    if not isinstance(obj, Validator) and callable(obj):
        obj = obj()
    if not isinstance(obj, Validator):
        msg = f"'{target}' is not a validator (got {type(obj).__name__})"
        raise MisconfigurationError(msg)
    return obj


@click.command(
    cls=VouchCommand,
    examples="""\
  vouch check myapp.validators:user_schema payload.json
  echo '"ab"' | vouch check myapp.validators:short_name -
  vouch --json --fail-fast check myapp.validators:user_schema payload.json""",
)
@click.argument("target")
@click.argument("payload", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def check(app: AppContext, target: str, payload: IO[str]) -> None:
    """Validate the JSON in PAYLOAD (a file, or - for stdin) with TARGET.

    TARGET is 'module:attribute' naming a validator, a schema or a
    callable that returns one.  Exits 1 when validation fails.
    """
    try:
        validator = load_target(target)
    except MisconfigurationError as exc:
        raise click.BadParameter(str(exc), param_hint="TARGET") from exc
    try:
        data = json.load(payload)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON: {exc}", param_hint="PAYLOAD") from exc

    logger.debug("Validating payload with %s", target)
    try:
        outcome = validator.validate(data, app.validation_config())
        app.emit(outcome)
    except VouchError as exc:
        raise click.ClickException(str(exc)) from exc
