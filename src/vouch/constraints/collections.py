"""Collection leaves: element validation and size checks.

Element messages are located with a bracket suffix on the current
segment: ``items[0]`` for sequences, ``scores[alice]`` for mapping values
and ``scores[alice]<map key>`` for mapping keys.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from vouch.constraints._base import leaf
from vouch.engine.environment import Environment
from vouch.engine.validator import Validator

logger = logging.getLogger(__name__)


def each(validator: Validator[Any, Any]) -> Validator[Iterable[Any], list[Any]]:
    """Validate every element; the output is the list of element outputs."""

    def block(items: Iterable[Any], env: Environment) -> list[Any]:
        values: list[Any] = []
        for index, item in enumerate(items):
            if env.path.contains_identity(item):
                logger.debug("Circular reference at %s[%d], skipped", env.path.full_name, index)
                values.append(item)
                continue
            outcome = validator(item, env.append_to_segment(f"[{index}]"))
            if not outcome.is_success:
                env.accumulate(outcome.messages)
            values.append(outcome.value if outcome.has_value else item)
        return values

    return Validator.from_block(block)


def each_value(validator: Validator[Any, Any]) -> Validator[Mapping[Any, Any], dict[Any, Any]]:
    """Validate every mapping value, keyed by ``[key]``."""

    def block(mapping: Mapping[Any, Any], env: Environment) -> dict[Any, Any]:
        values: dict[Any, Any] = {}
        for key, item in mapping.items():
            if env.path.contains_identity(item):
                logger.debug("Circular reference at %s[%s], skipped", env.path.full_name, key)
                values[key] = item
                continue
            outcome = validator(item, env.append_to_segment(f"[{key}]"))
            if not outcome.is_success:
                env.accumulate(outcome.messages)
            values[key] = outcome.value if outcome.has_value else item
        return values

    return Validator.from_block(block)


def each_key(validator: Validator[Any, Any]) -> Validator[Mapping[Any, Any], dict[Any, Any]]:
    """Validate every mapping key, located as ``[key]<map key>``.

    The output maps each validated key to its original value.
    """

    def block(mapping: Mapping[Any, Any], env: Environment) -> dict[Any, Any]:
        values: dict[Any, Any] = {}
        for key, item in mapping.items():
            outcome = validator(key, env.append_to_segment(f"[{key}]<map key>"))
            if not outcome.is_success:
                env.accumulate(outcome.messages)
            values[outcome.value if outcome.has_value else key] = item
        return values

    return Validator.from_block(block)


def min_size(size: int) -> Validator[Any, Any]:
    return leaf("vouch.collection.min_size", lambda value: len(value) >= size, size)


def max_size(size: int) -> Validator[Any, Any]:
    return leaf("vouch.collection.max_size", lambda value: len(value) <= size, size)


def not_empty() -> Validator[Any, Any]:
    return leaf("vouch.collection.not_empty", lambda value: len(value) > 0)
