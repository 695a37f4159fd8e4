"""Accumulation scopes: fail-fast and collect-all in one mechanism.

A scope installs a sink into the Environment for the duration of a block.
Messages fed to the sink are buffered.  In fail-fast mode the sink also
raises a ScopeEscape carrying a token unique to this scope; only the
scope that minted the token catches it, every other scope lets it pass.

Outcome of :meth:`AccumulationScope.run`:
- own escape fired: ``Failure(buffer)``
- completed, empty buffer: ``Success(value)``
- completed, non-empty buffer: ``Partial(value, buffer)``

INVARIANT: A scope runs once.  Reuse raises ScopeError.
INVARIANT: A foreign ScopeEscape is re-raised untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, NoReturn, TypeVar

from vouch.domain.outcome import Failure, Outcome, Partial, Success
from vouch.errors import ScopeError, ScopeEscape

if TYPE_CHECKING:
    from vouch.domain.messages import Message
    from vouch.engine.environment import Environment

logger = logging.getLogger(__name__)

R = TypeVar("R")


class _ScopeToken:
    """Identity-only marker; one per scope instance."""

    __slots__ = ()


class AccumulationScope:
    """Error collector for one block of validation logic.

    Parameters:
        fail_fast: Escape on the first accumulated message.
    """

    def __init__(self, *, fail_fast: bool = False) -> None:
        self.fail_fast = fail_fast
        self._token = _ScopeToken()
        self._buffer: list[Message] = []
        self._state = "new"

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._buffer)

    @property
    def closed(self) -> bool:
        return self._state == "closed"

    def owns(self, escape: ScopeEscape) -> bool:
        return escape.token is self._token

    def accumulate(self, messages: Sequence[Message]) -> None:
        """Buffer *messages*; escape when running fail-fast."""
        if self._state == "closed":
            msg = "accumulate called on a closed scope"
            raise ScopeError(msg)
        self._buffer.extend(messages)
        if self.fail_fast:
            self.escape()

    def escape(self) -> NoReturn:
        """Leave the block immediately; :meth:`run` reports a Failure."""
        raise ScopeEscape(self._token)

    def run(self, env: Environment, block: Callable[[Environment], R]) -> Outcome[R]:
        """Run *block* with this scope installed as the active sink."""
        if self._state != "new":
            msg = "an accumulation scope can only run once"
            raise ScopeError(msg)
        self._state = "running"
        try:
            value = block(env.with_scope(self))
        except ScopeEscape as escape:
            if not self.owns(escape):
                raise
            logger.debug("Scope escaped with %d message(s)", len(self._buffer))
            return Failure(self._buffer)
        finally:
            self._state = "closed"
        if not self._buffer:
            return Success(value)
        return Partial(value, self._buffer)


def accumulating(env: Environment, block: Callable[[Environment], R]) -> Outcome[R]:
    """Run *block* in a fresh scope that follows ``env.config.fail_fast``."""
    return AccumulationScope(fail_fast=env.fail_fast).run(env, block)


def bind(outcome: Outcome[R], env: Environment) -> R:
    """Extract a value from *outcome* inside the active scope of *env*.

    Success returns its value.  Partial feeds its messages to the scope and
    returns its value.  Failure feeds its messages and escapes the scope,
    since no value exists to continue with.
    """
    if isinstance(outcome, Success):
        return outcome.value
    if isinstance(outcome, Partial):
        env.accumulate(outcome.messages)
        return outcome.value
    env.abort(outcome.messages)
