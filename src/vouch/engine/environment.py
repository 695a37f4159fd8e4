"""Environment: explicit context passed through every validator call.

Holds the root label, the current path, the run configuration and the
active accumulation scope.  Every change returns a new Environment, so a
nested call can never disturb its caller's view.

INVARIANT: The root label is set exactly once per call tree (first writer wins).
INVARIANT: An Environment is created per validation call, never shared.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, NoReturn

from vouch.config.models import ValidationConfig
from vouch.domain.path import ROOT_PATH, Path
from vouch.errors import ScopeError

if TYPE_CHECKING:
    from vouch.domain.clock import Clock
    from vouch.domain.messages import Message
    from vouch.engine.accumulate import AccumulationScope


@dataclass(frozen=True)
class Environment:
    """Validation state for the value currently being checked."""

    root: str = ""
    path: Path = ROOT_PATH
    config: ValidationConfig = field(default_factory=ValidationConfig)
    scope: AccumulationScope | None = None

    @classmethod
    def create(cls, config: ValidationConfig | None = None) -> Environment:
        """Fresh environment for one top-level validation call."""
        return cls(config=config or ValidationConfig())

    @property
    def clock(self) -> Clock:
        return self.config.clock

    @property
    def fail_fast(self) -> bool:
        return self.config.fail_fast

    def with_root(self, label: str, obj: Any = None) -> Environment:
        """Register the root label unless one is already set.

        At the root of the path the object is bound to the root node so it
        takes part in cycle detection.  Below the root the current path is
        kept, so a schema reached through a plain validator keeps its
        location.
        """
        if self.root:
            return self
        if self.path.depth:
            return replace(self, root=label)
        return replace(self, root=label, path=Path(name="", obj=obj, parent=None))

    def stamp(
        self,
        message: Message,
        constraint_id: str,
        input: Any,  # noqa: A002
        cause: BaseException | None = None,
    ) -> Message:
        """Locate *message* at the current path.

        A constraint id already set on the message is kept.
        """
        stamped = message.stamped(
            constraint_id=message.constraint_id or constraint_id,
            root=self.root,
            path=self.path.full_name,
            input=input,
        )
        if cause is not None:
            stamped = replace(stamped, cause=cause)
        return stamped

    def push(self, name: str, obj: Any = None) -> Environment:
        return replace(self, path=self.path.push(name, obj))

    def append_to_segment(self, suffix: str) -> Environment:
        return replace(self, path=self.path.append_to_segment(suffix))

    def with_scope(self, scope: AccumulationScope) -> Environment:
        return replace(self, scope=scope)

    def accumulate(self, messages: Sequence[Message]) -> None:
        """Feed *messages* to the active scope.

        In fail-fast mode this escapes the scope and does not return.
        """
        self._active_scope().accumulate(messages)

    def abort(self, messages: Sequence[Message]) -> NoReturn:
        """Feed *messages* and escape the active scope unconditionally."""
        scope = self._active_scope()
        scope.accumulate(messages)
        scope.escape()

    def _active_scope(self) -> AccumulationScope:
        if self.scope is None:
            msg = "accumulate called outside of an accumulation scope"
            raise ScopeError(msg)
        return self.scope
