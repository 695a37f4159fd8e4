"""Exception taxonomy for vouch.

Violations are data, not exceptions: a failed constraint produces a
:class:`~vouch.domain.messages.Message` inside a Failure outcome.  The
classes here cover the exceptional paths only.

INVARIANT: ``ScopeEscape`` never leaves the scope that created its token.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vouch.domain.messages import Message


class VouchError(Exception):
    """Base class for all vouch errors."""


class ValidationError(VouchError):
    """Raised by the throwing entry points when validation fails.

    Bundles every message of the failure so callers can render them all.
    """

    def __init__(self, messages: Sequence[Message]) -> None:
        self.messages: tuple[Message, ...] = tuple(messages)
        summary = "; ".join(
            f"{m.path}: {m.text}" if m.path else m.text for m in self.messages
        )
        super().__init__(summary or "validation failed")


class MisconfigurationError(VouchError):
    """A validator, catalog or clock was set up incorrectly.

    Raised at definition time, never silently defaulted.
    """


class MessageError(VouchError):
    """Raised by transforms and constructors to report a structured message."""

    def __init__(self, message: Message) -> None:
        self.message = message
        super().__init__(message.text)


class ScopeError(VouchError):
    """An accumulation scope was used outside its lifetime."""


class ScopeEscape(BaseException):  # noqa: N818
    """One-shot fail-fast signal owned by a single accumulation scope.

    Derives from BaseException so that leaf code catching ``Exception``
    cannot swallow it.
    """

    def __init__(self, token: object) -> None:
        super().__init__()
        self.token = token
