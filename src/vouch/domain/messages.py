"""Structured failure messages with locale-deferred text.

Three message kinds:
- Text: fixed text supplied by the caller.
- Templated: a catalog key plus positional args, rendered lazily.
  Args may themselves be Messages (or lists of them), forming trees.
- Composite: produced only by ``or`` when both branches fail.

Every message carries the constraint id, root label, path and offending
input stamped at the point of violation.  Combinators never drop them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from vouch.domain.catalog import DEFAULT_CATALOG, MessageCatalog

OR_KEY = "vouch.or"


@dataclass(frozen=True, kw_only=True)
class Message(ABC):
    """Base class for all messages.

    Attributes:
        constraint_id: Identifier of the constraint that produced the message.
        root: Label of the validated root (type name or factory name).
        path: Full dotted path to the offending value (``"address.city"``).
        input: The offending input value.
        cause: Exception behind the message, if any (constructor failures).
    """

    constraint_id: str = ""
    root: str = ""
    path: str = ""
    input: Any = None
    cause: BaseException | None = field(default=None, compare=False)

    @property
    def text(self) -> str:
        """Text rendered with the default catalog."""
        return self.resolve(DEFAULT_CATALOG)

    @abstractmethod
    def resolve(self, catalog: MessageCatalog) -> str:
        """Render the text with *catalog*."""

    @property
    def args(self) -> tuple[Any, ...]:
        return ()

    @property
    def descendants(self) -> list[Message]:
        """Nested messages carried by this message, flattened."""
        return []

    def stamped(
        self,
        *,
        constraint_id: str,
        root: str,
        path: str,
        input: Any,  # noqa: A002
    ) -> Message:
        """Return a copy carrying the location of the violation."""
        return replace(self, constraint_id=constraint_id, root=root, path=path, input=input)

    def to_dict(self, catalog: MessageCatalog | None = None) -> dict[str, Any]:
        """Plain-data view for JSON renderers."""
        return {
            "constraint_id": self.constraint_id,
            "root": self.root,
            "path": self.path,
            "text": self.resolve(catalog or DEFAULT_CATALOG),
            "input": self.input,
        }


@dataclass(frozen=True, kw_only=True)
class Text(Message):
    """A message with fixed text."""

    content: str

    def resolve(self, catalog: MessageCatalog) -> str:
        return self.content

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True, kw_only=True)
class Templated(Message):
    """A message whose text comes from a catalog pattern."""

    key: str
    arguments: tuple[Any, ...] = ()

    @property
    def args(self) -> tuple[Any, ...]:
        return self.arguments

    def resolve(self, catalog: MessageCatalog) -> str:
        rendered = [render_arg(arg, catalog) for arg in self.arguments]
        return catalog.format(self.key, rendered)

    @property
    def descendants(self) -> list[Message]:
        found: list[Message] = []
        _collect_messages(self.arguments, found)
        return found


@dataclass(frozen=True, kw_only=True)
class Composite(Message):
    """Both branches of an ``or`` failed.

    Nests recursively: a chained ``or`` puts a Composite inside a branch.
    """

    first_branch: tuple[Message, ...]
    second_branch: tuple[Message, ...]

    @property
    def args(self) -> tuple[Any, ...]:
        return (list(self.first_branch), list(self.second_branch))

    def resolve(self, catalog: MessageCatalog) -> str:
        rendered = [render_arg(arg, catalog) for arg in self.args]
        return catalog.format(OR_KEY, rendered)

    @property
    def descendants(self) -> list[Message]:
        return [*self.first_branch, *self.second_branch]

    def to_dict(self, catalog: MessageCatalog | None = None) -> dict[str, Any]:
        data = super().to_dict(catalog)
        data["branches"] = [
            [m.to_dict(catalog) for m in self.first_branch],
            [m.to_dict(catalog) for m in self.second_branch],
        ]
        return data


def render_arg(arg: Any, catalog: MessageCatalog) -> str:
    """Render one template argument; messages render as their text."""
    if isinstance(arg, Message):
        return arg.resolve(catalog)
    if isinstance(arg, (list, tuple)):
        return "[" + ", ".join(render_arg(item, catalog) for item in arg) + "]"
    return str(arg)


def _collect_messages(args: Iterable[Any], found: list[Message]) -> None:
    for arg in args:
        if isinstance(arg, Message):
            found.append(arg)
        elif isinstance(arg, (list, tuple)):
            _collect_messages(arg, found)


def text(content: str) -> Text:
    """Build an unstamped plain-text message."""
    return Text(content=content)


def templated(key: str, *args: Any) -> Templated:
    """Build an unstamped catalog message."""
    return Templated(key=key, arguments=args)
