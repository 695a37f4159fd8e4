"""Message catalog: key to pattern lookup for templated messages.

Patterns use positional ``{0}``, ``{1}`` placeholders.  The default
English catalog ships as ``vouch/resources/messages.toml``; callers layer
their own translations on top with :meth:`MessageCatalog.merged`.

INVARIANT: Unknown keys fail loudly.  A catalog never guesses text.
"""

from __future__ import annotations

import tomllib
from collections.abc import Iterator, Mapping, Sequence
from importlib.resources import files
from pathlib import Path
from typing import Any

from vouch.errors import MisconfigurationError


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested TOML tables into dotted keys."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            flat.update(_flatten(value, dotted))
        elif isinstance(value, str):
            flat[dotted] = value
        else:
            msg = f"Catalog entry '{dotted}' must be a string, got {type(value).__name__}"
            raise MisconfigurationError(msg)
    return flat


class MessageCatalog:
    """Immutable mapping of message keys to format patterns."""

    def __init__(self, patterns: Mapping[str, str]) -> None:
        self._patterns: dict[str, str] = dict(patterns)

    @classmethod
    def from_toml_text(cls, raw: str) -> MessageCatalog:
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid message catalog: {exc}"
            raise MisconfigurationError(msg) from exc
        return cls(_flatten(data))

    @classmethod
    def from_toml(cls, path: Path) -> MessageCatalog:
        """Load a catalog from a TOML file of flat or nested tables."""
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read message catalog {path}: {exc}"
            raise MisconfigurationError(msg) from exc
        return cls.from_toml_text(raw)

    def merged(self, overrides: MessageCatalog | Mapping[str, str]) -> MessageCatalog:
        """Return a new catalog with *overrides* layered over this one."""
        extra = overrides._patterns if isinstance(overrides, MessageCatalog) else overrides
        return MessageCatalog({**self._patterns, **extra})

    def pattern(self, key: str) -> str:
        try:
            return self._patterns[key]
        except KeyError:
            msg = f"No message pattern registered for key '{key}'"
            raise MisconfigurationError(msg) from None

    def format(self, key: str, args: Sequence[str]) -> str:
        """Render the pattern for *key* with already-rendered *args*."""
        pattern = self.pattern(key)
        try:
            return pattern.format(*args)
        except (IndexError, KeyError) as exc:
            msg = f"Pattern for '{key}' expects more arguments than the {len(args)} given"
            raise MisconfigurationError(msg) from exc

    def keys(self) -> list[str]:
        return sorted(self._patterns)

    def __contains__(self, key: object) -> bool:
        return key in self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._patterns)


def load_default_catalog() -> MessageCatalog:
    """Load the bundled English catalog."""
    resource = files("vouch").joinpath("resources/messages.toml")
    return MessageCatalog.from_toml_text(resource.read_text(encoding="utf-8"))


DEFAULT_CATALOG = load_default_catalog()
