"""Path model for error localization and cycle-safe descent.

A Path is an immutable linked list of named steps from the validation
root to the value currently being checked.  Each step remembers the
object bound at that point so recursive descent can detect cycles.

INVARIANT: Nodes are never mutated; every operation returns a new node.
INVARIANT: Cycle detection uses identity (``is``), never ``==``, and is
only meaningful for reference-like objects.  Value types never match.
"""

from __future__ import annotations

import datetime as _dt
import decimal
import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

VALUE_TYPES: tuple[type, ...] = (
    str,
    bytes,
    int,
    float,
    complex,
    bool,
    decimal.Decimal,
    enum.Enum,
    _dt.date,
    _dt.time,
    _dt.timedelta,
    type(None),
)


def is_reference_like(obj: Any) -> bool:
    """Return True if *obj* has a meaningful heap identity for cycle checks."""
    return not isinstance(obj, VALUE_TYPES)


@dataclass(frozen=True)
class Path:
    """One step in the chain from the validation root.

    Attributes:
        name: Segment name (``"address"``, ``"items[0]"``).  Empty for the root.
        obj: Object bound at this step.  Excluded from equality and repr.
        parent: Enclosing step, or None for the root.
    """

    name: str = ""
    obj: Any = field(default=None, compare=False, repr=False)
    parent: Path | None = None

    def push(self, name: str, obj: Any = None) -> Path:
        """Return a child step named *name* bound to *obj*."""
        return Path(name=name, obj=obj, parent=self)

    def append_to_segment(self, suffix: str) -> Path:
        """Extend this step's name in a new node with the same parent.

        Used for synthetic element segments such as ``[0]`` or ``[key]``.
        """
        return Path(name=self.name + suffix, obj=self.obj, parent=self.parent)

    @property
    def full_name(self) -> str:
        """Dotted name from the first non-root ancestor down to this step."""
        return ".".join(self.segments())

    @property
    def depth(self) -> int:
        """Number of named steps below the root."""
        return sum(1 for _ in self.segments())

    def segments(self) -> list[str]:
        """Non-empty segment names ordered root to leaf."""
        names = [node.name for node in self.ancestry() if node.name]
        names.reverse()
        return names

    def ancestry(self) -> Iterator[Path]:
        """Yield this node, then each parent up to the root."""
        node: Path | None = self
        while node is not None:
            yield node
            node = node.parent

    def contains_identity(self, candidate: Any) -> bool:
        """Check whether *candidate* is bound anywhere in this chain.

        Returns False for value types; see :data:`VALUE_TYPES`.
        """
        if not is_reference_like(candidate):
            return False
        return any(node.obj is candidate for node in self.ancestry())

    def __str__(self) -> str:
        return self.full_name


ROOT_PATH = Path()
