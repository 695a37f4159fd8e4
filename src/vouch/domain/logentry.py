"""Log entries emitted while constraints are evaluated.

Entries are handed to ``ValidationConfig.logger`` when one is configured.
Building them is skipped entirely when no logger is set.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class SatisfiedEntry(BaseModel):
    """A constraint held."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    kind: Literal["satisfied"] = "satisfied"
    constraint_id: str
    root: str
    path: str
    input: Any = None


class ViolatedEntry(BaseModel):
    """A constraint failed.

    Attributes:
        args: Template arguments of the failure message (empty for plain text).
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    kind: Literal["violated"] = "violated"
    constraint_id: str
    root: str
    path: str
    input: Any = None
    args: list[Any] = Field(default_factory=list)


LogEntry = Annotated[Union[SatisfiedEntry, ViolatedEntry], Field(discriminator="kind")]
