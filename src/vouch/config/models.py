"""Pydantic configuration models with code-baked defaults.

ValidationConfig is the per-call configuration threaded through every
validator via the Environment.  It is frozen: one validation call never
changes the configuration another call sees.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, Field

from vouch.domain.clock import Clock, SystemClock
from vouch.domain.logentry import LogEntry


class ValidationConfig(BaseModel):
    """Settings for one validation run.

    Attributes:
        fail_fast: Stop at the first violation in each accumulation scope.
            Default False (collect every violation).
        clock: Time source for temporal constraints.  Inject a FixedClock
            for deterministic tests.
        logger: Optional callback receiving a log entry for every satisfied
            or violated constraint.  None disables logging entirely.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    fail_fast: bool = False
    clock: Clock = Field(default_factory=SystemClock)
    logger: Callable[[LogEntry], None] | None = None
