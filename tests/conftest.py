"""Shared pytest fixtures and test helpers for vouch tests."""

from __future__ import annotations

import datetime as dt

import pytest
from click.testing import CliRunner

from vouch.config.models import ValidationConfig
from vouch.domain.clock import FixedClock
from vouch.domain.logentry import LogEntry

NOW = dt.datetime(2024, 6, 15, 12, 0, tzinfo=dt.UTC)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2024-06-15 12:00 UTC."""
    return FixedClock(NOW)


@pytest.fixture
def collect_all(fixed_clock: FixedClock) -> ValidationConfig:
    return ValidationConfig(clock=fixed_clock)


@pytest.fixture
def fail_fast(fixed_clock: FixedClock) -> ValidationConfig:
    return ValidationConfig(fail_fast=True, clock=fixed_clock)


@pytest.fixture
def recorded_logs() -> list[LogEntry]:
    """List that collects log entries; pass ``recorded_logs.append`` as logger."""
    return []
