"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the message catalog, the per-call
validation config and centralized outcome emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from vouch.output.formatters import format_outcome

if TYPE_CHECKING:
    from vouch.config.models import ValidationConfig
    from vouch.config.settings import VouchSettings
    from vouch.domain.catalog import MessageCatalog
    from vouch.domain.outcome import Outcome


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog is loaded lazily so ``--help`` and ``--version`` never
    read override files.
    """

    def __init__(self, settings: VouchSettings) -> None:
        self.settings = settings
        self._catalog: MessageCatalog | None = None

        from vouch.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def catalog(self) -> MessageCatalog:
        """Message catalog (default plus configured overrides)."""
        if self._catalog is None:
            self._catalog = self.settings.catalog()
        return self._catalog

    def validation_config(self) -> ValidationConfig:
        return self.settings.to_validation_config()

    def emit(self, outcome: Outcome[Any]) -> None:
        """Format and output an outcome with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_outcome(
            outcome,
            json_output=self.settings.json_output,
            catalog=self.catalog,
            verbose=self.settings.verbose,
        )
        if outcome.is_success:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
