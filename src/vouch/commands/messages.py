"""Command: list message catalog keys and patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vouch.commands._base import VouchCommand
from vouch.errors import VouchError
from vouch.output.formatters import format_catalog

if TYPE_CHECKING:
    from vouch.commands._context import AppContext


@click.command(
    cls=VouchCommand,
    examples="""\
  vouch messages
  vouch messages --key vouch.temporal
  vouch --json messages""",
)
@click.option("--key", "prefix", default="", help="Only show keys starting with PREFIX.")
@click.pass_obj
def messages(app: AppContext, prefix: str) -> None:
    """List message catalog keys and their patterns."""
    try:
        catalog = app.catalog
    except VouchError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(format_catalog(catalog, prefix=prefix, json_output=app.settings.json_output))
