"""Subcommand modules for vouch.

Provides register_commands() which uses deferred imports to keep
``vouch --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from vouch.commands.check import check
    from vouch.commands.messages import messages

    cli.add_command(check)
    cli.add_command(messages)
