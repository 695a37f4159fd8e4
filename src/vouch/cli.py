"""Root CLI group for vouch with global flags and command registration."""

from __future__ import annotations

import click

from vouch import __version__
from vouch.commands import register_commands
from vouch.commands._base import VouchGroup
from vouch.commands._context import AppContext
from vouch.config.settings import VouchSettings


@click.group(
    cls=VouchGroup,
    invoke_without_command=True,
    examples="""\
  vouch check myapp.validators:user_schema payload.json
  cat payload.json | vouch --json check myapp.validators:user_schema -
  vouch --fail-fast check myapp.validators:build_validator payload.json
  vouch messages --key vouch.string""",
)
@click.version_option(version=__version__, prog_name="vouch")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--fail-fast", is_flag=True, help="Stop at the first violation.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    fail_fast: bool,
    config_path: str | None,
) -> None:
    """vouch: composable validation from the command line."""
    # Unset flags fall through to env vars and vouch.toml.
    settings = VouchSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        verbose=verbose or None,
        log_json=log_json or None,
        fail_fast=fail_fast or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
