"""Click base classes shared by vouch commands.

Both accept an ``examples`` string.  When one is given, an eager
``--examples`` flag prints it and exits, and ``--help`` points at the flag.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Adds the ``examples`` keyword to a Click command class."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or not self.examples:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text("Run with --examples to see usage examples.")


class VouchCommand(ExamplesMixin, click.Command):
    """Command with an optional ``--examples`` flag."""


class VouchGroup(ExamplesMixin, click.Group):
    """Group with an optional ``--examples`` flag.

    ``command_class`` makes ``@group.command(examples=...)`` work without
    an explicit ``cls=``.
    """

    command_class = VouchCommand
