"""Rich renderers for validation outcomes.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

A failure prints one line per message::

    FAILED  2 violations
      name: must be at least 3 characters  vouch.string.min_length
      age: must be between 0 and 150  vouch.number.between

Composite (``or``) messages add one tree per branch below their line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.padding import Padding
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from vouch.domain.catalog import DEFAULT_CATALOG
from vouch.domain.messages import Composite
from vouch.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from vouch.domain.catalog import MessageCatalog
    from vouch.domain.messages import Message
    from vouch.domain.outcome import Outcome


# ── Public API ────────────────────────────────────────────────────────


def render_outcome(
    outcome: Outcome[Any],
    *,
    catalog: MessageCatalog | None = None,
    verbose: bool = False,
) -> str:
    """Render an outcome to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    catalog = catalog or DEFAULT_CATALOG

    if outcome.is_success:
        console.print(Text("OK", style="vouch.ok"))
        if verbose:
            console.print(Text.assemble(("  value: ", "vouch.key"), repr(outcome.value)))
    else:
        _render_failure(console, outcome.messages, catalog, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_messages(messages: Sequence[Message], *, catalog: MessageCatalog | None = None) -> str:
    """Render bare messages, one per line, without a status line."""
    console = create_console()
    for message in messages:
        _render_message(console, message, catalog or DEFAULT_CATALOG, verbose=False)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _render_failure(
    console: Console,
    messages: Sequence[Message],
    catalog: MessageCatalog,
    *,
    verbose: bool,
) -> None:
    count = len(messages)
    noun = "violation" if count == 1 else "violations"
    console.print(Text("FAILED", style="vouch.error"), Text(f" {count} {noun}"))
    for message in messages:
        _render_message(console, message, catalog, verbose=verbose)


def _location(message: Message) -> str:
    if message.path:
        return message.path
    return message.root or "(input)"


def _render_message(
    console: Console,
    message: Message,
    catalog: MessageCatalog,
    *,
    verbose: bool,
) -> None:
    line = Text("  ")
    line.append(_location(message), style="vouch.path")
    line.append(": ")
    line.append(message.resolve(catalog))
    if message.constraint_id:
        line.append(f"  {message.constraint_id}", style="vouch.id")
    if verbose:
        line.append(f"  input={message.input!r}", style="vouch.input")
    console.print(line)
    if isinstance(message, Composite):
        _render_branches(console, message, catalog)
    if verbose and message.cause is not None:
        console.print(Text(f"    cause: {message.cause!r}", style="vouch.input"))


def _render_branches(console: Console, composite: Composite, catalog: MessageCatalog) -> None:
    tree = Tree(Text("any of", style="vouch.branch"))
    for index, branch in enumerate((composite.first_branch, composite.second_branch), 1):
        node = tree.add(Text(f"branch {index}", style="vouch.branch"))
        _add_branch(node, branch, catalog)
    console.print(Padding(tree, (0, 0, 0, 4)))


def _add_branch(node: Tree, branch: Sequence[Message], catalog: MessageCatalog) -> None:
    for message in branch:
        if isinstance(message, Composite):
            child = node.add(Text("any of", style="vouch.branch"))
            for index, nested in enumerate((message.first_branch, message.second_branch), 1):
                branch_node = child.add(Text(f"branch {index}", style="vouch.branch"))
                _add_branch(branch_node, nested, catalog)
            continue
        label = Text()
        if message.path:
            label.append(f"{message.path}: ", style="vouch.path")
        label.append(message.resolve(catalog))
        if message.constraint_id:
            label.append(f"  {message.constraint_id}", style="vouch.id")
        node.add(label)


def render_catalog(catalog: MessageCatalog, *, prefix: str = "") -> str:
    """Render catalog keys and patterns as a two-column table."""
    console = create_console()
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("key", style="vouch.key")
    table.add_column("pattern")
    for key in catalog.keys():
        if key.startswith(prefix):
            table.add_row(key, catalog.pattern(key))
    console.print(table)
    return get_output(console).rstrip("\n")
