"""Rich/JSON output helpers.

The CLI renders validation outcomes for humans (Rich output) or machines
(--json).  The formatter layer picks the requested output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from vouch.output.renderers import render_catalog, render_outcome

if TYPE_CHECKING:
    from vouch.domain.catalog import MessageCatalog
    from vouch.domain.outcome import Outcome


def outcome_payload(outcome: Outcome[Any], catalog: MessageCatalog | None = None) -> dict[str, Any]:
    """Plain-data view of an outcome."""
    payload: dict[str, Any] = {"ok": outcome.is_success}
    if outcome.is_success:
        payload["value"] = outcome.value
    else:
        payload["messages"] = [m.to_dict(catalog) for m in outcome.messages]
    return payload


def format_outcome(
    outcome: Outcome[Any],
    *,
    json_output: bool = False,
    catalog: MessageCatalog | None = None,
    verbose: bool = False,
) -> str:
    """Format an outcome for display.

    Args:
        outcome: Result of a validation call.
        json_output: If True, return JSON; otherwise return human-readable text.
        catalog: Catalog used to render message text.
        verbose: Include inputs and causes in human-readable output.
    """
    if json_output:
        return _json.dumps(outcome_payload(outcome, catalog), indent=2, default=str)
    return render_outcome(outcome, catalog=catalog, verbose=verbose)


def format_catalog(
    catalog: MessageCatalog,
    *,
    prefix: str = "",
    json_output: bool = False,
) -> str:
    """Format catalog entries whose key starts with *prefix*."""
    if json_output:
        entries = {key: catalog.pattern(key) for key in catalog.keys() if key.startswith(prefix)}
        return _json.dumps(entries, indent=2)
    return render_catalog(catalog, prefix=prefix)
