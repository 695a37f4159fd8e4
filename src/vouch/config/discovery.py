"""Locate vouch.toml.

``VOUCH_CONFIG`` names the file outright.  Otherwise the directories from
the start directory up to the filesystem root are searched, nearest first,
the way git finds ``.git/``.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "vouch.toml"
CONFIG_ENV_VAR = "VOUCH_CONFIG"


def search_dirs(start: Path | None = None) -> Iterator[Path]:
    """Yield *start* (default: cwd) and then each of its ancestors."""
    here = (start or Path.cwd()).resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None.

    An explicit ``VOUCH_CONFIG`` wins even when it names a missing file;
    no config is used then.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    for directory in search_dirs(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
