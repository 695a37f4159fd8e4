"""CLI settings: flags, env vars and vouch.toml in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``VOUCH_*`` prefix
  3. TOML file: ``vouch.toml`` discovered via walk-up
  4. Code defaults

The TOML file may hold the settings at top level or under a ``[vouch]``
table::

    [vouch]
    fail_fast = true
    catalog_path = "messages.de.toml"
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from vouch.config.discovery import find_config
from vouch.config.logging import structlog_sink
from vouch.config.models import ValidationConfig
from vouch.domain.catalog import DEFAULT_CATALOG, MessageCatalog
from vouch.errors import MisconfigurationError


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``vouch.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise MisconfigurationError(msg) from exc
            section = data.get("vouch")
            self._data = section if isinstance(section, dict) else data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return {k: v for k, v in self._data.items() if k in self.settings_cls.model_fields}


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class VouchSettings(BaseSettings):
    """Settings for the vouch CLI.

    Stored in ``click.Context.obj`` (via AppContext) at the CLI root.

    Attributes:
        config_path: Config file in effect, or None when none was found.
        catalog_path: TOML file of message overrides layered over the
            default catalog.  Relative paths resolve against the config
            file's directory.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VOUCH_",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    fail_fast: bool = False
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML only ---
    catalog_path: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> VouchSettings:
        """Construct settings from a CLI invocation.

        Discovers ``vouch.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.  Flags left at None fall through to lower sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    def catalog(self) -> MessageCatalog:
        """Default catalog, with ``catalog_path`` overrides layered on top."""
        if self.catalog_path is None:
            return DEFAULT_CATALOG
        path = self.catalog_path
        if not path.is_absolute() and self.config_path is not None:
            path = self.config_path.parent / path
        return DEFAULT_CATALOG.merged(MessageCatalog.from_toml(path))

    def to_validation_config(self) -> ValidationConfig:
        """Per-call configuration for validations started from the CLI.

        Verbose mode forwards every constraint log entry to structlog.
        """
        return ValidationConfig(
            fail_fast=self.fail_fast,
            logger=structlog_sink() if self.verbose else None,
        )
