"""Tests for VouchSettings: flags, env vars and the TOML source."""

from pathlib import Path

import pytest

from vouch.config.settings import VouchSettings
from vouch.errors import MisconfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CONFIG", "FAIL_FAST", "JSON_OUTPUT", "VERBOSE", "LOG_JSON", "CATALOG_PATH"):
        monkeypatch.delenv(f"VOUCH_{name}", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = VouchSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.fail_fast is False
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.catalog_path is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = VouchSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.fail_fast = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_vouch_table(self, tmp_path: Path) -> None:
        toml = tmp_path / "vouch.toml"
        toml.write_text("[vouch]\nfail_fast = true\n")
        settings = VouchSettings.from_cli(start=tmp_path)
        assert settings.fail_fast is True
        assert settings.config_path == toml

    def test_loads_top_level(self, tmp_path: Path) -> None:
        (tmp_path / "vouch.toml").write_text("verbose = true\n")
        assert VouchSettings.from_cli(start=tmp_path).verbose is True

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "vouch.toml").write_text("[vouch]\nfail_fast = true\ncolour = 'red'\n")
        assert VouchSettings.from_cli(start=tmp_path).fail_fast is True

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "vouch.toml").write_text("")
        assert VouchSettings.from_cli(start=tmp_path).fail_fast is False

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "vouch.toml").write_text("fail_fast = \n")
        with pytest.raises(MisconfigurationError, match="Invalid TOML"):
            VouchSettings.from_cli(start=tmp_path)

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[vouch]\njson_output = true\n")
        settings = VouchSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.json_output is True
        assert settings.config_path == custom


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = VouchSettings.from_cli(
            start=tmp_path, fail_fast=True, json_output=True, verbose=True
        )
        assert settings.fail_fast is True
        assert settings.json_output is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "vouch.toml").write_text("[vouch]\nfail_fast = true\n")
        settings = VouchSettings.from_cli(start=tmp_path, fail_fast=False)
        assert settings.fail_fast is False

    def test_none_flags_fall_through(self, tmp_path: Path) -> None:
        (tmp_path / "vouch.toml").write_text("[vouch]\nfail_fast = true\n")
        settings = VouchSettings.from_cli(start=tmp_path, fail_fast=None)
        assert settings.fail_fast is True


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOUCH_FAIL_FAST", "true")
        assert VouchSettings.from_cli(start=tmp_path).fail_fast is True

    def test_env_var_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "vouch.toml").write_text("[vouch]\nverbose = true\n")
        monkeypatch.setenv("VOUCH_VERBOSE", "false")
        assert VouchSettings.from_cli(start=tmp_path).verbose is False


class TestCatalog:
    def test_default_catalog(self, tmp_path: Path) -> None:
        catalog = VouchSettings.from_cli(start=tmp_path).catalog()
        assert catalog.pattern("vouch.string.not_blank") == "must not be blank"

    def test_overrides_relative_to_config(self, tmp_path: Path) -> None:
        (tmp_path / "vouch.toml").write_text('[vouch]\ncatalog_path = "messages.toml"\n')
        (tmp_path / "messages.toml").write_text(
            '[vouch.string]\nnot_blank = "darf nicht leer sein"\n'
        )
        catalog = VouchSettings.from_cli(start=tmp_path).catalog()
        assert catalog.pattern("vouch.string.not_blank") == "darf nicht leer sein"
        assert catalog.pattern("vouch.number.positive") == "must be positive"


class TestValidationConfig:
    def test_fail_fast_carried(self, tmp_path: Path) -> None:
        config = VouchSettings.from_cli(start=tmp_path, fail_fast=True).to_validation_config()
        assert config.fail_fast is True
        assert config.logger is None

    def test_verbose_installs_sink(self, tmp_path: Path) -> None:
        config = VouchSettings.from_cli(start=tmp_path, verbose=True).to_validation_config()
        assert config.logger is not None
