"""Tests for the message catalog."""

from __future__ import annotations

from pathlib import Path

import pytest

from vouch.domain.catalog import DEFAULT_CATALOG, MessageCatalog
from vouch.errors import MisconfigurationError


class TestDefaultCatalog:
    def test_contains_or_key(self) -> None:
        assert "vouch.or" in DEFAULT_CATALOG

    def test_sections_are_flattened(self) -> None:
        assert DEFAULT_CATALOG.pattern("vouch.temporal.past") == "must be in the past"

    def test_keys_sorted(self) -> None:
        keys = DEFAULT_CATALOG.keys()
        assert keys == sorted(keys)
        assert len(DEFAULT_CATALOG) == len(keys)


class TestLookup:
    def test_unknown_key_raises(self) -> None:
        with pytest.raises(MisconfigurationError, match="missing.key"):
            DEFAULT_CATALOG.pattern("missing.key")

    def test_format_positional(self) -> None:
        assert DEFAULT_CATALOG.format("vouch.number.between", ["1", "5"]) == (
            "must be between 1 and 5"
        )

    def test_format_missing_argument_raises(self) -> None:
        with pytest.raises(MisconfigurationError, match="expects more arguments"):
            DEFAULT_CATALOG.format("vouch.number.between", ["1"])


class TestLoading:
    def test_from_toml_nested_tables(self, tmp_path: Path) -> None:
        path = tmp_path / "de.toml"
        path.write_text('[vouch.string]\nnot_blank = "darf nicht leer sein"\n', encoding="utf-8")
        catalog = MessageCatalog.from_toml(path)
        assert catalog.pattern("vouch.string.not_blank") == "darf nicht leer sein"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(MisconfigurationError, match="Cannot read message catalog"):
            MessageCatalog.from_toml(tmp_path / "missing.toml")

    def test_from_toml_flat_quoted_keys(self) -> None:
        catalog = MessageCatalog.from_toml_text('"app.custom" = "custom {0}"\n')
        assert catalog.format("app.custom", ["x"]) == "custom x"

    def test_non_string_entry_raises(self) -> None:
        with pytest.raises(MisconfigurationError, match="must be a string"):
            MessageCatalog.from_toml_text("[a]\nb = 3\n")

    def test_invalid_toml_raises(self) -> None:
        with pytest.raises(MisconfigurationError, match="Invalid message catalog"):
            MessageCatalog.from_toml_text("not = [valid")

    def test_merged_overrides_and_keeps_rest(self) -> None:
        merged = DEFAULT_CATALOG.merged({"vouch.number.positive": "muss positiv sein"})
        assert merged.pattern("vouch.number.positive") == "muss positiv sein"
        assert merged.pattern("vouch.number.negative") == "must be negative"
        assert DEFAULT_CATALOG.pattern("vouch.number.positive") == "must be positive"
