"""Tests for Rich Console factory and theme."""

from io import StringIO

from vouch.output.console import VOUCH_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[vouch.error]FAILED[/vouch.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "FAILED" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_styles_registered(self) -> None:
        for name in ("vouch.ok", "vouch.error", "vouch.path", "vouch.id", "vouch.branch"):
            assert name in VOUCH_THEME.styles
