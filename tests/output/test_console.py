"""Tests for the StringIO-backed Rich console."""

from rich.text import Text

from soliddemo.output.console import DEMO_THEME, create_console, get_output


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print(Text("Printing..."))
        assert get_output(console) == "Printing...\n"

    def test_theme_has_status_styles(self) -> None:
        assert "demo.ok" in DEMO_THEME.styles
        assert "demo.error" in DEMO_THEME.styles

    def test_default_width(self) -> None:
        assert create_console().width == 120
        assert create_console(width=40).width == 40
