"""Demo Textual application hosting a single number field."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from digit_field.models import FieldConfiguration
from digit_field.widgets.number_field import NumberField

_FOOTER_TEXT = "\\[0-9] Type  \\[Backspace] Delete  \\[Tab] Leave field  \\[q] Quit"


class DigitFieldApp(App):
    """A one-field app for trying out digit-by-digit number entry."""

    TITLE = "digit-field"

    CSS = """
    Screen {
        align: center middle;
    }
    #range-bar, #status-bar, #footer-bar {
        width: auto;
        height: 1;
    }
    #footer-bar {
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, field_config: FieldConfiguration | None = None) -> None:
        """Initialize the app.

        Args:
            field_config: Configuration for the number field.
        """
        super().__init__()
        self.field_config = field_config or FieldConfiguration()
        self.completions: list[int] = []

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        config = self.field_config
        yield Static(
            f"{config.digit_count} digits, {config.min_value} to {config.max_value}",
            id="range-bar",
        )
        yield NumberField(
            digit_count=config.digit_count,
            min_value=config.min_value,
            max_value=config.max_value,
            allow_deletion_after_full=config.allow_deletion_after_full,
            id="number",
        )
        yield Static("", id="status-bar")
        yield Static(_FOOTER_TEXT, id="footer-bar")

    def on_mount(self) -> None:
        """Focus the number field on startup."""
        self.query_one("#number", NumberField).focus()

    def on_number_field_completed(self, message: NumberField.Completed) -> None:
        """Report a completed field in the status bar."""
        self.completions.append(message.remainder)
        self.query_one("#status-bar", Static).update(
            f"Complete at {message.number_field.display_text}, "
            f"carried over {message.remainder}"
        )
