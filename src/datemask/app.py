"""Demo Textual application for masked date and time entry."""

from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from datemask.config import Settings, save_format
from datemask.engine import MaskEngine
from datemask.formats import Format
from datemask.widgets.date_input import DateInput, TimeInput

_DATE_FORMATS = (Format.DAY_MONTH_YEAR, Format.MONTH_DAY_YEAR, Format.MONTH_YEAR)

_FOOTER = "\\[^f] Format  \\[Tab] Next field  \\[^q] Quit"


def _describe(value) -> str:
    """Return the parsed value for the status line, or a dash."""
    return "-" if value is None else value.date().isoformat()


class DateMaskApp(App):
    """Two masked inputs with their parsed values shown alongside."""

    TITLE = "datemask"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("ctrl+f", "cycle_format", "Format", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the app.

        Args:
            settings: Resolved format and separators; defaults if omitted.
        """
        super().__init__()
        self.settings = settings or Settings()

    def compose(self) -> ComposeResult:
        """Create the form layout."""
        with Vertical(id="form"):
            with Horizontal(classes="form-row"):
                yield Static("Date", classes="form-label")
                yield DateInput(
                    engine=MaskEngine(self.settings.format, self.settings.separator),
                    id="date-input",
                )
                yield Static("-", id="date-value", classes="form-value")
            with Horizontal(classes="form-row"):
                yield Static("Time", classes="form-label")
                yield TimeInput(self.settings.time_separator, id="time-input")
                yield Static("-", id="time-value", classes="form-value")
        yield Static(_FOOTER, id="footer-bar")

    def on_mount(self) -> None:
        """Focus the date field."""
        self.query_one("#date-input", DateInput).focus()

    @on(DateInput.DateChanged, "#date-input")
    def on_date_changed(self, event: DateInput.DateChanged) -> None:
        """Show the parsed date next to the date field."""
        self.query_one("#date-value", Static).update(_describe(event.date))

    @on(DateInput.DateChanged, "#time-input")
    def on_time_changed(self, event: DateInput.DateChanged) -> None:
        """Show the parsed time next to the time field."""
        value = event.date
        self.query_one("#time-value", Static).update(
            "-" if value is None else value.time().isoformat(timespec="minutes")
        )

    def action_cycle_format(self) -> None:
        """Switch the date field to the next layout and remember it."""
        date_input = self.query_one("#date-input", DateInput)
        index = _DATE_FORMATS.index(date_input.format)
        date_input.format = _DATE_FORMATS[(index + 1) % len(_DATE_FORMATS)]
        date_input.value = ""
        self.query_one("#date-value", Static).update("-")
        save_format(date_input.format)
        self.notify(f"Format: {date_input.placeholder}", timeout=2)
