"""Date and time input widgets driven by the mask engine."""

from __future__ import annotations

from datetime import date, datetime, time

from textual.events import Paste
from textual.message import Message
from textual.widgets import Input

from datemask.engine import (
    DEFAULT_TIME_SEPARATOR,
    EditEvent,
    MaskEngine,
    MaskState,
    index_to_utf16_offset,
    time_engine,
)
from datemask.formats import Format


class DateInput(Input):
    """An Input whose text is owned by a :class:`MaskEngine`.

    Every printable key and paste is turned into an edit event and the
    engine's result replaces the text; digits beyond the format's capacity
    are refused.  Typing the separator closes the segment in progress.
    Backspace and delete are reported to the engine and then handled by
    the regular Input bindings.
    """

    class DateChanged(Message):
        """Posted after every edit the engine processed."""

        def __init__(self, date_input: DateInput) -> None:
            super().__init__()
            self.date_input = date_input

        @property
        def control(self) -> DateInput:
            """The input that changed."""
            return self.date_input

        @property
        def date(self) -> datetime | None:
            """The parsed value at the time the message is handled."""
            return self.date_input.date

    # Keys that should pass through to the default Input handler.
    _PASSTHROUGH_KEYS = frozenset(
        {
            "left",
            "right",
            "home",
            "end",
            "tab",
            "shift+tab",
            "shift+left",
            "shift+right",
            "shift+home",
            "shift+end",
            "escape",
            "enter",
            "up",
            "down",
        }
    )

    _DELETE_KEYS = frozenset({"backspace", "delete"})

    def __init__(self, engine: MaskEngine | None = None, **kwargs) -> None:
        """Initialize with a fresh date engine unless one is given."""
        self.engine = engine or MaskEngine()
        kwargs.setdefault(
            "placeholder", self.engine.format.describe(self.engine.separator)
        )
        super().__init__(**kwargs)
        self.engine.subscribe(self._on_engine_change)

    @property
    def format(self) -> Format:
        """The engine's active format."""
        return self.engine.format

    @format.setter
    def format(self, value: Format) -> None:
        self.engine.format = value
        self.placeholder = self.engine.format.describe(self.engine.separator)

    @property
    def separator(self) -> str:
        """The engine's separator."""
        return self.engine.separator

    @separator.setter
    def separator(self, value: str) -> None:
        self.engine.separator = value
        self.placeholder = self.engine.format.describe(value)

    @property
    def date(self) -> datetime | None:
        """The current text parsed as a datetime, or None if incomplete."""
        return self.engine.parse_date(self.value)

    @date.setter
    def date(self, value: date | time | None) -> None:
        self.value = self.engine.render_date(value)
        self.cursor_position = len(self.value)

    def _on_engine_change(self, engine: MaskEngine) -> None:
        self.post_message(self.DateChanged(self))

    def _selected_span(self) -> tuple[int, int]:
        """Return the selected character range, or the cursor as an empty one."""
        selection = self.selection
        if selection.start != selection.end:
            return min(selection), max(selection)
        return self.cursor_position, self.cursor_position

    def _deletion_span(self, key: str) -> tuple[int, int]:
        """Return the range a backspace or delete key is about to remove."""
        start, end = self._selected_span()
        if start != end:
            return start, end
        if key == "backspace":
            return max(start - 1, 0), start
        return start, min(start + 1, len(self.value))

    def _apply_edit(self, start: int, end: int, replacement: str) -> bool:
        """Run one edit through the engine.

        Args:
            start: Start index of the replaced range in ``self.value``.
            end: End index of the replaced range.
            replacement: Text typed or pasted over the range.

        Returns:
            True if the native Input edit should still happen.
        """
        current = self.value
        location = index_to_utf16_offset(current, start)
        length = index_to_utf16_offset(current, end) - location
        outcome = self.engine.handle_edit(
            MaskState(current), EditEvent(location, length, replacement)
        )
        if not outcome.accepted and outcome.state.text != current:
            self.value = outcome.state.text
            self.cursor_position = len(self.value)
        return outcome.accepted

    async def _on_key(self, event) -> None:
        """Route edits through the engine; pass navigation through."""
        key = event.key

        if key in self._DELETE_KEYS:
            self._apply_edit(*self._deletion_span(key), "")
            await super()._on_key(event)
            return

        if key in self._PASSTHROUGH_KEYS:
            await super()._on_key(event)
            return

        event.prevent_default()
        event.stop()

        # Use event.character because Textual names some keys
        # (e.g. "full_stop" for ".").
        char = event.character
        if event.is_printable and char:
            self._apply_edit(*self._selected_span(), char)

    def _on_paste(self, event: Paste) -> None:
        """Treat pasted text as a single replacement edit."""
        event.prevent_default()
        event.stop()
        if event.text:
            self._apply_edit(*self._selected_span(), event.text)


class TimeInput(DateInput):
    """A DateInput fixed to the hour/minute format."""

    def __init__(self, separator: str = DEFAULT_TIME_SEPARATOR, **kwargs) -> None:
        """Initialize with an engine pinned to ``Format.HOUR_MINUTE``."""
        super().__init__(engine=time_engine(separator), **kwargs)
