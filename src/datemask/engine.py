"""Turn text-field edit events into well-formed date and time masks.

The engine keeps no text of its own.  Every edit is computed from the
current text handed in by the host, so :meth:`MaskEngine.handle_edit` is a
function of ``(state, event)`` plus the engine's format and separator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Callable

from datemask import codec
from datemask.formats import Format
from datemask.formatter import format_segments
from datemask.sanitizer import sanitize
from datemask.segmenter import segment

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "."
DEFAULT_TIME_SEPARATOR = ":"


@dataclass(frozen=True)
class MaskState:
    """The displayed text of a masked field."""

    text: str = ""


@dataclass(frozen=True)
class EditEvent:
    """Replace ``length`` UTF-16 code units at ``location`` with ``replacement``."""

    location: int
    length: int
    replacement: str


@dataclass(frozen=True)
class EditOutcome:
    """Result of handling one edit.

    When ``accepted`` is True the host should apply its own edit; ``state``
    then holds what that edit produces.  When False the host must discard
    its edit and show ``state.text`` instead.
    """

    state: MaskState
    accepted: bool


Listener = Callable[["MaskEngine"], None]


def utf16_offset_to_index(text: str, offset: int) -> int | None:
    """Map a UTF-16 code-unit offset to a Python string index.

    Returns:
        The index, or None if *offset* is negative, past the end, or falls
        between the two halves of a surrogate pair.
    """
    if offset < 0:
        return None
    units = 0
    for index, char in enumerate(text):
        if units == offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
        if units > offset:
            return None
    return len(text) if units == offset else None


def index_to_utf16_offset(text: str, index: int) -> int:
    """Map a Python string index to a UTF-16 code-unit offset."""
    return len(text[:index].encode("utf-16-le")) // 2


class MaskEngine:
    """Date/time mask engine for a single text field.

    Args:
        format: The initial layout.
        separator: Text placed between complete segments; may be empty.
        locked: If True, assignments to :attr:`format` are ignored.
    """

    def __init__(
        self,
        format: Format = Format.DAY_MONTH_YEAR,
        separator: str = DEFAULT_SEPARATOR,
        locked: bool = False,
    ) -> None:
        self._format = format
        self.separator = separator
        self._locked = locked
        self._listeners: list[Listener] = []

    @property
    def format(self) -> Format:
        """The active layout."""
        return self._format

    @format.setter
    def format(self, value: Format) -> None:
        if self._locked:
            logger.debug("Ignoring format change to %s on locked engine", value.name)
            return
        self._format = value

    @property
    def locked(self) -> bool:
        """Whether the format is pinned."""
        return self._locked

    def subscribe(self, listener: Listener) -> None:
        """Register a callback fired after every processed edit."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered callback."""
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _force_end_group(self, candidate: str) -> bool:
        return bool(self.separator) and candidate.endswith(self.separator)

    def mask(self, candidate: str) -> str | None:
        """Rebuild the mask text for a raw post-edit string.

        Returns:
            The new display text, or None if *candidate* holds more digits
            than the format accepts.
        """
        digits = sanitize(candidate)
        if len(digits) > self._format.max_digits:
            return None
        segments = segment(digits, self._format.widths)
        values = {
            field.name: chunk for field, chunk in zip(self._format.fields, segments)
        }
        return format_segments(
            self._format,
            values,
            self.separator,
            self._force_end_group(candidate),
        )

    def handle_edit(self, state: MaskState, event: EditEvent) -> EditOutcome:
        """Process one edit against the current text.

        Deletions are accepted as-is.  Anything else is rewritten into the
        mask, or rejected when the range is invalid or the result would
        hold too many digits.  Listeners fire for accepted and rewritten
        edits, never for rejected ones.
        """
        text = state.text
        start = utf16_offset_to_index(text, event.location)
        end = utf16_offset_to_index(text, event.location + event.length)

        if not event.replacement:
            if start is not None and end is not None and start <= end:
                state = MaskState(text[:start] + text[end:])
            self._notify()
            return EditOutcome(state, accepted=True)

        if start is None or end is None or start > end:
            logger.debug("Rejecting edit with invalid range %r for %r", event, text)
            return EditOutcome(state, accepted=False)

        candidate = text[:start] + event.replacement + text[end:]
        masked = self.mask(candidate)
        if masked is None:
            logger.debug(
                "Rejecting edit: %r exceeds %d digits for %s",
                candidate,
                self._format.max_digits,
                self._format.name,
            )
            return EditOutcome(state, accepted=False)

        self._notify()
        return EditOutcome(MaskState(masked), accepted=False)

    def should_change(
        self, text: str, location: int, length: int, replacement: str
    ) -> tuple[bool, str]:
        """Host-facing form of :meth:`handle_edit`.

        Returns:
            ``(accept, text)``: whether the host should apply its native
            edit, and the text the field should show afterwards.
        """
        outcome = self.handle_edit(
            MaskState(text), EditEvent(location, length, replacement)
        )
        return outcome.accepted, outcome.state.text

    def parse_date(self, text: str) -> datetime | None:
        """Parse *text* with the engine's format and separator."""
        return codec.parse(text, self._format, self.separator)

    def render_date(self, value: date | time | None) -> str:
        """Render *value* with the engine's format; None renders as ``''``."""
        if value is None:
            return ""
        return codec.render(value, self._format, self.separator)


def time_engine(separator: str = DEFAULT_TIME_SEPARATOR) -> MaskEngine:
    """Build an engine pinned to the hour/minute format."""
    return MaskEngine(Format.HOUR_MINUTE, separator, locked=True)
