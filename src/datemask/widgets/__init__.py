"""Textual widgets for masked date and time entry."""

from datemask.widgets.date_input import DateInput, TimeInput

__all__ = ["DateInput", "TimeInput"]
