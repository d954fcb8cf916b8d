"""Incremental date and time text masks."""

from datemask.codec import parse, render
from datemask.engine import EditEvent, EditOutcome, MaskEngine, MaskState, time_engine
from datemask.formats import Format, FormatError
from datemask.formatter import format_date_segments, format_time_segments
from datemask.sanitizer import sanitize
from datemask.segmenter import segment

__all__ = [
    "EditEvent",
    "EditOutcome",
    "Format",
    "FormatError",
    "MaskEngine",
    "MaskState",
    "format_date_segments",
    "format_time_segments",
    "parse",
    "render",
    "sanitize",
    "segment",
    "time_engine",
]
