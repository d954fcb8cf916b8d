"""Convert between complete mask text and datetime values."""

from __future__ import annotations

from datetime import date, datetime, time

from datemask.formats import Format

_STRFTIME_CODES: dict[str, str] = {
    "dd": "%d",
    "MM": "%m",
    "yyyy": "%Y",
    "HH": "%H",
    "mm": "%M",
}


def strptime_format(fmt: Format, separator: str) -> str:
    """Translate a mask format into a ``strptime``/``strftime`` pattern.

    Args:
        fmt: The mask format.
        separator: The separator substituted for both markers.

    Returns:
        A pattern such as ``'%d.%m.%Y'``.
    """
    escaped = separator.replace("%", "%%")
    parts = []
    for token in fmt.tokens:
        if token.field is not None:
            parts.append(_STRFTIME_CODES[token.field.placeholder])
        else:
            parts.append(escaped)
    return "".join(parts)


def parse(text: str, fmt: Format, separator: str) -> datetime | None:
    """Parse mask text into a datetime.

    Hour/minute masks yield a datetime on 1900-01-01.

    Returns:
        The parsed value, or None if *text* is incomplete, does not match
        the format, or names an impossible date.
    """
    if not text:
        return None
    try:
        return datetime.strptime(text, strptime_format(fmt, separator))
    except ValueError:
        return None


def render(value: date | time, fmt: Format, separator: str) -> str:
    """Render a date, datetime, or time as mask text.

    Args:
        value: The value to render.  A bare ``time`` only makes sense for
            ``Format.HOUR_MINUTE``.
        fmt: The mask format.
        separator: The separator substituted for both markers.

    Returns:
        The formatted text, e.g. ``'01.02.2020'``.
    """
    return value.strftime(strptime_format(fmt, separator))
