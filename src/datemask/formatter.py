"""Rebuild the display text of a mask from its raw digit segments."""

from __future__ import annotations

from datemask.formats import FieldSpec, Format, Overflow

# Fields are resolved in this order; a forced end group goes to the first
# in-progress validated field.
_RESOLUTION_ORDER = ("day", "month", "hour", "year", "minute")


def _resolve_field(
    field: FieldSpec, raw: str, force: bool
) -> tuple[str, bool, bool]:
    """Apply a field's padding and overflow policy to its raw digits.

    Args:
        field: The field policy.
        raw: Up to ``field.width`` digits typed for this field.
        force: Whether the user explicitly closed the current group.

    Returns:
        A ``(text, complete, force)`` tuple: the digits to display, whether
        the separator after the field should be shown, and the force flag
        left for the remaining fields.
    """
    if not field.validated:
        if field.pad_above is not None and len(raw) == 1 and raw > field.pad_above:
            raw = "0" + raw
        return raw, False, force

    if len(raw) >= 2:
        if int(raw) <= field.cap:
            return raw, True, force
        if field.overflow is Overflow.CLAMP:
            return str(field.cap), True, force
        return raw[-1], False, force

    if not raw:
        return "", False, force

    if raw > field.lead_limit:
        return "0" + raw, True, force
    if force:
        return "0" + raw, True, False
    return raw, False, force


def format_segments(
    fmt: Format,
    values: dict[str, str],
    separator: str,
    force_end_group: bool = False,
) -> str:
    """Build the mask text for *fmt* from raw per-field digits.

    Args:
        fmt: The active format.
        values: Raw digits keyed by field name (``day``, ``month``, ...).
            Missing fields count as empty.
        separator: Text shown between complete fields.
        force_end_group: The edit ended on the separator, so the first
            in-progress field is padded and closed.

    Returns:
        The display text, e.g. ``'01.02.2020'``.
    """
    ordered = sorted(fmt.fields, key=lambda f: _RESOLUTION_ORDER.index(f.name))
    texts: dict[str, str] = {}
    open_markers: set[str] = set()
    force = force_end_group
    for field in ordered:
        text, complete, force = _resolve_field(field, values.get(field.name, ""), force)
        texts[field.name] = text
        if complete and field.marker is not None:
            open_markers.add(field.marker)

    parts = []
    for token in fmt.tokens:
        if token.field is not None:
            parts.append(texts[token.field.name])
        elif token.marker in open_markers:
            parts.append(separator)
    return "".join(parts)


def format_date_segments(
    fmt: Format,
    day: str,
    month: str,
    year: str,
    separator: str,
    force_end_group: bool = False,
) -> str:
    """Build the mask text for a date format.

    Fields the format does not show (day for ``MONTH_YEAR``) are ignored.
    """
    return format_segments(
        fmt,
        {"day": day, "month": month, "year": year},
        separator,
        force_end_group,
    )


def format_time_segments(
    hour: str,
    minute: str,
    separator: str,
    force_end_group: bool = False,
) -> str:
    """Build the mask text for the hour/minute format."""
    return format_segments(
        Format.HOUR_MINUTE,
        {"hour": hour, "minute": minute},
        separator,
        force_end_group,
    )
