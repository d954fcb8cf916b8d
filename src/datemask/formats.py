"""Mask formats: field layout, width plans, and template tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class FormatError(ValueError):
    """Raised when a format name cannot be resolved."""


class Overflow(Enum):
    """What a two-digit field does when its value exceeds the cap."""

    VERBATIM = "verbatim"
    KEEP_LAST_DIGIT = "keep_last_digit"
    CLAMP = "clamp"


@dataclass(frozen=True)
class FieldSpec:
    """Validation and padding policy for one segment of a mask.

    ``marker`` is the separator marker that follows the field in the
    template.  It is only emitted once the field is complete.
    """

    name: str
    placeholder: str
    width: int
    marker: str | None = None
    cap: int | None = None
    lead_limit: str | None = None
    overflow: Overflow = Overflow.VERBATIM
    pad_above: str | None = None

    @property
    def validated(self) -> bool:
        """Whether the field is range-checked rather than inserted verbatim."""
        return self.overflow is not Overflow.VERBATIM


DAY = FieldSpec(
    "day", "dd", 2, marker="*", cap=31, lead_limit="3",
    overflow=Overflow.KEEP_LAST_DIGIT,
)
MONTH = FieldSpec(
    "month", "MM", 2, marker="$", cap=12, lead_limit="1",
    overflow=Overflow.KEEP_LAST_DIGIT,
)
YEAR = FieldSpec("year", "yyyy", 4)
HOUR = FieldSpec(
    "hour", "HH", 2, marker="$", cap=23, lead_limit="2",
    overflow=Overflow.CLAMP,
)
MINUTE = FieldSpec("minute", "mm", 2, pad_above="5")

_FIELDS_BY_PLACEHOLDER: dict[str, FieldSpec] = {
    f.placeholder: f for f in (DAY, MONTH, YEAR, HOUR, MINUTE)
}

# Quoted literals are separator markers; bare letters are placeholders.
_TOKEN_RE = re.compile(r"'([^']*)'|(yyyy|dd|MM|HH|mm)")


@dataclass(frozen=True)
class Token:
    """One item of a tokenized template: a field or a separator marker."""

    field: FieldSpec | None = None
    marker: str | None = None


def tokenize(template: str) -> list[Token]:
    """Split a template such as ``dd'*'MM'$'yyyy`` into tokens.

    Args:
        template: A format template string.

    Returns:
        Tokens in template order.

    Raises:
        FormatError: If the template contains anything but placeholders
            and quoted markers.
    """
    tokens: list[Token] = []
    pos = 0
    for match in _TOKEN_RE.finditer(template):
        if match.start() != pos:
            raise FormatError(f"Unexpected text in template: {template!r}")
        if match.group(1) is not None:
            tokens.append(Token(marker=match.group(1)))
        else:
            tokens.append(Token(field=_FIELDS_BY_PLACEHOLDER[match.group(2)]))
        pos = match.end()
    if pos != len(template):
        raise FormatError(f"Unexpected text in template: {template!r}")
    return tokens


class Format(Enum):
    """The four supported mask layouts; the value is the template."""

    MONTH_YEAR = "MM'$'yyyy"
    DAY_MONTH_YEAR = "dd'*'MM'$'yyyy"
    MONTH_DAY_YEAR = "MM'$'dd'*'yyyy"
    HOUR_MINUTE = "HH'$'mm"

    @property
    def tokens(self) -> list[Token]:
        """Return the tokenized template."""
        return tokenize(self.value)

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        """Return the fields in display order."""
        return tuple(t.field for t in self.tokens if t.field is not None)

    @property
    def widths(self) -> list[int]:
        """Return the width plan, e.g. ``[2, 2, 4]``."""
        return [f.width for f in self.fields]

    @property
    def max_digits(self) -> int:
        """Return the largest number of digits the mask accepts."""
        return sum(self.widths)

    @property
    def is_time(self) -> bool:
        """Whether this is the hour/minute layout."""
        return self is Format.HOUR_MINUTE

    def describe(self, separator: str) -> str:
        """Render the template with upper-case placeholders and a separator."""
        parts = []
        for token in self.tokens:
            if token.field is not None:
                parts.append(token.field.placeholder.upper())
            else:
                parts.append(separator)
        return "".join(parts)

    @classmethod
    def from_name(cls, name: str) -> Format:
        """Resolve a format from a config or CLI name.

        Accepts member names in any case with ``-`` or ``_``
        (``day-month-year``) and camelCase names (``dayMonthYear``).

        Raises:
            FormatError: If the name matches no format.
        """
        key = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", name.strip())
        key = key.replace("-", "_").upper()
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(f.config_name for f in cls)
            raise FormatError(
                f"Unknown format {name!r} (expected one of: {choices})"
            ) from None

    @property
    def config_name(self) -> str:
        """Return the name used in config files, e.g. ``day_month_year``."""
        return self.name.lower()
