"""Strip everything but ASCII digits from a proposed edit result."""

from __future__ import annotations

import re

# A pictograph or symbol plus whatever is glued to it: variation selectors,
# keycap marks, and pictographs joined on with a zero-width joiner.  Keycap
# digits look like numbers but are emoji, so they go too.
_PICTOGRAPH = r"[\U0001D000-\U0001F77F\u2100-\u26FF]"
_PICTOGRAPH_RE = re.compile(
    rf"(?:{_PICTOGRAPH}|[0-9#*]\uFE0F?\u20E3)"
    rf"(?:[\uFE0E\uFE0F\u20E3]|\u200D{_PICTOGRAPH})*"
)
_NON_DIGIT_RE = re.compile(r"[^0-9]+")


def remove_pictographs(text: str) -> str:
    """Remove pictograph and symbol characters, keeping everything else."""
    return _PICTOGRAPH_RE.sub("", text)


def sanitize(text: str) -> str:
    """Reduce a candidate string to its ASCII digits.

    Pictographs are removed before the digit filter so that emoji which
    carry a digit (keycaps) do not leak numbers into the mask.

    Args:
        text: The post-edit candidate string.

    Returns:
        Only the characters ``0``-``9`` from *text*, possibly empty.
    """
    return _NON_DIGIT_RE.sub("", remove_pictographs(text))
