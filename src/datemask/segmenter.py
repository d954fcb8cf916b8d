"""Split a digit string into segments according to a width plan."""

from __future__ import annotations


def segment(digits: str, widths: list[int]) -> list[str]:
    """Greedily cut *digits* into consecutive chunks.

    Each chunk takes the next ``widths[i]`` digits, or whatever remains if
    fewer are left.  No empty chunks are produced: once the digits run out
    the result is shorter than *widths*.

    Args:
        digits: A digits-only string.
        widths: Maximum digit count per segment, e.g. ``[2, 2, 4]``.

    Returns:
        The segments in order.
    """
    segments: list[str] = []
    rest = digits
    for width in widths:
        if not rest:
            break
        segments.append(rest[:width])
        rest = rest[width:]
    return segments
