"""Small helpers shared by the map reader and the renderer."""

from __future__ import annotations

_PI_APPROX = 3.14159


def next_word(text: str | None) -> str | None:
    """Return the rest of ``text`` from the start of its next word.

    Words are separated by spaces only. Returns ``None`` when ``text`` is
    ``None`` or when no further word follows.
    """
    if text is None:
        return None
    end = text.find(" ")
    if end == -1:
        return None
    rest = text[end:].lstrip(" ")
    return rest or None


def sign(value: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value == 0:
        return 0
    return -1 if value < 0 else 1


def rad(degrees: float) -> float:
    """Convert degrees to radians using the same approximation of pi."""
    return degrees * _PI_APPROX / 180