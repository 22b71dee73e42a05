"""A small printf-style formatter with a fixed set of conversions.

Supported conversions: ``%c %s %p %x %X %d %i %u %%``. An unknown
conversion character is dropped and consumes no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_MISSING = object()
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_CONVERSIONS = frozenset("cspxXdiu")


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _render(spec: str, value: Any) -> str:
    if spec == "c":
        if isinstance(value, str):
            return value[:1]
        return chr(int(value) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = 0 if value is None else int(value)
        return "0x" + format(address & _UINT64, "x")
    if spec == "x":
        return format(int(value) & _UINT32, "x")
    if spec == "X":
        return format(int(value) & _UINT32, "X")
    if spec in ("d", "i"):
        return str(_to_int32(int(value)))
    # spec == "u"
    return str(int(value) & _UINT32)


def _next_value(values: Iterator[Any]) -> Any:
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return value


def format_message(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the resulting text."""
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_render(spec, _next_value(values)))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)