"""Loading XPM pixmaps into images.

Colours are given either as ``#RRGGBB`` values or as names from the colour
table. The special colour ``none`` becomes a pixel with only the top byte set.
"""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator

from .colors import NO_COLOR, lookup_color
from .image import Image

TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 63
_DECIMAL = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _find_unquoted(text: str, token: str) -> int:
    """Return the index of ``token`` outside double-quoted strings, or -1."""
    in_quote = False
    for index, char in enumerate(text):
        if char == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(token, index):
            return index
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside strings with spaces.

    Block comments are removed first, then line comments together with
    their newline. The text keeps its length.
    """
    while (start := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 2)
    while (start := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 1)
    return text


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    if match is None or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return _to_int32(-value if match.group(1) == "-" else value)


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Return the colour described by ``name``.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` and ``suffix``
    (when given) are joined by a space and looked up, ignoring case.
    Unknown names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _header(line: str) -> tuple[int, int, int, int]:
    words = line.split()
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid XPM header {line!r}")
    return width, height, ncolors, cpp


def _color_value(line: str, cpp: int) -> int:
    words = line[cpp:].split()
    try:
        key_at = words.index("c")
    except ValueError:
        raise XpmError(f"colour line {line!r} has no 'c' key") from None
    if key_at + 1 >= len(words):
        raise XpmError(f"colour line {line!r} has no colour after 'c'")
    suffix = words[key_at + 2] if key_at + 2 < len(words) else None
    return text_to_rgb(words[key_at + 1], suffix)


def _next_line(rows: Iterator[str], what: str) -> str:
    line = next(rows, None)
    if line is None:
        raise XpmError(f"XPM data ends before the {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    With one or two characters per pixel a later colour definition replaces
    an earlier one for the same code; with more, the first one is kept.
    Pixel codes without a definition are black.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _header(_next_line(rows, "header"))
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definitions")
        value = _color_value(line, cpp)
        code = line[:cpp]
        if last_wins:
            palette[code] = value
        else:
            palette.setdefault(code, value)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x in range(width):
            color = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            if color == NO_COLOR:
                color = TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Load an XPM file; its quoted strings are the pixmap's lines."""
    with open(path, encoding="latin-1") as stream:
        text = strip_comments(stream.read())
    return parse_xpm(match.group(1) for match in _QUOTED.finditer(text))