"""Reading height maps from text files of space-separated heights."""

from __future__ import annotations

import os
import re
from typing import Iterable

from .line_reader import LineReader
from .points import DEFAULT_COLOR, Map, Point, new_map
from .utils import next_word

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _NUMBER.match(text)
    return int(match.group(1)) if match else 0


def _lines(path: str | os.PathLike[str]) -> Iterable[str]:
    with open(path, encoding="utf-8", newline="") as stream:
        yield from LineReader(stream)


def _words_in_line(line: str) -> int:
    count = -1 if line.startswith(" ") else 0
    word: str | None = line
    while word is not None:
        word = next_word(word)
        count += 1
    return count


def map_width(path: str | os.PathLike[str]) -> int:
    """Return the number of values on the last line of the file."""
    width = 0
    for line in _lines(path):
        width = _words_in_line(line)
    return width


def map_height(path: str | os.PathLike[str]) -> int:
    """Return the number of lines in the file."""
    return sum(1 for _ in _lines(path))


def fill_map(lines: Iterable[str], grid: Map) -> None:
    """Fill ``grid`` with the heights read from ``lines``.

    Raises ``ValueError`` when a row is missing or holds too few values.
    """
    rows = iter(lines)
    for y in range(grid.height):
        text: str | None = next(rows, None)
        if text is None:
            raise ValueError(f"map has fewer than {grid.height} rows")
        row = []
        for x in range(grid.width):
            if text is None:
                raise ValueError(f"row {y} has fewer than {grid.width} values")
            row.append(Point(x, y, _atoi(text), DEFAULT_COLOR))
            text = next_word(text)
        grid.array[y] = row


def load_map(path: str | os.PathLike[str]) -> Map:
    """Load a height map from ``path``."""
    width = map_width(path)
    height = map_height(path)
    grid = new_map(width, height)
    fill_map(_lines(path), grid)
    return grid


def z_values_text(grid: Map) -> str:
    """Render the heights of ``grid`` as text, one row per line."""
    return "".join(
        "".join(f"{point.z} " for point in row[: grid.width]) + "\n"
        for row in grid.array[: grid.height]
    )