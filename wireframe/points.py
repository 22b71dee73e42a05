"""Points and height maps."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_COLOR = 0x00FFFFFF


@dataclass
class Point:
    """A grid point with its height and colour."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR


@dataclass
class Map:
    """A rectangular grid of points, stored row by row."""

    width: int
    height: int
    array: list[list[Point]] = field(default_factory=list)

    def point(self, x: int, y: int) -> Point:
        """Return the point in column ``x`` of row ``y``."""
        return self.array[y][x]


def new_point(x: int, y: int, z: int) -> Point:
    """Create a point with the default colour."""
    return Point(x, y, z)


def new_map(width: int, height: int) -> Map:
    """Create a ``width`` by ``height`` map of flat points."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid map size {width}x{height}")
    array = [[Point(x, y, 0) for x in range(width)] for y in range(height)]
    return Map(width, height, array)