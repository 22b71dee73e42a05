"""Drawing points, lines and whole wireframe maps into an image."""

from __future__ import annotations

from .camera import Camera, project_point
from .image import Image
from .points import Map, Point
from .utils import sign

LINE_COLOR = 0xFFFFFF


def draw_point(image: Image, point: Point, color: int) -> None:
    """Write the red, green and blue bytes of ``color`` at ``point``.

    Points outside the image are ignored; any fourth byte is left as is.
    """
    if not (0 <= point.x < image.width and 0 <= point.y < image.height):
        return
    start = point.x * image.bpp // 8 + point.y * image.line_len
    chunk = (color & 0xFFFFFF).to_bytes(3, "little")
    end = min(start + len(chunk), len(image.data))
    image.data[start:end] = chunk[: end - start]


def draw_line(image: Image, p0: Point, p1: Point) -> None:
    """Draw a white line from ``p0`` to ``p1``, both ends included."""
    dif_x = abs(p1.x - p0.x)
    dif_y = abs(p1.y - p0.y)
    move_x = sign(p1.x - p0.x)
    move_y = sign(p1.y - p0.y)
    error = dif_x - dif_y
    x, y = p0.x, p0.y
    while x != p1.x or y != p1.y:
        draw_point(image, Point(x, y, p0.z), LINE_COLOR)
        doubled = error * 2
        if doubled > -dif_y:
            error -= dif_y
            x += move_x
        if doubled < dif_x:
            error += dif_x
            y += move_y
    draw_point(image, Point(x, y, p0.z), LINE_COLOR)


def draw_map(image: Image, grid: Map, camera: Camera) -> None:
    """Draw each point of ``grid`` joined to its right and lower neighbours."""
    projected = [
        [project_point(point, camera) for point in row[: grid.width]]
        for row in grid.array[: grid.height]
    ]
    for y, row in enumerate(projected):
        for x, start in enumerate(row):
            if x < grid.width - 1:
                draw_line(image, start, row[x + 1])
            if y < grid.height - 1:
                draw_line(image, start, projected[y + 1][x])


def clear_image(image: Image) -> None:
    """Set the red, green and blue bytes of every pixel to zero."""
    opp = image.bpp // 8
    if opp < 3:
        image.data[:] = bytes(len(image.data))
        return
    for channel in range(3):
        count = len(image.data[channel::opp])
        image.data[channel::opp] = bytes(count)