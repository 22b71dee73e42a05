"""Camera state and the isometric projection of map points."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .points import Map, Point
from .utils import rad

DEFAULT_Z_HEIGHT = 10.0


@dataclass
class Camera:
    """Zoom, rotation and screen offset applied when projecting points."""

    zoom: float = 1.0
    x_angle: float = 0.0
    y_angle: float = 0.0
    z_angle: float = 0.0
    z_height: float = DEFAULT_Z_HEIGHT
    x_offset: int = 0
    y_offset: int = 0


def cam_init(grid: Map, width: int, height: int) -> Camera:
    """Create a camera that fits ``grid`` into a ``width`` by ``height`` view.

    Raises ``ValueError`` when the grid has no rows or no columns.
    """
    if grid.width <= 0 or grid.height <= 0:
        raise ValueError(f"cannot frame an empty {grid.width}x{grid.height} map")
    zoom = height // grid.height
    if width < height:
        zoom = width // grid.width
    return Camera(
        zoom=float(zoom),
        x_angle=rad(0),
        y_angle=rad(0),
        z_angle=rad(0),
        z_height=DEFAULT_Z_HEIGHT,
        x_offset=width // 3,
        y_offset=height // 6,
    )


def zoom_point(point: Point, camera: Camera) -> Point:
    """Scale ``point`` by the camera zoom; heights are also divided by ``z_height``."""
    return replace(
        point,
        x=int(point.x * camera.zoom),
        y=int(point.y * camera.zoom),
        z=int(point.z * camera.zoom / camera.z_height),
    )


def rotate_point(point: Point, camera: Camera) -> Point:
    """Rotate ``point`` around the x, y and z axes in that order."""
    x, y, z = point.x, point.y, point.z

    cos_a, sin_a = math.cos(camera.x_angle), math.sin(camera.x_angle)
    y, z = int(y * cos_a - z * sin_a), int(y * sin_a + z * cos_a)

    cos_a, sin_a = math.cos(camera.y_angle), math.sin(camera.y_angle)
    x, z = int(x * cos_a + z * sin_a), int(-x * sin_a + z * cos_a)

    cos_a, sin_a = math.cos(camera.z_angle), math.sin(camera.z_angle)
    x, y = int(x * cos_a - y * sin_a), int(x * sin_a + y * cos_a)

    return replace(point, x=x, y=y, z=z)


def project_point(point: Point, camera: Camera) -> Point:
    """Return the screen position of ``point`` seen through ``camera``."""
    moved = rotate_point(zoom_point(point, camera), camera)
    x = int((moved.x - moved.y) * math.cos(rad(60)))
    y = int((x + moved.y) * math.sin(rad(30)) - moved.z)
    return replace(moved, x=x + camera.x_offset, y=y + camera.y_offset)