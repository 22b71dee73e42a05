"""A height map with its camera and image, driven by key presses."""

from __future__ import annotations

from enum import IntEnum
from types import TracebackType

from .camera import cam_init
from .draw import clear_image, draw_map
from .image import Image
from .points import Map

ANGLE_STEP = 0.05
OFFSET_DIVISOR = 25


class Key(IntEnum):
    """Key symbols the scene reacts to."""

    ESCAPE = 65307
    W = 119
    S = 115
    Q = 113
    E = 101
    D = 100
    A = 97
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    PLUS = 43
    MINUS = 45


_ROTATIONS = {
    Key.W: ("x_angle", ANGLE_STEP),
    Key.S: ("x_angle", -ANGLE_STEP),
    Key.Q: ("y_angle", -ANGLE_STEP),
    Key.E: ("y_angle", ANGLE_STEP),
    Key.D: ("z_angle", ANGLE_STEP),
    Key.A: ("z_angle", -ANGLE_STEP),
}


class Scene:
    """The state shown in the window: map, camera and rendered image."""

    def __init__(self, grid: Map, width: int = 1080, height: int = 720) -> None:
        self.grid = grid
        self.width = width
        self.height = height
        self.image = Image(width, height)
        self.camera = cam_init(grid, width, height)
        self.closed = False

    def __enter__(self) -> Scene:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("scene is closed")

    def _move(self, keycode: int) -> None:
        step_x = self.width // OFFSET_DIVISOR
        step_y = self.height // OFFSET_DIVISOR
        if keycode == Key.RIGHT:
            self.camera.x_offset -= step_x
        elif keycode == Key.LEFT:
            self.camera.x_offset += step_x
        elif keycode == Key.DOWN:
            self.camera.y_offset -= step_y
        elif keycode == Key.UP:
            self.camera.y_offset += step_y

    def handle_key(self, keycode: int) -> bool:
        """Apply ``keycode`` and redraw; return ``False`` once the scene closes."""
        self._check_open()
        if keycode == Key.ESCAPE:
            self.close()
            return False
        rotation = _ROTATIONS.get(keycode)  # type: ignore[call-overload]
        if rotation is not None:
            name, step = rotation
            setattr(self.camera, name, getattr(self.camera, name) + step)
        self._move(keycode)
        if keycode == Key.PLUS:
            self.camera.zoom += 1
        elif keycode == Key.MINUS:
            self.camera.zoom -= 1
        self.render()
        return True

    def render(self) -> None:
        """Redraw the map into the image from scratch."""
        self._check_open()
        clear_image(self.image)
        draw_map(self.image, self.grid, self.camera)

    def close(self) -> None:
        """Mark the scene closed; closing twice is harmless."""
        self.closed = True