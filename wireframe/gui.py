"""Showing a scene in a window and feeding it key presses."""

from __future__ import annotations

import pygame

from .image import Image
from .scene import Key, Scene

_KEYSYMS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_PLUS: Key.PLUS,
    pygame.K_KP_PLUS: Key.PLUS,
    pygame.K_MINUS: Key.MINUS,
    pygame.K_KP_MINUS: Key.MINUS,
}


def keysym_for(key: int) -> int:
    """Translate a window-system key code to the key symbol the scene uses."""
    return int(_KEYSYMS.get(key, key))


def image_to_rgb(image: Image) -> bytes:
    """Return the pixels of ``image`` as packed RGB bytes, row by row."""
    opp = image.bpp // 8
    if opp >= 3 and image.line_len == image.width * opp:
        out = bytearray(image.width * image.height * 3)
        out[0::3] = image.data[2::opp]
        out[1::3] = image.data[1::opp]
        out[2::3] = image.data[0::opp]
        return bytes(out)
    return bytes(
        channel
        for y in range(image.height)
        for x in range(image.width)
        for color in (image.get_pixel(x, y),)
        for channel in ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
    )


def _present(screen: pygame.Surface, scene: Scene) -> None:
    size = (scene.image.width, scene.image.height)
    surface = pygame.image.frombuffer(image_to_rgb(scene.image), size, "RGB")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run_window(scene: Scene, title: str = "FdF") -> None:
    """Show ``scene`` until the window is closed or escape is pressed."""
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((scene.width, scene.height))
        pygame.display.set_caption(title)
        scene.render()
        _present(screen, scene)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                scene.close()
                break
            if event.type == pygame.KEYDOWN:
                if not scene.handle_key(keysym_for(event.key)):
                    break
                _present(screen, scene)
    finally:
        pygame.display.quit()