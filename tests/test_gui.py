from unittest import mock

import pygame
import pytest

from wireframe.gui import image_to_rgb, keysym_for, run_window
from wireframe.image import Image
from wireframe.points import new_map
from wireframe.scene import Key, Scene


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_UP, Key.UP),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_KP_PLUS, Key.PLUS),
        (pygame.K_KP_MINUS, Key.MINUS),
        (pygame.K_w, Key.W),
        (pygame.K_a, Key.A),
    ],
)
def test_keysym_for(key, expected):
    assert keysym_for(key) == expected


def test_image_to_rgb_orders_channels():
    image = Image(2, 1)
    image.set_pixel(0, 0, 0x112233)
    image.set_pixel(1, 0, 0xFFAABBCC)
    assert image_to_rgb(image) == b"\x11\x22\x33\xaa\xbb\xcc"


def test_image_to_rgb_length_and_24_bit():
    wide = Image(5, 3)
    assert len(image_to_rgb(wide)) == 5 * 3 * 3
    packed = Image(2, 2, bpp=24)
    packed.set_pixel(1, 1, 0x010203)
    assert image_to_rgb(packed)[-3:] == b"\x01\x02\x03"


def test_image_to_rgb_16_bit_fallback():
    image = Image(1, 1, bpp=16)
    image.set_pixel(0, 0, 0xABCD)
    assert image_to_rgb(image) == b"\x00\xab\xcd"


def test_run_window_feeds_keys_until_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = Scene(new_map(3, 3), 120, 90)
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w),
        pygame.event.Event(pygame.QUIT),
    ]
    with mock.patch("pygame.event.wait", side_effect=events):
        run_window(scene, "test")
    assert scene.camera.x_angle == pytest.approx(0.05)
    assert scene.closed is True


def test_run_window_stops_on_escape(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = Scene(new_map(2, 2), 100, 100)
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    with mock.patch("pygame.event.wait", side_effect=events):
        run_window(scene)
    assert scene.closed is True