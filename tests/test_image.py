import pytest

from wireframe.image import Image


def test_new_image_is_black_and_sized():
    image = Image(4, 3)
    assert image.bpp == 32
    assert image.line_len == 16
    assert len(image.data) == 48
    assert all(byte == 0 for byte in image.data)


def test_set_and_get_pixel_round_trip():
    image = Image(10, 10)
    image.set_pixel(3, 7, 0x00FF8040)
    assert image.get_pixel(3, 7) == 0x00FF8040
    assert image.get_pixel(4, 7) == 0


def test_pixel_bytes_are_little_endian():
    image = Image(2, 2)
    image.set_pixel(1, 1, 0x00112233)
    start = 1 * image.line_len + 1 * 4
    assert bytes(image.data[start : start + 4]) == b"\x33\x22\x11\x00"


def test_pixel_outside_image_raises():
    image = Image(5, 5)
    with pytest.raises(IndexError):
        image.set_pixel(5, 0, 1)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_raises(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_invalid_bpp_raises():
    with pytest.raises(ValueError):
        Image(2, 2, bpp=12)


def test_24_bit_image_uses_three_bytes():
    image = Image(3, 1, bpp=24)
    assert image.line_len == 9
    image.set_pixel(2, 0, 0xFFABCDEF)
    assert image.get_pixel(2, 0) == 0xABCDEF


def test_clear_fills_every_pixel():
    image = Image(3, 2)
    image.set_pixel(0, 0, 0x123456)
    image.clear(0x00FFFFFF)
    assert {image.get_pixel(x, y) for x in range(3) for y in range(2)} == {0xFFFFFF}


def test_blit_copies_at_offset():
    target = Image(5, 5)
    source = Image(2, 2)
    source.set_pixel(0, 0, 0xAA)
    source.set_pixel(1, 1, 0xBB)
    target.blit(source, 2, 3)
    assert target.get_pixel(2, 3) == 0xAA
    assert target.get_pixel(3, 4) == 0xBB
    assert target.get_pixel(0, 0) == 0


def test_blit_clips_to_target():
    target = Image(3, 3)
    source = Image(4, 4)
    source.clear(0x010203)
    target.blit(source, -2, 1)
    assert target.get_pixel(0, 1) == 0x010203
    assert target.get_pixel(1, 2) == 0x010203
    assert target.get_pixel(2, 1) == 0
    assert target.get_pixel(0, 0) == 0


def test_blit_entirely_outside_changes_nothing():
    target = Image(3, 3)
    source = Image(2, 2)
    source.clear(0xFF)
    target.blit(source, 10, 10)
    assert all(byte == 0 for byte in target.data)


def test_blit_between_depths():
    target = Image(2, 2, bpp=32)
    source = Image(1, 1, bpp=24)
    source.set_pixel(0, 0, 0x445566)
    target.blit(source, 1, 0)
    assert target.get_pixel(1, 0) == 0x445566


def test_large_image_pixel_and_window_copy():
    image = Image(1920, 1080)
    image.set_pixel(250, 250, 0x00FF0000)
    window = Image(500, 500)
    window.blit(image, 0, 0)
    assert window.get_pixel(250, 250) == 0x00FF0000
    assert window.get_pixel(249, 250) == 0