import pytest

from wireframe.xpm import (
    XpmError,
    parse_xpm,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)


def _pixels(image):
    return [
        [image.get_pixel(x, y) for x in range(image.width)] for y in range(image.height)
    ]


@pytest.mark.parametrize(
    "name, suffix, expected",
    [
        ("#ff0000", None, 0xFF0000),
        ("#00FF00", None, 0x00FF00),
        ("#FFFFFFFF", None, -1),
        ("#zz", None, 0),
        ("red", None, 0xFF0000),
        ("RED", None, 0xFF0000),
        ("dark", "slate", 0x2F4F4F),
        ("none", None, -1),
        ("nosuchcolour", None, 0),
        ("red", "s", 0),
    ],
)
def test_text_to_rgb(name, suffix, expected):
    assert text_to_rgb(name, suffix) == expected


def test_parse_simple_pixmap():
    image = parse_xpm(["2 2 2 1", "a c red", "b c #0000FF", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert _pixels(image) == [[0xFF0000, 0x0000FF], [0x0000FF, 0xFF0000]]


def test_none_colour_sets_top_byte():
    image = parse_xpm(["1 1 1 1", ". c None", "."])
    assert image.get_pixel(0, 0) == 0xFF000000


def test_colour_key_after_other_keys():
    image = parse_xpm(["1 1 1 1", "x s symbol c blue", "x"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "x c light grey", "x"])
    assert image.get_pixel(0, 0) == 0xD3D3D3


def test_short_codes_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_long_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_multi_char_codes():
    image = parse_xpm(["2 1 2 2", "aa c #010203", "bb c #040506", "bbaa"])
    assert _pixels(image) == [[0x040506, 0x010203]]


def test_undefined_code_is_black():
    image = parse_xpm(["2 1 1 1", "a c white", "az"])
    assert _pixels(image) == [[0xFFFFFF, 0]]


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_to_image_matches_parse():
    data = ["3 1 1 1", "g c green", "ggg"]
    image = xpm_to_image(data)
    assert (image.width, image.height) == (3, 1)
    assert _pixels(image) == _pixels(parse_xpm(data))
    assert image.get_pixel(2, 0) == 0x00FF00


def test_strip_block_comment_keeps_length():
    text = 'a /* x */ b'
    result = strip_comments(text)
    assert result == "a " + " " * 7 + " b"
    assert len(result) == len(text)


def test_strip_line_comment_removes_newline():
    assert strip_comments("x // hi\ny") == "x" + " " * 7 + "y"


def test_strip_ignores_markers_in_strings():
    text = '"a/*b" /* c */'
    assert strip_comments(text) == '"a/*b" ' + " " * 7


def test_strip_unterminated_comment_runs_to_end():
    assert strip_comments("ab /* open") == "ab " + " " * 7


def test_file_to_image(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 2 1",\n'
        '"a c red",\n'
        '"b c #0000FF",\n'
        "// pixels \"zz\"\n"
        '"ab",\n'
        '"ba"\n'
        "};\n",
        encoding="latin-1",
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 2)
    assert _pixels(image) == [[0xFF0000, 0x0000FF], [0x0000FF, 0xFF0000]]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_file_without_strings_raises(tmp_path):
    path = tmp_path / "empty.xpm"
    path.write_text("/* nothing here */\n", encoding="latin-1")
    with pytest.raises(XpmError):
        xpm_file_to_image(path)