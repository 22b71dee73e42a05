import pytest

from wireframe.map_loader import fill_map, load_map, map_height, map_width, z_values_text
from wireframe.points import new_map

BASIC = "0 0 0 0\n0 10 10 0\n0 10 10 0\n0 0 0 0\n"


@pytest.fixture
def basic_file(tmp_path):
    path = tmp_path / "basictest.fdf"
    path.write_text(BASIC, encoding="utf-8")
    return path


def test_width_and_height(basic_file):
    assert map_width(basic_file) == 4
    assert map_height(basic_file) == 4


def test_load_map_heights(basic_file):
    grid = load_map(basic_file)
    assert (grid.width, grid.height) == (4, 4)
    assert grid.point(1, 1).z == 10
    assert grid.point(0, 0).z == 0
    assert grid.point(3, 2).z == 0


def test_load_map_positions_and_color(basic_file):
    grid = load_map(basic_file)
    for y, row in enumerate(grid.array):
        for x, point in enumerate(row):
            assert (point.x, point.y) == (x, y)
            assert point.color == 0x00FFFFFF


def test_flat_points_colored_like_source_test(basic_file):
    grid = load_map(basic_file)
    colors = [
        0x00FF0000 if point.z == 0 else 0x00FFFFFF
        for row in grid.array
        for point in row
    ]
    assert colors.count(0x00FFFFFF) == 4
    assert colors.count(0x00FF0000) == 12


def test_z_values_text(basic_file):
    grid = load_map(basic_file)
    assert z_values_text(grid) == "0 0 0 0 \n0 10 10 0 \n0 10 10 0 \n0 0 0 0 \n"


def test_leading_space_not_counted(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("  1 2 3\n  4 5 6\n", encoding="utf-8")
    assert map_width(path) == 3
    grid = load_map(path)
    assert [p.z for p in grid.array[1]] == [4, 5, 6]


def test_width_taken_from_last_line(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("1 2 3 4\n5 6\n", encoding="utf-8")
    assert map_width(path) == 2


def test_color_suffix_and_signs(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("-3 +4 7,0xFF0000\n", encoding="utf-8")
    grid = load_map(path)
    assert [p.z for p in grid.array[0]] == [-3, 4, 7]


def test_short_row_raises(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("1\n2 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_map(path)


def test_fill_map_missing_rows():
    grid = new_map(2, 3)
    with pytest.raises(ValueError):
        fill_map(["1 2\n"], grid)


def test_fill_map_from_lines():
    grid = new_map(2, 2)
    fill_map(["5 6\n", "7 8\n"], grid)
    assert z_values_text(grid) == "5 6 \n7 8 \n"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "absent.fdf")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("", encoding="utf-8")
    grid = load_map(path)
    assert (grid.width, grid.height) == (0, 0)
    assert z_values_text(grid) == ""