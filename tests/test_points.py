import pytest

from wireframe.points import DEFAULT_COLOR, Map, Point, new_map, new_point


def test_new_point_fields():
    point = new_point(3, 4, -2)
    assert (point.x, point.y, point.z) == (3, 4, -2)
    assert point.color == 0x00FFFFFF


def test_point_default_color_constant():
    assert Point(0, 0, 0).color == DEFAULT_COLOR


def test_new_map_dimensions():
    grid = new_map(4, 3)
    assert grid.width == 4
    assert grid.height == 3
    assert len(grid.array) == 3
    assert all(len(row) == 4 for row in grid.array)


def test_new_map_points_know_their_position():
    grid = new_map(5, 2)
    for y in range(grid.height):
        for x in range(grid.width):
            point = grid.point(x, y)
            assert (point.x, point.y) == (x, y)
            assert point.z == 0


def test_map_point_is_row_major():
    grid = new_map(2, 2)
    grid.array[1][0].z = 9
    assert grid.point(0, 1).z == 9
    assert grid.point(1, 0).z == 0


def test_rows_are_independent():
    grid = new_map(3, 3)
    grid.point(1, 1).z = 5
    assert [p.z for p in grid.array[0]] == [0, 0, 0]
    assert grid.array[0] is not grid.array[1]


def test_empty_map():
    grid = new_map(0, 0)
    assert grid.array == []


@pytest.mark.parametrize("width,height", [(-1, 2), (2, -1)])
def test_negative_size_rejected(width, height):
    with pytest.raises(ValueError):
        new_map(width, height)


def test_map_point_out_of_range():
    grid = new_map(2, 2)
    with pytest.raises(IndexError):
        grid.point(0, 5)


def test_map_equality_by_value():
    assert new_map(2, 1) == Map(2, 1, [[Point(0, 0, 0), Point(1, 0, 0)]])