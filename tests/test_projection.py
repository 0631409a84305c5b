import pytest

from fdfview.mapfile import parse_map
from fdfview.projection import (
    WIN_HEIGHT,
    WIN_WIDTH,
    View,
    color_for_height,
    initial_view,
    project,
)


def _flat(width, height):
    return parse_map([" ".join(["0"] * width) + "\n"] * height)


def test_initial_view_small_map():
    view = initial_view(_flat(10, 10))
    assert view.scale == 96
    assert view.z_scale == 20
    assert (view.offset_x, view.offset_y) == (0, 0)


def test_initial_view_huge_map_keeps_z_scale_positive():
    view = initial_view(_flat(2000, 1))
    assert view.z_scale == 1


def test_single_point_lands_in_the_centre():
    heightmap = _flat(1, 1)
    assert project(heightmap, View(scale=5, z_scale=3), 0, 0, 0) == (
        WIN_WIDTH // 2,
        WIN_HEIGHT // 2,
    )


def test_offsets_shift_the_result():
    heightmap = _flat(4, 3)
    plain = project(heightmap, View(scale=7, z_scale=2), 3, 1, 4)
    moved = project(heightmap, View(scale=7, z_scale=2, offset_x=30, offset_y=-20), 3, 1, 4)
    assert moved == (plain[0] + 30, plain[1] - 20)


def test_height_raises_the_point():
    heightmap = _flat(1, 1)
    view = View(scale=5, z_scale=2)
    x, y = project(heightmap, view, 0, 0, 5)
    assert x == WIN_WIDTH // 2
    assert y == WIN_HEIGHT // 2 - 5 * view.z_scale


def test_opposite_corners_are_symmetric():
    heightmap = _flat(3, 3)
    view = View(scale=10, z_scale=1)
    first = project(heightmap, view, 0, 0, 0)
    last = project(heightmap, view, 2, 2, 0)
    assert first[0] == last[0] == WIN_WIDTH // 2
    assert first[1] + last[1] == 2 * (WIN_HEIGHT // 2)
    assert first[1] < last[1]


@pytest.mark.parametrize(
    "z, color",
    [
        (25, 0x00FFAAFF),
        (20, 0x00FF00FF),
        (15, 0x00FF0000),
        (10, 0x00FFA500),
        (5, 0x00FFFF00),
        (0, 0x00FFFFFF),
        (-1, 0x000000FF),
    ],
)
def test_color_for_height(z, color):
    assert color_for_height(z) == color