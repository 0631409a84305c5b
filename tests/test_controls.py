import pytest

from fdfview.controls import Action, Key, handle_key
from fdfview.mapfile import parse_map
from fdfview.projection import WIN_HEIGHT, WIN_WIDTH, View


@pytest.fixture
def heightmap():
    return parse_map(["0 0 0", "0 0 0"])


def test_raw_keysyms_are_recognised(heightmap):
    view = View(scale=10, z_scale=2)
    assert handle_key(65362, view, heightmap) is Action.REDRAW
    assert view.offset_y == -10
    assert handle_key(65307, view, heightmap) is Action.QUIT


def test_escape_quits_without_changing_view(heightmap):
    view = View(scale=10, z_scale=2)
    assert handle_key(Key.ESC, view, heightmap) is Action.QUIT
    assert view == View(scale=10, z_scale=2)


def test_zoom_in_and_out(heightmap):
    view = View(scale=10, z_scale=2)
    assert handle_key(Key.J, view, heightmap) is Action.REDRAW
    assert view.scale == 10 + 1
    assert handle_key(Key.K, view, heightmap) is Action.REDRAW
    assert view.scale == 10


def test_zoom_out_stops_at_one(heightmap):
    view = View(scale=1, z_scale=1)
    assert handle_key(Key.K, view, heightmap) is Action.REDRAW
    assert view.scale == 1


def test_zoom_in_stops_at_limit(heightmap):
    limit = (WIN_WIDTH // heightmap.width) * 3
    view = View(scale=limit, z_scale=1)
    handle_key(Key.J, view, heightmap)
    assert view.scale == limit


def test_height_scale_bounded_by_half_zoom(heightmap):
    view = View(scale=10, z_scale=4)
    handle_key(Key.I, view, heightmap)
    assert view.z_scale == 5
    handle_key(Key.I, view, heightmap)
    assert view.z_scale == 5
    handle_key(Key.O, view, heightmap)
    assert view.z_scale == 4


def test_height_scale_stops_at_one(heightmap):
    view = View(scale=10, z_scale=1)
    handle_key(Key.O, view, heightmap)
    assert view.z_scale == 1


def test_pan_up_and_down_round_trip(heightmap):
    view = View(scale=10, z_scale=1)
    handle_key(Key.UP, view, heightmap)
    handle_key(Key.DOWN, view, heightmap)
    assert view.offset_y == 0
    handle_key(Key.RIGHT, view, heightmap)
    handle_key(Key.LEFT, view, heightmap)
    assert view.offset_x == 0


def test_pan_is_limited(heightmap):
    view = View(scale=10, z_scale=1, offset_x=-(WIN_WIDTH // 2), offset_y=-(WIN_HEIGHT // 2))
    assert handle_key(Key.LEFT, view, heightmap) is Action.REDRAW
    assert handle_key(Key.UP, view, heightmap) is Action.REDRAW
    assert (view.offset_x, view.offset_y) == (-(WIN_WIDTH // 2), -(WIN_HEIGHT // 2))


def test_other_keys_do_nothing(heightmap):
    view = View(scale=10, z_scale=2)
    assert handle_key(Key.N, view, heightmap) is Action.NONE
    assert handle_key(ord("a"), view, heightmap) is Action.NONE
    assert view == View(scale=10, z_scale=2)