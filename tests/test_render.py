from fdfview.canvas import Canvas
from fdfview.mapfile import parse_map
from fdfview.projection import WIN_HEIGHT, WIN_WIDTH, View, color_for_height, project
from fdfview.render import draw_map, render_map


def _lit_pixels(canvas):
    data = canvas.to_bytes()
    return sum(1 for i in range(0, len(data), 4) if data[i:i + 4] != b"\0\0\0\0")


def test_render_map_has_window_size():
    heightmap = parse_map(["0 0", "0 0"])
    canvas = render_map(heightmap, View(scale=10, z_scale=1))
    assert (canvas.width, canvas.height) == (WIN_WIDTH, WIN_HEIGHT)


def test_single_point_draws_nothing():
    heightmap = parse_map(["7"])
    canvas = render_map(heightmap, View(scale=10, z_scale=1))
    assert _lit_pixels(canvas) == 0


def test_flat_segment_ends_are_drawn_in_zero_colour():
    heightmap = parse_map(["0 0"])
    view = View(scale=20, z_scale=1)
    canvas = render_map(heightmap, view)
    for x in (0, 1):
        px, py = project(heightmap, view, x, 0, 0)
        assert canvas.get_pixel(px, py) == color_for_height(0)


def test_segment_colour_comes_from_its_start_height():
    heightmap = parse_map(["5 0"])
    view = View(scale=20, z_scale=1)
    canvas = render_map(heightmap, view)
    end = project(heightmap, view, 1, 0, 0)
    assert canvas.get_pixel(*end) == color_for_height(5)


def test_negative_height_uses_low_colour():
    heightmap = parse_map(["-3", "-3"])
    view = View(scale=20, z_scale=1)
    canvas = render_map(heightmap, view)
    start = project(heightmap, view, 0, 0, -3)
    assert canvas.get_pixel(*start) == color_for_height(-3)


def test_draw_map_matches_render_map():
    heightmap = parse_map(["0 1 2", "3 4 5", "6 7 8"])
    view = View(scale=15, z_scale=2)
    canvas = Canvas()
    draw_map(canvas, heightmap, view)
    assert canvas.to_bytes() == render_map(heightmap, view).to_bytes()


def test_offset_moves_the_drawing():
    heightmap = parse_map(["0 0", "0 0"])
    plain = render_map(heightmap, View(scale=10, z_scale=1))
    shifted_view = View(scale=10, z_scale=1, offset_x=30, offset_y=20)
    shifted = render_map(heightmap, shifted_view)
    assert _lit_pixels(plain) == _lit_pixels(shifted)
    corner = project(heightmap, shifted_view, 0, 0, 0)
    assert shifted.get_pixel(*corner) == color_for_height(0)