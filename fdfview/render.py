"""Drawing a height map as a wire frame."""

from __future__ import annotations

from fdfview.canvas import Canvas, draw_line
from fdfview.mapfile import HeightMap
from fdfview.projection import View, color_for_height, project


def _draw_segment(
    canvas: Canvas,
    heightmap: HeightMap,
    view: View,
    start: tuple[int, int, int],
    end: tuple[int, int, int],
) -> None:
    color = color_for_height(start[2])
    draw_line(
        canvas,
        project(heightmap, view, *start),
        project(heightmap, view, *end),
        color,
    )


def draw_map(canvas: Canvas, heightmap: HeightMap, view: View) -> None:
    """Draw every point's links to its right and lower neighbours.

    A link takes the colour of the height at the point it starts from.
    """
    for y, row in enumerate(heightmap.rows):
        for x, z in enumerate(row):
            start = (x, y, z)
            if x < heightmap.width - 1:
                _draw_segment(canvas, heightmap, view, start, (x + 1, y, row[x + 1]))
            if y < heightmap.height - 1:
                below = heightmap.rows[y + 1][x]
                _draw_segment(canvas, heightmap, view, start, (x, y + 1, below))


def render_map(heightmap: HeightMap, view: View) -> Canvas:
    """Return a fresh window-sized canvas with the map drawn on it."""
    canvas = Canvas()
    draw_map(canvas, heightmap, view)
    return canvas