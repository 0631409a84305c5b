"""An off-screen 32-bit pixel buffer and line rasterisation."""

from __future__ import annotations

from collections.abc import Iterator

from fdfview.projection import WIN_HEIGHT, WIN_WIDTH


class Canvas:
    """A width x height image of 32-bit little-endian 0xRRGGBB pixels."""

    bits_per_pixel = 32
    endian = 0

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, not {width}x{height}")
        self.width = width
        self.height = height
        self.line_length = width * (self.bits_per_pixel // 8)
        self._data = bytearray(self.line_length * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return y * self.line_length + x * (self.bits_per_pixel // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the canvas are ignored."""
        if not self._inside(x, y):
            return
        start = self._offset(x, y)
        self._data[start:start + 4] = (color & 0xFFFFFFFF).to_bytes(4, "little")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        start = self._offset(x, y)
        return int.from_bytes(self._data[start:start + 4], "little")

    def clear(self) -> None:
        """Set every pixel to black."""
        self._data[:] = bytes(len(self._data))

    def to_bytes(self) -> bytes:
        """Return the raw pixel data, row by row."""
        return bytes(self._data)


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the points of the line from (x0, y0) to (x1, y1), both ends included."""
    diff_x = abs(x1 - x0)
    diff_y = abs(y1 - y0)
    step_x = -1 if x1 < x0 else 1
    step_y = -1 if y1 < y0 else 1
    err = diff_x - diff_y
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        doubled = err * 2
        if doubled > -diff_y:
            err -= diff_y
            x += step_x
        if doubled < diff_x:
            err += diff_x
            y += step_y


def draw_line(
    canvas: Canvas, start: tuple[int, int], end: tuple[int, int], color: int
) -> None:
    """Draw a straight line; the parts outside the canvas are clipped."""
    for x, y in line_points(start[0], start[1], end[0], end[1]):
        canvas.put_pixel(x, y, color)