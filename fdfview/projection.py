"""Isometric projection of map points onto the window, and height colours."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from fdfview.mapfile import HeightMap

WIN_WIDTH = 1920
WIN_HEIGHT = 1080

_MAX_Z_SCALE = 20


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_ANGLE = _f32(0.523599)


@dataclass
class View:
    """Zoom, height exaggeration and panning of the drawn map."""

    scale: int
    z_scale: int
    offset_x: int = 0
    offset_y: int = 0


def initial_view(heightmap: HeightMap) -> View:
    """Return the starting view: the map fits half the window width."""
    scale = WIN_WIDTH // (heightmap.width * 2)
    z_scale = min(max((scale // 3) * 2, 1), _MAX_Z_SCALE)
    return View(scale=scale, z_scale=z_scale)


def project(heightmap: HeightMap, view: View, x: int, y: int, z: int) -> tuple[int, int]:
    """Return the window position of the map point (x, y) at height z."""
    scale = view.scale
    centered_x = _f32(_f32(x * scale) - (heightmap.width - 1) * scale // 2)
    centered_y = _f32(_f32(y * scale) - (heightmap.height - 1) * scale // 2)
    projected_x = _f32(_f32(centered_x - centered_y) * math.cos(_ANGLE))
    projected_y = _f32(
        _f32(centered_x + centered_y) * math.sin(_ANGLE) - z * view.z_scale
    )
    return (
        int(projected_x) + WIN_WIDTH // 2 + view.offset_x,
        int(projected_y) + WIN_HEIGHT // 2 + view.offset_y,
    )


def color_for_height(z: int) -> int:
    """Return the 0xRRGGBB colour of lines that start at height z."""
    if z > 20:
        return 0x00FFAAFF
    if z > 15:
        return 0x00FF00FF
    if z > 10:
        return 0x00FF0000
    if z > 5:
        return 0x00FFA500
    if z > 0:
        return 0x00FFFF00
    if z == 0:
        return 0x00FFFFFF
    return 0x000000FF