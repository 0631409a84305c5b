"""Keyboard controls: zoom, height exaggeration, panning and quitting."""

from __future__ import annotations

import enum

from fdfview.mapfile import HeightMap
from fdfview.projection import WIN_HEIGHT, WIN_WIDTH, View

_PAN_STEP = 10


class Key(enum.IntEnum):
    """X keysym values of the keys the viewer reacts to."""

    ESC = 65307
    J = 106
    K = 107
    I = 105  # noqa: E741
    O = 111  # noqa: E741
    N = 110
    M = 109
    UP = 65362
    DOWN = 65364
    RIGHT = 65363
    LEFT = 65361


class Action(enum.Enum):
    """What the caller should do after a key press."""

    NONE = "none"
    REDRAW = "redraw"
    QUIT = "quit"


def _zoom(keycode: int, view: View, heightmap: HeightMap) -> None:
    if keycode == Key.J and view.scale < (WIN_WIDTH // heightmap.width) * 3:
        view.scale += 1
    elif keycode == Key.K and view.scale > 1:
        view.scale -= 1


def _height(keycode: int, view: View) -> None:
    if keycode == Key.I and view.z_scale < view.scale // 2:
        view.z_scale += 1
    elif keycode == Key.O and view.z_scale > 1:
        view.z_scale -= 1


def _pan(keycode: int, view: View) -> None:
    if keycode == Key.UP and view.offset_y > -(WIN_HEIGHT // 2):
        view.offset_y -= _PAN_STEP
    elif keycode == Key.DOWN and view.offset_y < WIN_HEIGHT // 2:
        view.offset_y += _PAN_STEP
    elif keycode == Key.RIGHT and view.offset_x < WIN_WIDTH // 2:
        view.offset_x += _PAN_STEP
    elif keycode == Key.LEFT and view.offset_x > -(WIN_WIDTH // 2):
        view.offset_x -= _PAN_STEP


def handle_key(keycode: int, view: View, heightmap: HeightMap) -> Action:
    """Apply a key press to the view and say what should follow.

    Zoom, height and pan keys always ask for a redraw, even at their limits.
    """
    if keycode == Key.ESC:
        return Action.QUIT
    if keycode in (Key.J, Key.K):
        _zoom(keycode, view, heightmap)
        return Action.REDRAW
    if keycode in (Key.I, Key.O):
        _height(keycode, view)
        return Action.REDRAW
    if keycode in (Key.UP, Key.DOWN, Key.RIGHT, Key.LEFT):
        _pan(keycode, view)
        return Action.REDRAW
    return Action.NONE