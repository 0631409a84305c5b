"""The viewer window and the command that starts it."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from fdfview.canvas import Canvas  # noqa: E402
from fdfview.cformat import cprintf  # noqa: E402
from fdfview.controls import Action, Key, handle_key  # noqa: E402
from fdfview.mapfile import HeightMap, MapError, read_map  # noqa: E402
from fdfview.projection import WIN_HEIGHT, WIN_WIDTH, View, initial_view  # noqa: E402
from fdfview.render import render_map  # noqa: E402

_TITLE = "FdF"

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_j: Key.J,
    pygame.K_k: Key.K,
    pygame.K_i: Key.I,
    pygame.K_o: Key.O,
    pygame.K_n: Key.N,
    pygame.K_m: Key.M,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
}


def _to_surface(canvas: Canvas) -> pygame.Surface:
    data = canvas.to_bytes()
    rgb = bytearray(canvas.width * canvas.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return pygame.image.frombuffer(bytes(rgb), (canvas.width, canvas.height), "RGB")


class Viewer:
    """A window showing one height map, driven by the keyboard."""

    def __init__(self, heightmap: HeightMap, view: View | None = None) -> None:
        self.heightmap = heightmap
        self.view = view if view is not None else initial_view(heightmap)
        self.canvas = render_map(heightmap, self.view)
        self._screen: pygame.Surface | None = None

    def _show(self) -> None:
        if self._screen is None:
            return
        self._screen.blit(_to_surface(self.canvas), (0, 0))
        pygame.display.flip()

    def _redraw(self) -> None:
        self.canvas = render_map(self.heightmap, self.view)
        self._show()

    def _on_key(self, key: int) -> bool:
        """Handle a pygame key; return False when the viewer should close."""
        code = _PYGAME_KEYS.get(key)
        if code is None:
            return True
        action = handle_key(code, self.view, self.heightmap)
        if action is Action.QUIT:
            return False
        if action is Action.REDRAW:
            self._redraw()
        return True

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.display.init()
        try:
            self._screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
            pygame.display.set_caption(_TITLE)
            self._show()
            running = True
            while running:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._on_key(event.key)
        finally:
            self._screen = None
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Show the map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        cprintf("Usage: fdfview <filename>\n")
        return 1
    try:
        heightmap = read_map(args[0])
    except MapError as exc:
        cprintf("%s\n", str(exc))
        cprintf("Error: Failed to read map\n")
        return 1
    Viewer(heightmap).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())