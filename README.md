# fdfview

A wireframe viewer for height maps. It reads a plain-text grid of
integer heights, links every point to its right and lower neighbour,
and draws the result in isometric projection in a 1920×1080 window.
Each segment is coloured by the height of the point it starts from.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Map files

A map is a text file with one row of the grid on each line. The values
on a line are separated by spaces:

```
0 0 0 0
0 5 5 0
0 5 10 0
0 0 0 0
```

Every row must have as many values as the first one, and every value
must fit in a 32-bit signed integer. An empty map, a map without
columns, rows of differing length or an out-of-range value make
`fdfview.mapfile.read_map` raise `MapError`.

## Running

```
fdfview path/to/map.fdf
```

With no file or more than one, the command prints
`Usage: fdfview <filename>` and exits with status 1. When the map
cannot be opened or is malformed, it prints the reason followed by
`Error: Failed to read map` and exits with status 1.

### Keys

| Key          | Effect                                           |
|--------------|--------------------------------------------------|
| `J` / `K`    | zoom in / out                                    |
| `I` / `O`    | raise / flatten the height scale                 |
| Arrow keys   | move the drawing by 10 pixels                    |
| `Esc`        | quit (closing the window also quits)             |

The starting zoom makes the map span about half the window width, and
the height scale starts at two thirds of it, between 1 and 20. Zoom
stays between 1 and three times the window width divided by the map
width; the height scale stays between 1 and half the zoom; the offsets
stay within half the window size in each direction.

Colours by starting height: above 20 pink, above 15 magenta, above 10
red, above 5 orange, above 0 yellow, 0 white, below 0 blue.

## Using it as a library

```python
from fdfview.mapfile import read_map
from fdfview.projection import initial_view
from fdfview.render import render_map

heightmap = read_map("map.fdf")
view = initial_view(heightmap)
canvas = render_map(heightmap, view)
pixels = canvas.to_bytes()  # 32-bit little-endian 0xRRGGBB, row by row
```

- `fdfview.mapfile`: `HeightMap`, `parse_map`, `read_map`, `MapError`.
- `fdfview.projection`: `View`, `initial_view`, `project`,
  `color_for_height`.
- `fdfview.canvas`: `Canvas` (`put_pixel`, `get_pixel`, `clear`,
  `to_bytes`), `line_points` and `draw_line`.
- `fdfview.render`: `draw_map` and `render_map`.
- `fdfview.controls`: `Key`, `Action` and `handle_key`, which applies a
  key press to a `View` and says whether to redraw or quit.
- `fdfview.app`: `Viewer` (a pygame window) and `main`.
- `fdfview.xpm`: an XPM image reader (`load_xpm`, `parse_xpm`,
  `parse_xpm_data`, `XpmImage`, `strip_comments`, `text_to_rgb`) and
  `good_color` for visuals shallower than 24 bits.
- `fdfview.colors`: `lookup_color`, X11 colour names, case-insensitive.
- `fdfview.wordtab`: `split_words`, `find_token`, `find_unquoted`.
- `fdfview.cformat`: `cformat` and `cprintf` for the
  `%c %s %p %d %i %u %x %X %%` conversions with C integer widths.
- `fdfview.lines`: `LineReader` and `read_lines`, which read a stream
  line by line through a fixed-size buffer.

## What it does not do

The window size is fixed and there is no mouse control or rotation.
The XPM reader decodes images into pixel values only; the viewer does
not display them.