# wireframe

Draws a height-map file as an isometric wireframe in a window, and lets you
turn, move and zoom the view from the keyboard.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```
wireframe path/to/map.fdf
```

The window is 1080 × 720 and is drawn with pygame. Exactly one map file must
be given; otherwise `ERROR: Check your arguments` is printed and the command
returns without opening a window. If the map cannot be read, is malformed or
is empty, an error is printed to standard error and the exit status is 1.

### Map files

A map is plain text: one row of the grid per line, heights separated by
spaces. Each number is the height of the point at that column and row.

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

The width of the grid is taken from the number of values on the last line
and the height from the number of lines. A row with fewer values than that
width is an error. Anything that follows the leading integer of a value
(such as `10,0xFF0000`) is ignored.

### Keys

| Key         | Action                      |
|-------------|-----------------------------|
| `w` / `s`   | tilt around the x axis      |
| `q` / `e`   | turn around the y axis      |
| `a` / `d`   | turn around the z axis      |
| arrow keys  | move the view               |
| `+` / `-`   | zoom in / out (keypad keys work too) |
| `Esc`       | close the window            |

Closing the window also quits.

## Library use

The pieces work without a window, which is useful for scripting and tests:

```python
from wireframe.map_loader import load_map
from wireframe.scene import Scene

grid = load_map("map.fdf")
scene = Scene(grid, 1080, 720)
scene.render()
pixel = scene.image.get_pixel(540, 360)
```

- `wireframe.map_loader` reads `.fdf` files into a `Map` of `Point`s
  (`load_map`, `map_width`, `map_height`, `fill_map`, `z_values_text`).
- `wireframe.points` defines `Point`, `Map`, `new_point` and `new_map`.
- `wireframe.camera` holds the `Camera` and zooms, rotates and projects
  points isometrically (`cam_init`, `project_point`).
- `wireframe.draw` rasterises points, lines and whole maps into an `Image`.
- `wireframe.scene.Scene` ties a map, camera and image together and applies
  key presses (`handle_key`, `render`, `close`); it is also a context manager.
- `wireframe.gui.run_window` shows a `Scene` in a pygame window.
- `wireframe.image.Image` is an in-memory pixel buffer with `set_pixel`,
  `get_pixel`, `clear` and `blit`.
- `wireframe.events` models windows, an event queue and a dispatch loop
  (`Display`, `Window`, `Event`, `EventType`) entirely in memory.
- `wireframe.colors.lookup_color` resolves X11 colour names.
- `wireframe.xpm` loads XPM pixmaps into an `Image` (`xpm_to_image`,
  `xpm_file_to_image`).
- `wireframe.line_reader.LineReader` reads a stream line by line in chunks.
- `wireframe.printf.format_message` formats text with a small set of
  printf-style conversions.

## What it does not do

- Every line is drawn white; per-point colours in map files are not read.
- There is no mouse control of the view.
- `wireframe.events.Display` does not open real windows; it only keeps
  windows, pixels and events in memory. The on-screen window is
  `wireframe.gui.run_window`.