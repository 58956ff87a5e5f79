# wirefdf

`wirefdf` turns a grid of heights into an isometric wireframe and draws it
onto an in-memory RGBA image. It uses only the standard library. Every image
is a plain `bytearray` of pixels that you can inspect, test against or pass
on to other tools.

## Modules

- `wirefdf.isometric`: the frozen dataclasses `Point` (integer `x`, `y`) and
  `Point3` (`x`, `y`, `z`), `project_point(point, angle)`, which truncates
  both projected coordinates toward zero, and `to_isometric(grid)`, which
  projects a rectangular grid at 30° (`ISOMETRIC_ANGLE`). Rows of unequal
  length raise `ValueError`.
- `wirefdf.line`: `trace_line(start, end)` returns a `LineData` with `dx`,
  `dy` and the `points` from `start` toward `end`, one point per step along
  the longer axis. `build_wireframe(iso)` traces every edge of a projected
  grid: for each point in row order, first the edge to its right neighbour,
  then the edge to the point below.
- `wirefdf.render`: `plot_lines(image, lines, scale=40, offset_x=400,
  offset_y=300)` writes each traced point, scaled and shifted, in white
  (`0xFFFFFFFF`), skips points outside the image and returns how many pixels
  it wrote. For each line it draws `max(|dy|, dx) + 1` points, comparing the
  signed `dx`, so a line running leftward is drawn only as far as its
  vertical extent. `render_wireframe(grid, image)` projects, traces and plots
  with those defaults and returns the traced lines.
- `wirefdf.images`: `Image(width, height)`, an RGBA buffer with
  `put_pixel`, `pixel` and `resize` (nearest-neighbour); sizes must be from 1
  to 32767 or `MlxError(INVDIM)` is raised. `Texture`, `Instance`,
  `DrawCall`, and `Canvas(width, height, title)`, which creates images with
  `new_image`, places instances with `image_to_window` (each new instance one
  depth step above the previous), removes them with `delete_image`, copies a
  texture with `texture_to_image`, moves instances with `set_instance_depth`,
  and lists the enabled draw calls, lowest depth first, with `render_order`.
- `wirefdf.xpm42`: `parse_xpm42(stream)` and `load_xpm42(path)` read the
  XPM42 text image format into an `Xpm` holding a `Texture`, the colour
  count, the characters per pixel and the mode (`c` for colour, `m` for
  grayscale). Malformed data raises `MlxError(INVXPM)`; a path without
  `.xpm42` raises `INVEXT`, and one that cannot be opened `INVFILE`.
- `wirefdf.pixels`: `draw_pixel(buffer, offset, color)`,
  `rgba_to_mono(color)` and the 64-bit FNV-1a `fnv_hash(data)`.
- `wirefdf.renderqueue`: `sort_render_queue(entries, key)` orders entries by
  ascending depth; entries of equal depth come out in reverse of their input
  order.
- `wirefdf.linereader`: `LineReader(stream, buffer_size=42)` reads a text or
  binary stream line by line through a fixed-size buffer. `read_line`
  returns `None` at the end; the reader is also iterable.
- `wirefdf.cstr`: string helpers with C library semantics: `atoi`, `itoa`,
  `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `isalnum`, `isalpha`,
  `isascii`, `isdigit`, `isprint`, `tolower`, `toupper`.
- `wirefdf.errors`: the `MlxErrno` codes, `strerror(code)` and `MlxError`,
  which carries its code in `.code`.

## Example

```python
from wirefdf.images import Image
from wirefdf.isometric import Point3
from wirefdf.render import render_wireframe

grid = [
    [Point3(x=0, y=0, z=0), Point3(x=1, y=0, z=0)],
    [Point3(x=0, y=1, z=0), Point3(x=1, y=1, z=1)],
]

image = Image(800, 600)
lines = render_wireframe(grid, image)
print(len(lines), hex(image.pixel(400, 300)))
```

Colours are 32-bit `0xRRGGBBAA` values, stored in the buffer as four bytes
in that order.

## What it does not do

- There is no command-line program and no window: nothing is shown on
  screen and there is no keyboard or mouse handling.
- It does not read height-map files; build the grid of `Point3` values
  yourself.
- It does not load or write PNG files; the only image format it reads is
  XPM42.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the
project root.