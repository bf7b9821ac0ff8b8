# rasterkit

Classic raster graphics algorithms in plain Python. No rendering backend is
needed. Each algorithm returns the pixels it would draw, as a list of
`(x, y)` integer tuples. You can inspect those pixels, test them, or pass
them to any display you like.

## Modules

### `rasterkit.lines`: line scan conversion

- `dda(x1, y1, x2, y2)` uses the digital differential analyser. It steps
  along the longer axis with single-precision increments and rounds half
  away from zero.
- `bresenham(x1, y1, x2, y2)` uses Bresenham's integer algorithm and works
  in every direction.
- `midpoint_line(x1, y1, x2, y2)` uses the midpoint decision-variable
  algorithm. If needed, it swaps the endpoints so that the line runs left
  to right. The pixels therefore always start at the left endpoint.
- `rasterize(algorithm, x1, y1, x2, y2)` picks one of the above by its
  `LineAlgorithm` value:
  - `MIDPOINT` is 1
  - `DDA` is 2
  - `BRESENHAM` is 3

  A plain integer works too. Any other number raises `ValueError`.

### `rasterkit.fill`: scan-line polygon fill

- `scanline_fill(vertices)` fills a polygon using an edge table and an active
  edge list. Give the vertices as `Point` objects or `(x, y)` tuples, in
  drawing coordinates where y grows upwards. It returns the filled pixels one
  scan line at a time, from y = 0 upwards. Within each line, the spans between
  pairs of edges run left to right.
- `PolygonCollector(count, window_height=600)` gathers vertices one at a time:
  - `click(x, y)` takes a position in window coordinates, with the origin at
    the top left. It flips y against `window_height`, stores the vertex and
    returns the stored `Point`.
  - `is_complete()` is true once exactly `count` vertices have been clicked.
  - `fill()` returns the filled pixels when the polygon is complete, and an
    empty list otherwise.

### `rasterkit.lighting`: lit-sphere scene state

`LightingScene` holds the state of a scene with one ball and one movable
point light:

- a `ShadingModel`, either `GOURAUD` (the default) or `PHONG`
- a `Light` with position, intensities, spot direction and cut-off
- a `Material`
- the ball position
- the eye position
- the background colour

Its methods and property:

- `key(key)` handles a character key:
  - `"g"` selects Gouraud shading and returns `True`, meaning redraw.
  - `"p"` selects Phong shading and returns `True`.
  - `"x"` sets `running` to `False` and returns `False`.
  - Any other key returns `False`.
- `special_key(key)` moves the light by 0.1 and always returns `True`. It
  takes a `SpecialKey` or its string value:
  - `UP` and `DOWN` move along y.
  - `LEFT` and `RIGHT` move along x.
  - `F1` and `F2` move along z.

  Unknown keys leave the light where it is.
- `projection(width, height)` returns the perspective parameters
  `(45.0, width / height, 0.1, 100.0)`. A height of zero raises `ValueError`.
- `shade_mode()` returns `"smooth"` for Gouraud and `"flat"` for Phong.
- `ball_radii` gives the semi-axes of the ball after it is stretched three
  times along z.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from rasterkit.lines import LineAlgorithm, bresenham, rasterize
from rasterkit.fill import Point, scanline_fill

pixels = bresenham(0, 0, 5, 3)
same_line = rasterize(LineAlgorithm.BRESENHAM, 0, 0, 5, 3)

square = [Point(10, 10), Point(20, 10), Point(20, 20), Point(10, 20)]
inside = scanline_fill(square)
```

## Command line

### `rasterkit-lines`

`rasterkit-lines` draws one line and prints its pixels, one `x y` pair per
line. Give the five numbers as arguments, in this order: `x1 y1 x2 y2
algorithm`, where the algorithm is 1, 2 or 3 as above.

```
rasterkit-lines 0 0 5 3 3
```

With no arguments, it asks for the start point, the end point and the
algorithm on standard input. Invalid input prints `invalid input` to
standard error, and the command exits with status 1.

### `rasterkit-fill`

`rasterkit-fill` reads vertices from standard input, one `x y` pair per line.
The coordinates are window coordinates: the origin is at the top left and the
window is 600 pixels high. After each vertex, the command echoes it in
drawing coordinates. Once all vertices are read, it prints the filled pixels.
Pass the vertex count with `-n`/`--count`; without it, the command asks for
the count first.

```
rasterkit-fill -n 4
```

## What it does not do

rasterkit opens no window and draws nothing on screen. The line and fill
functions only compute pixels. `rasterkit.lighting` only keeps and updates
the scene's state; it does not render the lit sphere. The lighting scene has
no command.