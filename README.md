# fractalia

Compute and draw classic fractals:

- **Escape-time sets**: Mandelbrot, Julia (c = 0.36 + 0.36i, rounded to
  single precision), Burning Ship, Celtic Mandelbrot, Tribrot (z³ + c) and
  Pentabrot (z⁵ + c), coloured by iteration count with six switchable colour
  schemes.
- **Iterated function systems**: Barnsley's fern, a fractal tree and an IFS
  crystal, each a set of affine maps chosen at random by weight.
- **The Koch snowflake**, to any iteration depth, with lookup of the star
  vertex nearest to a point.

Everything is computed in plain Python; images are written with Pillow.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `fractalia` command that renders one fractal to an
image file:

```
fractalia mandelbrot
fractalia julia --scheme 2 --keys q,q,up,c -o julia.png
fractalia fern --points 200000 --seed 1
fractalia koch --iteration 5 --click 400 300
```

The first argument is one of `burningship`, `celticbrot`, `crystal`, `fern`,
`julia`, `koch`, `mandelbrot`, `pentabrot`, `tree`, `tribrot`.

| Option | Meaning |
| --- | --- |
| `-o`, `--output` | image file to write (default `<name>.png`) |
| `--width`, `--height` | image size in pixels (default 700 x 700) |
| `--scheme` | colour scheme 0..5 for escape-time fractals |
| `--keys` | comma-separated key presses applied to the view before rendering: `q` (zoom in), `a` (zoom out), `c` (next colour scheme), `w` (finer steps), `s` (coarser steps), `up`, `down`, `left`, `right` (pan) |
| `--points` | number of points to trace for an IFS (default: the system's own) |
| `--seed` | random seed for an IFS, for a reproducible image |
| `--iteration` | Koch iteration depth (default 0) |
| `--click X Y` | with `koch`, a position in the 700 x 700 window; prints the distance to the nearest star vertex |

The command prints `wrote <file>` and exits with 0, or prints the error and
exits with 1. A key in `--keys` that has no binding is reported as a usage
error.

## What it does not do

There is no interactive window. Panning, zooming and colour switching are the
same steps an interactive viewer would take, but they are applied up front
through `--keys` (or `Session.handle_key` in code) and the result is written
to a file. Likewise, the Koch "click" is given as coordinates on the command
line, and only the distance is printed; no line is drawn to the vertex.

## Library use

### Escape-time fractals

```python
from fractalia.escape import get_fractal, render, escape_count
from fractalia.raster import escape_image

mandelbrot = get_fractal("mandelbrot")
view = mandelbrot.default_viewport()

# Iteration count for one point (x, y) of the plane; 256 means it never escaped.
print(escape_count(mandelbrot, (-0.5, 0.0), 256))

# Pixels that escape in a 700 x 700 window, colour scheme 0.
pixels = list(render(mandelbrot, view, 700, 700, 0))

# The same as a Pillow image; points that never escape stay black.
escape_image(mandelbrot, view, 700, 700, 0).save("mandelbrot.png")
```

`get_fractal(name)` is case-insensitive and raises `ValueError` for an
unknown name; `fractalia.escape.FRACTALS` holds them all. `render` yields
`Pixel` objects with `x` and `y` relative to the centre of the screen, the
escape `count` and the `color` as three floats; columns go left to right and,
within a column, rows bottom to top.

A `Viewport` (in `fractalia.viewport`) can be moved and zoomed:
`pan(direction)` with a `Direction`, `zoom_in()`, `zoom_out()`,
`refine_step()` and `coarsen_step()`; `axes(width, height)` gives the plane
coordinates of every pixel column and row. A `Session` ties a viewport to the
current colour scheme, takes key presses through `handle_key(key)` (returning
whether the key has a binding), and `cycle_scheme()` steps through the six
colour schemes.

### Colouring

`fractalia.coloring.iteration_color(count, scheme)` gives the colour the
renderers use for an escape count, as floats; `base_color(count)` and
`apply_scheme(rgb, scheme)` expose the two steps separately on a 0..256
scale. Counts outside 0..255 and schemes outside 0..5 raise `ValueError`.

### Iterated function systems

```python
import random

from fractalia.ifs import get_system
from fractalia.raster import ifs_image

fern = get_system("fern")
points = list(fern.iterate(10_000, random.Random(1)))  # (x, y, colour) triples

ifs_image("fern", 200_000, 700, 700, 1).save("fern.png")
```

The systems available are `"fern"`, `"tree"` and `"crystal"`. Each is an
`IteratedFunctionSystem` of `AffineMap`s; `choose(roll)` picks the map for a
roll in [0, 1) by cumulative probability, and its `screen`, a
`ScreenMapping`, converts plane points with `to_screen(x, y)`.

### Koch snowflake

```python
from fractalia.koch import koch_curve, snowflake, star_vertices, nearest_vertex
from fractalia.raster import koch_image

lines = snowflake(3)            # three polylines
vertices = star_vertices(5)
print(nearest_vertex(10, 20, vertices))   # (distance, (x, y)) or (700, None)

koch_image(4, 700, 700).save("koch.png")
```

`koch_curve(start, end, iteration)` gives one curve and `subdivide(start, end)`
the five corners of a single step. `nearest_vertex` uses the truncated
Manhattan distance and skips the last two vertices and any vertex with a
coordinate that truncates to zero.