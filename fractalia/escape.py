"""Escape-time fractals: Mandelbrot and its variants, and the Julia set."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, Iterator

from fractalia.coloring import MAX_ITERATIONS, iteration_color
from fractalia.viewport import Viewport

ESCAPE_RADIUS_SQUARED = 4.0

Step = Callable[[float, float, float, float], tuple[float, float]]


def _single(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _mandelbrot(x: float, y: float, cx: float, cy: float) -> tuple[float, float]:
    return x * x - y * y + cx, 2 * x * y + cy


def _tribrot(x: float, y: float, cx: float, cy: float) -> tuple[float, float]:
    return (
        x * x * x - 3 * x * y * y + cx,
        3 * x * x * y - y * y * y + cy,
    )


def _pentabrot(x: float, y: float, cx: float, cy: float) -> tuple[float, float]:
    return (
        (x * x * x * x * x) - 10 * x * x * x * y * y + 5 * x * y * y * y * y + cx,
        5 * x * x * x * x * y - 10 * x * x * y * y * y + y * y * y * y * y + cy,
    )


def _burning_ship(x: float, y: float, cx: float, cy: float) -> tuple[float, float]:
    return x * x - y * y - cx, 2 * abs(x * y) - cy


def _celticbrot(x: float, y: float, cx: float, cy: float) -> tuple[float, float]:
    return abs(x * x - y * y) - cx, 2 * x * y - cy


def _julia(x: float, y: float, cx: float, cy: float) -> tuple[float, float]:
    return x * x - y * y + cx, 2 * x * y + cy


@dataclass(frozen=True)
class Fractal:
    """An escape-time iteration and the region of the plane shown at start.

    ``bounds`` is ``(min_x, max_x, min_y, max_y)``. When ``constant`` is set
    the iteration adds that constant (a Julia set); otherwise it adds the
    starting point itself.
    """

    name: str
    step: Step
    bounds: tuple[float, float, float, float]
    constant: tuple[float, float] | None = None

    def default_viewport(self) -> Viewport:
        """Return a fresh viewport showing this fractal's initial region."""
        min_x, max_x, min_y, max_y = self.bounds
        return Viewport(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


@dataclass(frozen=True)
class Pixel:
    """A rendered point: screen position relative to the centre, escape count and colour."""

    x: int
    y: int
    count: int
    color: tuple[float, float, float]


FRACTALS: dict[str, Fractal] = {
    fractal.name: fractal
    for fractal in (
        Fractal("mandelbrot", _mandelbrot, (-2.25, 0.75, -1.25, 1.25)),
        Fractal("tribrot", _tribrot, (-1.5, 1.5, -1.25, 1.25)),
        Fractal("pentabrot", _pentabrot, (-1.5, 1.5, -1.25, 1.25)),
        Fractal("burningship", _burning_ship, (-1.25, 1.75, -0.5, 2.0)),
        Fractal("celticbrot", _celticbrot, (-0.75, 2.25, -1.25, 1.25)),
        Fractal(
            "julia",
            _julia,
            (-1.5, 1.5, -1.25, 1.25),
            constant=(_single(0.36), _single(0.36)),
        ),
    )
}


def get_fractal(name: str) -> Fractal:
    """Return the fractal called ``name`` (case-insensitive)."""
    try:
        return FRACTALS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(FRACTALS))
        raise ValueError(f"unknown fractal {name!r}; choose one of: {known}") from None


def escape_count(
    fractal: Fractal, point: tuple[float, float], max_iter: int = MAX_ITERATIONS
) -> int:
    """Count iterations from ``point`` until it leaves radius 2, up to ``max_iter``."""
    if max_iter < 0:
        raise ValueError(f"max_iter must not be negative, got {max_iter}")
    x, y = point
    cx, cy = fractal.constant if fractal.constant is not None else point
    count = 0
    while x * x + y * y <= ESCAPE_RADIUS_SQUARED and count < max_iter:
        x, y = fractal.step(x, y, cx, cy)
        count += 1
    return count


def render(
    fractal: Fractal,
    viewport: Viewport,
    width: int,
    height: int,
    scheme: int = 0,
) -> Iterator[Pixel]:
    """Yield every pixel of a ``width`` x ``height`` screen that escapes.

    Columns are visited left to right and, within a column, rows bottom to
    top. Points that never escape are left out.
    """
    xs, ys = viewport.axes(width, height)
    iteration_color(0, scheme)  # reject an unknown scheme before rendering
    return _pixels(fractal, xs, ys, width // 2, height // 2, scheme)


def _pixels(
    fractal: Fractal,
    xs: list[float],
    ys: list[float],
    half_width: int,
    half_height: int,
    scheme: int,
) -> Iterator[Pixel]:
    for column, real in enumerate(xs):
        for row, imag in enumerate(ys):
            count = escape_count(fractal, (real, imag), MAX_ITERATIONS)
            if count != MAX_ITERATIONS:
                yield Pixel(
                    column - half_width,
                    row - half_height,
                    count,
                    iteration_color(count, scheme),
                )