"""Drawing the fractals into Pillow images."""

from __future__ import annotations

import random

from PIL import Image, ImageDraw

from fractalia.coloring import COLOR_SCALE
from fractalia.escape import Fractal, render
from fractalia.ifs import get_system
from fractalia.koch import snowflake
from fractalia.viewport import Viewport

BACKGROUND = (0, 0, 0)
KOCH_COLOR = (0, 255, 0)
KOCH_EXTENT = 700


def _canvas(width: int, height: int) -> Image.Image:
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    return Image.new("RGB", (width, height), BACKGROUND)


def _to_rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(min(255, max(0, int(channel * COLOR_SCALE))) for channel in color)


def escape_image(
    fractal: Fractal,
    viewport: Viewport,
    width: int,
    height: int,
    scheme: int = 0,
) -> Image.Image:
    """Render an escape-time fractal; points that never escape stay black."""
    image = _canvas(width, height)
    pixels = image.load()
    half_width, half_height = width // 2, height // 2
    for pixel in render(fractal, viewport, width, height, scheme):
        column = pixel.x + half_width
        row = pixel.y + half_height
        pixels[column, height - 1 - row] = _to_rgb(pixel.color)
    return image


def ifs_image(
    name: str,
    count: int | None = None,
    width: int = 700,
    height: int = 700,
    seed: int | None = None,
) -> Image.Image:
    """Trace ``count`` points of the named iterated function system.

    ``count`` defaults to the system's own number of points; ``seed`` makes
    the random walk reproducible.
    """
    system = get_system(name)
    image = _canvas(width, height)
    if count is None:
        count = system.default_points
    pixels = image.load()
    size = system.screen.size
    half = size / 2
    for x, y, color in system.iterate(count, random.Random(seed)):
        sx, sy = system.screen.to_screen(x, y)
        column = int((sx + half) * width / size)
        row = int((sy + half) * height / size)
        if 0 <= column < width and 0 <= row < height:
            pixels[column, height - 1 - row] = _to_rgb(color)
    return image


def koch_image(iteration: int, width: int = 700, height: int = 700) -> Image.Image:
    """Draw the Koch snowflake after ``iteration`` steps, green on black."""
    curves = snowflake(iteration)
    image = _canvas(width, height)
    draw = ImageDraw.Draw(image)
    half = KOCH_EXTENT / 2
    scale_x = width / KOCH_EXTENT
    scale_y = height / KOCH_EXTENT
    for curve in curves:
        # The y axis points down, as in the window the snowflake is clicked in.
        points = [((x + half) * scale_x, (y + half) * scale_y) for x, y in curve]
        draw.line(points, fill=KOCH_COLOR, width=1)
    return image