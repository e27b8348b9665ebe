"""Colour palette for escape-time fractals.

An iteration count is mapped to an RGB triple on a 0..256 scale, then the
channels are optionally permuted by one of six colour schemes.
"""

from __future__ import annotations

MAX_ITERATIONS = 256
SCHEME_COUNT = 6
COLOR_SCALE = 256

RGB = tuple[int, int, int]


def base_color(count: int) -> RGB:
    """Return the (r, g, b) colour on a 0..256 scale for an escape count."""
    if not 0 <= count < MAX_ITERATIONS:
        raise ValueError(
            f"count must be in 0..{MAX_ITERATIONS - 1}, got {count}"
        )
    band = count // 32
    if band == 0:
        return 0, count * 8, count * 4
    if band == 1:
        return 0, 500 - count * 8, 200
    if band == 2:
        return (count - 64) * 4, 0, 200
    if band == 3:
        return 200, 0, 1000 - count * 8
    if band == 4:
        return 200, (count - 128) * 8, 0
    if band == 5:
        return 1500 - count * 8, 200, 0
    if band == 6:
        return 0, 200, (count - 192) * 8
    return (count - 224) * 8, 230, 256


def apply_scheme(rgb: RGB, scheme: int) -> RGB:
    """Permute the channels of ``rgb`` according to colour scheme 0..5."""
    r, g, b = rgb
    match scheme:
        case 0:
            return r, g, b
        case 1:
            return b, g, r
        case 2:
            return g, r, b
        case 3:
            return r, b, g
        case 4:
            return g, b, r
        case 5:
            return b, r, g
    raise ValueError(f"scheme must be in 0..{SCHEME_COUNT - 1}, got {scheme}")


def iteration_color(count: int, scheme: int = 0) -> tuple[float, float, float]:
    """Return the colour for ``count`` as floats in 0..1 under ``scheme``."""
    r, g, b = apply_scheme(base_color(count), scheme)
    return r / COLOR_SCALE, g / COLOR_SCALE, b / COLOR_SCALE