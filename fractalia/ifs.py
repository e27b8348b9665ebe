"""Iterated function systems: the crystal, Barnsley's fern and the tree."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterator

Color = tuple[float, float, float]

GREEN: Color = (0.0, 1.0, 0.0)
BLUE: Color = (0.0, 0.0, 1.0)
SCREEN_SIZE = 700


@dataclass(frozen=True)
class AffineMap:
    """The map (x, y) -> (a*x + b*y + e, c*x + d*y + f), picked with ``probability``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float
    probability: float
    color: Color = GREEN

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Return the image of the point (x, y)."""
        return self.a * x + self.b * y + self.e, self.c * x + self.d * y + self.f


@dataclass(frozen=True)
class ScreenMapping:
    """A linear map of a rectangle of the plane onto a square centred screen."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    size: int = SCREEN_SIZE

    def __post_init__(self) -> None:
        if self.max_x <= self.min_x or self.max_y <= self.min_y:
            raise ValueError(
                f"empty region: x {self.min_x}..{self.max_x}, y {self.min_y}..{self.max_y}"
            )
        if self.size <= 0:
            raise ValueError(f"screen size must be positive, got {self.size}")

    @property
    def slope_x(self) -> float:
        return self.size / (self.max_x - self.min_x)

    @property
    def slope_y(self) -> float:
        return self.size / (self.max_y - self.min_y)

    @property
    def intercept_x(self) -> float:
        return -(self.size // 2) - self.slope_x * self.min_x

    @property
    def intercept_y(self) -> float:
        return -(self.size // 2) - self.slope_y * self.min_y

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Return the screen position, relative to the centre, of plane point (x, y)."""
        return x * self.slope_x + self.intercept_x, y * self.slope_y + self.intercept_y


@dataclass(frozen=True)
class IteratedFunctionSystem:
    """A set of affine maps chosen at random to trace an attractor."""

    name: str
    maps: tuple[AffineMap, ...]
    screen: ScreenMapping
    initial_color: Color = GREEN
    default_points: int = 100_000

    def __post_init__(self) -> None:
        if not self.maps:
            raise ValueError("an iterated function system needs at least one map")

    def choose(self, roll: float) -> AffineMap:
        """Return the map selected by ``roll`` in [0, 1) by cumulative probability.

        A roll beyond the total probability selects the last map.
        """
        if not 0.0 <= roll < 1.0:
            raise ValueError(f"roll must be in [0, 1), got {roll}")
        bounds = accumulate(m.probability for m in self.maps)
        for candidate, bound in zip(self.maps, bounds):
            if roll < bound:
                return candidate
        return self.maps[-1]

    def iterate(
        self, count: int, rng: random.Random | None = None
    ) -> Iterator[tuple[float, float, Color]]:
        """Yield ``count`` points (x, y, colour) of the walk starting at the origin.

        Each point carries the colour of the map that produced it; the origin
        carries ``initial_color``.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return self._walk(count, rng if rng is not None else random.Random())

    def _walk(
        self, count: int, rng: random.Random
    ) -> Iterator[tuple[float, float, Color]]:
        x = y = 0.0
        color = self.initial_color
        for _ in range(count):
            yield x, y, color
            chosen = self.choose(rng.random())
            x, y = chosen.apply(x, y)
            color = chosen.color


SYSTEMS: dict[str, IteratedFunctionSystem] = {
    system.name: system
    for system in (
        IteratedFunctionSystem(
            "crystal",
            (
                AffineMap(0.255, 0.0, 0.0, 0.255, 0.3726, 0.6714, 0.2, (0.9, 0.1, 0.3)),
                AffineMap(0.255, 0.0, 0.0, 0.255, 0.1146, 0.2232, 0.15, (0.1, 0.4, 0.8)),
                AffineMap(0.255, 0.0, 0.0, 0.255, 0.6306, 0.2232, 0.15, (0.3, 0.75, 0.1)),
                AffineMap(0.370, -0.642, 0.642, 0.370, 0.6356, -0.0061, 0.75, (0.2, 0.3, 0.2)),
            ),
            ScreenMapping(0.0, 0.0, 1.0, 1.0),
            initial_color=BLUE,
            default_points=2_000_000,
        ),
        IteratedFunctionSystem(
            "fern",
            (
                AffineMap(0.0, 0.0, 0.0, 0.16, 0.0, 0.0, 0.01),
                AffineMap(0.2, -0.26, 0.23, 0.22, 0.0, 1.6, 0.06),
                AffineMap(-0.15, 0.28, 0.26, 0.24, 0.0, 0.44, 0.08),
                AffineMap(0.85, 0.04, -0.04, 0.85, 0.0, 1.6, 0.85),
            ),
            ScreenMapping(-6.0, -1.0, 6.0, 11.0),
        ),
        IteratedFunctionSystem(
            "tree",
            (
                AffineMap(0.0, 0.0, 0.0, 0.5, 0.0, 0.0, 0.05),
                AffineMap(0.1, 0.0, 0.0, 0.1, 0.0, 0.2, 0.15),
                AffineMap(0.42, -0.42, 0.42, 0.42, 0.0, 0.2, 0.40),
                AffineMap(0.42, 0.42, -0.42, 0.42, 0.0, 0.2, 0.40),
            ),
            ScreenMapping(-1.0, -1.0, 1.0, 1.5),
        ),
    )
}


def get_system(name: str) -> IteratedFunctionSystem:
    """Return the iterated function system called ``name`` (case-insensitive)."""
    try:
        return SYSTEMS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(SYSTEMS))
        raise ValueError(f"unknown system {name!r}; choose one of: {known}") from None