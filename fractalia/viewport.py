"""The visible region of the complex plane and the keyboard controls over it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from fractalia.coloring import SCHEME_COUNT

ZOOM_COEF = 0.833333333333333333333333


class Direction(enum.Enum):
    """Arrow-key directions for panning."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Viewport:
    """A rectangle of the complex plane together with its pan/zoom step."""

    min_x: float = -1.5
    max_x: float = 1.5
    min_y: float = -1.25
    max_y: float = 1.25
    step: float = 0.1

    def pan(self, direction: Direction) -> None:
        """Shift the rectangle by one step in ``direction``."""
        direction = Direction(direction)
        if direction is Direction.UP:
            self.min_y += self.step
            self.max_y += self.step
        elif direction is Direction.DOWN:
            self.min_y -= self.step
            self.max_y -= self.step
        elif direction is Direction.RIGHT:
            self.min_x += self.step
            self.max_x += self.step
        else:
            self.min_x -= self.step
            self.max_x -= self.step

    def zoom_in(self) -> None:
        """Shrink the rectangle, or refine the step once it is too narrow."""
        if self.max_x - self.min_x > 3 * self.step:
            self.max_x -= self.step
            self.min_x += self.step
            self.max_y -= self.step * ZOOM_COEF
            self.min_y += self.step * ZOOM_COEF
        else:
            self.step /= 10

    def zoom_out(self) -> None:
        """Grow the rectangle by one step."""
        self.max_x += self.step
        self.min_x -= self.step
        self.max_y += self.step * ZOOM_COEF
        self.min_y -= self.step * ZOOM_COEF

    def refine_step(self) -> None:
        """Make panning and zooming ten times finer."""
        self.step /= 10

    def coarsen_step(self) -> None:
        """Make panning and zooming ten times coarser."""
        self.step *= 10

    def axes(self, width: int, height: int) -> tuple[list[float], list[float]]:
        """Return the real and imaginary coordinates of each pixel column and row."""
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        return (
            _accumulate(self.min_x, (self.max_x - self.min_x) / width, width),
            _accumulate(self.min_y, (self.max_y - self.min_y) / height, height),
        )


def _accumulate(start: float, delta: float, count: int) -> list[float]:
    values = []
    value = start
    for _ in range(count):
        values.append(value)
        value += delta
    return values


@dataclass
class Session:
    """Interactive state: the viewport and the selected colour scheme."""

    viewport: Viewport = field(default_factory=Viewport)
    scheme: int = 0

    def cycle_scheme(self) -> int:
        """Advance to the next colour scheme and return it."""
        self.scheme = (self.scheme + 1) % SCHEME_COUNT
        return self.scheme

    def handle_key(self, key: str | Direction) -> bool:
        """Apply a key press; return whether the key has a binding."""
        if isinstance(key, Direction):
            self.viewport.pan(key)
            return True
        match key:
            case "q" | "Q":
                self.viewport.zoom_in()
            case "a" | "A":
                self.viewport.zoom_out()
            case "c" | "C":
                self.cycle_scheme()
            case "w":
                self.viewport.refine_step()
            case "s":
                self.viewport.coarsen_step()
            case _:
                return False
        return True