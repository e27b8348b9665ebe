"""Koch curve and snowflake geometry, and the nearest-vertex search on it."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import pairwise

Point = tuple[float, float]

SEARCH_LIMIT = 700

_APEX = 0.5 * (1 / math.sqrt(3))
_TOP_Y = -105.0 + math.sqrt(3) * 0.5 * 420.0

EDGES: tuple[tuple[Point, Point], ...] = (
    ((-210.0, -105.0), (0.0, _TOP_Y)),
    ((0.0, _TOP_Y), (210.0, -105.0)),
    ((210.0, -105.0), (-210.0, -105.0)),
)


def _check_iteration(iteration: int) -> None:
    if iteration < 0:
        raise ValueError(f"iteration must not be negative, got {iteration}")


def subdivide(start: Point, end: Point) -> tuple[Point, Point, Point, Point, Point]:
    """Return the five corners of one Koch step over the segment start-end."""
    x0, y0 = start
    x1, y1 = end
    return (
        (x0, y0),
        (0.66666667 * x0 + 0.33333333 * x1, 0.66666667 * y0 + 0.33333333 * y1),
        (0.5 * (x0 + x1) - _APEX * (y1 - y0), 0.5 * (y0 + y1) + _APEX * (x1 - x0)),
        (0.33333333 * x0 + 0.66666667 * x1, 0.33333333 * y0 + 0.66666667 * y1),
        (x1, y1),
    )


def koch_curve(start: Point, end: Point, iteration: int) -> list[Point]:
    """Return the polyline of the Koch curve over start-end after ``iteration`` steps."""
    _check_iteration(iteration)
    points = [tuple(start)]
    if iteration == 0:
        points.append(tuple(end))
        return points
    _extend(points, start, end, iteration)
    return points


def _extend(points: list[Point], start: Point, end: Point, depth: int) -> None:
    corners = subdivide(start, end)
    if depth == 1:
        points.extend(corners[1:])
        return
    for a, b in pairwise(corners):
        _extend(points, a, b, depth - 1)


def snowflake(iteration: int) -> list[list[Point]]:
    """Return the three Koch curves that make up the snowflake."""
    _check_iteration(iteration)
    return [koch_curve(start, end, iteration) for start, end in EDGES]


def star_vertices(iteration: int) -> list[Point]:
    """Return the start of every segment subdivided while drawing the snowflake.

    Segments are listed in drawing order; a segment that is split further is
    listed again before each of its four parts, as the drawing visits it.
    """
    _check_iteration(iteration)
    vertices: list[Point] = []
    for start, end in EDGES:
        _collect(vertices, start, end, iteration)
    return vertices


def _collect(vertices: list[Point], start: Point, end: Point, depth: int) -> None:
    if depth == 0:
        return
    if depth == 1:
        vertices.append(tuple(start))
        return
    for a, b in pairwise(subdivide(start, end)):
        vertices.append(tuple(start))
        _collect(vertices, a, b, depth - 1)


def nearest_vertex(
    x: float, y: float, vertices: Iterable[Point]
) -> tuple[int, tuple[int, int] | None]:
    """Find the vertex closest to (x, y) by truncated Manhattan distance.

    The last two vertices are not considered, nor any vertex with a
    coordinate that truncates to zero. Returns the distance and the truncated
    vertex, or ``(SEARCH_LIMIT, None)`` when nothing lies nearer than that.
    """
    candidates = list(vertices)[:-2]
    distance = SEARCH_LIMIT
    target: tuple[int, int] | None = None
    for vx, vy in candidates:
        if int(vx) == 0 or int(vy) == 0:
            continue
        total = int(abs(x - vx) + abs(y - vy))
        if total < distance:
            distance = total
            target = (int(vx), int(vy))
    return distance, target