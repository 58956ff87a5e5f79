"""Rasterising of wireframe edges between projected grid points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from wirefdf.isometric import Point


@dataclass
class LineData:
    """One traced edge: its extent and the points along it, start first."""

    dx: int
    dy: int
    points: List[Point] = field(default_factory=list)


def _trace(start: Point, dx: int, dy: int, x_major: bool) -> List[Point]:
    """Step along the major axis, moving the minor axis when the error drops below zero."""
    x_step = 1 if dx >= 0 else -1
    y_step = 1 if dy >= 0 else -1
    adx, ady = abs(dx), abs(dy)
    error = 2 * adx - ady
    x, y = start.x, start.y
    points = [start]
    for _ in range(adx if x_major else ady):
        error -= 2 * ady
        if x_major:
            x += x_step
            if error < 0:
                y += y_step
                error += 2 * adx
        else:
            y += y_step
            if error < 0:
                x += x_step
                error += 2 * adx
        points.append(Point(x, y))
    return points


def trace_line(start: Point, end: Point) -> LineData:
    """Trace the points of the edge from ``start`` toward ``end``.

    The longer axis advances one unit per point, so the line holds
    ``max(|dx|, |dy|) + 1`` points.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    points = _trace(start, dx, dy, abs(dx) > abs(dy))
    return LineData(dx, dy, points)


def build_wireframe(iso: Sequence[Sequence[Point]]) -> List[LineData]:
    """Trace every edge of a projected grid.

    For each grid point in row order, the edge to its right neighbour comes
    first, then the edge to the point below it.
    """
    rows = [list(row) for row in iso]
    if rows:
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("every row of the grid must have the same length")
    lines: List[LineData] = []
    for i, row in enumerate(rows):
        for j, point in enumerate(row):
            if j < len(row) - 1:
                lines.append(trace_line(point, row[j + 1]))
            if i < len(rows) - 1:
                lines.append(trace_line(point, rows[i + 1][j]))
    return lines