"""Isometric projection of a height-map grid onto integer screen coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

ISOMETRIC_ANGLE = math.radians(30)


@dataclass(frozen=True)
class Point:
    """A point on the projected plane, in whole units."""

    x: int
    y: int


@dataclass(frozen=True)
class Point3:
    """A point of the height map: column, row and height."""

    x: float
    y: float
    z: float


def project_point(point: Point3, angle: float) -> Point:
    """Project one map point, truncating both coordinates toward zero."""
    x = (point.x - point.y) * math.cos(angle)
    y = (point.x + point.y) * math.sin(angle) - point.z
    return Point(int(x), int(y))


def to_isometric(grid: Sequence[Sequence[Point3]]) -> List[List[Point]]:
    """Project every point of a rectangular grid at the isometric angle.

    Raises ValueError when the rows are not all the same length.
    """
    rows = [list(row) for row in grid]
    if rows:
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("every row of the grid must have the same length")
    return [[project_point(point, ISOMETRIC_ANGLE) for point in row] for row in rows]