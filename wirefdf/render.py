"""Drawing of a traced wireframe into an image."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from wirefdf.images import Image
from wirefdf.isometric import Point, Point3, to_isometric
from wirefdf.line import LineData, build_wireframe

DEFAULT_SCALE = 40
DEFAULT_OFFSET_X = 400
DEFAULT_OFFSET_Y = 300
LINE_COLOR = 0xFFFFFFFF


def _drawn_points(line: LineData) -> List[Point]:
    # The signed dx is compared here, so a line running leftward is only
    # drawn as far as its vertical extent reaches.
    size = abs(line.dy)
    if line.dx > size:
        size = abs(line.dx)
    return line.points[: size + 1]


def plot_lines(
    image: Image,
    lines: Iterable[LineData],
    scale: int = DEFAULT_SCALE,
    offset_x: int = DEFAULT_OFFSET_X,
    offset_y: int = DEFAULT_OFFSET_Y,
) -> int:
    """Plot the points of every line, scaled and shifted, in white.

    Points falling outside the image are skipped.  Returns the number of
    pixels written.
    """
    plotted = 0
    for line in lines:
        for point in _drawn_points(line):
            x = point.x * scale + offset_x
            y = point.y * scale + offset_y
            if 0 <= x < image.width and 0 <= y < image.height:
                image.put_pixel(x, y, LINE_COLOR)
                plotted += 1
    return plotted


def render_wireframe(grid: Sequence[Sequence[Point3]], image: Image) -> List[LineData]:
    """Project a height-map grid, trace its edges and plot them into ``image``."""
    lines = build_wireframe(to_isometric(grid))
    plot_lines(image, lines)
    return lines