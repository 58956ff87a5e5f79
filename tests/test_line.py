import pytest

from wirefdf.isometric import Point
from wirefdf.line import LineData, build_wireframe, trace_line


def _adjacent(points):
    return all(
        abs(a.x - b.x) <= 1 and abs(a.y - b.y) <= 1
        for a, b in zip(points, points[1:])
    )


def test_horizontal_line():
    line = trace_line(Point(0, 0), Point(3, 0))
    assert [p.x for p in line.points] == list(range(4))
    assert all(p.y == 0 for p in line.points)
    assert (line.dx, line.dy) == (3, 0)


@pytest.mark.parametrize(
    "start, end",
    [
        (Point(0, 0), Point(7, 3)),
        (Point(2, 5), Point(-6, 1)),
        (Point(-3, -3), Point(4, -1)),
    ],
)
def test_x_major_line_reaches_end_column(start, end):
    line = trace_line(start, end)
    assert line.points[0] == start
    assert len(line.points) == abs(end.x - start.x) + 1
    assert line.points[-1].x == end.x
    assert _adjacent(line.points)


@pytest.mark.parametrize(
    "start, end",
    [
        (Point(0, 0), Point(2, 6)),
        (Point(1, 1), Point(-2, -7)),
        (Point(0, 0), Point(4, 4)),
    ],
)
def test_y_major_line_reaches_end_row(start, end):
    line = trace_line(start, end)
    assert line.points[0] == start
    assert len(line.points) == abs(end.y - start.y) + 1
    assert line.points[-1].y == end.y
    assert _adjacent(line.points)


def test_vertical_line_drifts_along_x():
    line = trace_line(Point(0, 0), Point(0, 3))
    assert line.points == [Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)]


def test_zero_length_line_has_single_point():
    line = trace_line(Point(4, 4), Point(4, 4))
    assert line.points == [Point(4, 4)]


def test_wireframe_line_count():
    iso = [[Point(x, y) for x in range(4)] for y in range(3)]
    assert len(build_wireframe(iso)) == 17


def test_wireframe_order_row_then_column():
    iso = [[Point(0, 0), Point(5, 0)], [Point(0, 5), Point(5, 5)]]
    lines = build_wireframe(iso)
    assert lines[0].points[0] == iso[0][0]
    assert lines[0].points[-1] == iso[0][1]
    assert lines[1].points[0] == iso[0][0]
    assert (lines[1].dx, lines[1].dy) == (0, 5)


def test_wireframe_single_point_has_no_lines():
    assert build_wireframe([[Point(0, 0)]]) == []


def test_wireframe_empty():
    assert build_wireframe([]) == []


def test_wireframe_rejects_ragged_rows():
    with pytest.raises(ValueError):
        build_wireframe([[Point(0, 0), Point(1, 0)], [Point(0, 1)]])


def test_line_data_defaults_to_no_points():
    assert LineData(1, 2).points == []