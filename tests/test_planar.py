from __future__ import annotations

import pytest

from painter3d.geom import Pt2
from painter3d.planar import Line, Segment, Triangle2


def seg(x1: int, y1: int, x2: int, y2: int) -> Segment:
    return Segment(Pt2(x1, y1), Pt2(x2, y2))


def tri(*coords: int) -> Triangle2:
    xs = coords[0::2]
    ys = coords[1::2]
    return Triangle2(*(Pt2(x, y) for x, y in zip(xs, ys)))


def test_line_canonical_sign() -> None:
    assert Line.canonical(-1, 2, 3) == Line(1, -2, -3)
    assert Line.canonical(0, -1, 5) == Line(0, 1, -5)
    assert Line.canonical(2, -7, 1) == Line(2, -7, 1)


@pytest.mark.parametrize(
    "p, q",
    [((1, 2), (4, 7)), ((0, 0), (0, 5)), ((3, -1), (-3, -1)), ((-2, 5), (4, -4))],
)
def test_line_from_segment_ignores_direction(p, q) -> None:
    assert seg(*p, *q).line() == seg(*q, *p).line()


def test_line_intersection_parallel_is_none() -> None:
    assert seg(0, 0, 2, 0).line().intersection(seg(0, 1, 2, 1).line()) is None
    same = seg(0, 0, 2, 2).line()
    assert same.intersection(same) is None


def test_line_intersection_truncates_toward_zero() -> None:
    # 2x = -3, y = 0 -> x = -1.5 -> -1
    assert Line.canonical(2, 0, -3).intersection(Line.canonical(0, 1, 0)) == Pt2(-1, 0)


def test_segments_intersection() -> None:
    assert seg(-1, 0, 2, 0).intersection(seg(0, -1, 0, 2)) == Pt2(0, 0)
    assert seg(-1, -1, 1, 1).intersection(seg(1, -1, -2, 2)) == Pt2(0, 0)
    assert seg(1, 1, -1, 1).intersection(seg(1, -1, -1, -2)) is None


def test_collinear_segments() -> None:
    assert seg(1, 0, 0, 0).intersection(seg(-1, 0, 0, 0)) == Pt2(0, 0)
    assert seg(2, 0, 0, 0).intersection(seg(-1, 0, 1, 0)) == Pt2(1, 0)
    assert seg(0, 0, 1, 0).intersection(seg(2, 0, 3, 0)) is None


@pytest.mark.parametrize(
    "s1, s2",
    [
        (seg(-1, 0, 2, 0), seg(0, -1, 0, 2)),
        (seg(1, 1, -1, 1), seg(1, -1, -1, -2)),
        (seg(0, 0, 6, 0), seg(6, 4, 3, -2)),
        (seg(1, 0, 0, 0), seg(-1, 0, 0, 0)),
        (seg(0, 0, 5, 3), seg(0, 3, 5, 0)),
    ],
)
def test_segment_intersection_is_symmetric(s1: Segment, s2: Segment) -> None:
    assert s1.intersection(s2) == s2.intersection(s1)


def test_segment_contains_point_is_a_box_test() -> None:
    s = seg(0, 0, 4, 2)
    assert s.contains_point(Pt2(2, 1))
    assert s.contains_point(Pt2(4, 2))
    assert not s.contains_point(Pt2(5, 1))


def test_orientation_sign() -> None:
    assert Triangle2.orientation_sign(Pt2(0, 0), Pt2(1, 0), Pt2(0, 1)) == 1
    assert Triangle2.orientation_sign(Pt2(1, 0), Pt2(0, 0), Pt2(0, 1)) == -1
    assert Triangle2.orientation_sign(Pt2(0, 0), Pt2(1, 1), Pt2(2, 2)) == 0


def test_triangle_contains_point() -> None:
    t = tri(0, 0, 2, 2, -2, 2)
    assert t.contains_point(Pt2(0, 0))
    assert t.contains_point(Pt2(0, 1))
    assert not t.contains_point(Pt2(-1, -1))


@pytest.mark.parametrize("p", [Pt2(1, 1), Pt2(0, 2), Pt2(-1, 1), Pt2(2, 2)])
def test_triangle_boundary_is_contained(p: Pt2) -> None:
    assert tri(0, 0, 2, 2, -2, 2).contains_point(p)


def test_triangles_touching_at_one_vertex() -> None:
    t1 = tri(0, 0, 2, 2, -2, 2)
    t2 = tri(0, 0, 2, -2, -2, -2)
    assert t1.intersection(t2) == Pt2(0, 0)


def test_triangle_inside_other() -> None:
    t1 = tri(0, 0, 10, 5, -10, 5)
    t2 = tri(0, 1, 1, 2, -1, 2)
    assert t1.intersection(t2) == Pt2(0, 1)
    assert t2.intersection(t1) == Pt2(0, 1)


def test_triangles_crossing_edges() -> None:
    t1 = tri(0, 0, 6, 0, 3, 6)
    t2 = tri(0, 4, 6, 4, 3, -2)
    assert t1.intersection(t2) == Pt2(4, 0)


def test_triangles_do_not_intersect() -> None:
    t1 = tri(1, 1, 2, 2, -2, 2)
    t2 = tri(0, 0, 2, -2, -2, -2)
    assert t1.intersection(t2) is None
    assert t2.intersection(t1) is None


def test_triangle_equality_is_order_sensitive() -> None:
    assert tri(0, 0, 1, 0, 0, 1) != tri(1, 0, 0, 0, 0, 1)
    assert [(e.p1, e.p2) for e in tri(0, 0, 1, 0, 0, 1).edges()] == [
        (Pt2(0, 0), Pt2(1, 0)),
        (Pt2(1, 0), Pt2(0, 1)),
        (Pt2(0, 1), Pt2(0, 0)),
    ]
