from __future__ import annotations

from painter3d.geom import Pt3
from painter3d.occlusion import Depth, depth_relation, is_above
from painter3d.spatial import Triangle3


def flat(z: int) -> Triangle3:
    return Triangle3(Pt3(0, 0, z), Pt3(-1, 1, z), Pt3(1, 1, z))


def test_parallel_triangles() -> None:
    low, high = flat(0), flat(1)
    assert is_above(high, low)
    assert not is_above(low, high)
    assert depth_relation(low, high) is Depth.BELOW


def test_overlapping_tilted_triangles() -> None:
    t1 = Triangle3(Pt3(0, 0, 0), Pt3(-1, 1, -1), Pt3(1, 1, -1))
    t2 = Triangle3(Pt3(0, 0, 1), Pt3(-1, -1, 2), Pt3(1, -1, 2))
    assert not is_above(t1, t2)
    assert is_above(t2, t1)


def test_non_overlapping_triangles() -> None:
    t1 = Triangle3(Pt3(0, 1, 0), Pt3(-1, 2, -1), Pt3(1, 2, -1))
    t2 = Triangle3(Pt3(0, 0, 1), Pt3(-1, -1, 2), Pt3(1, -1, 2))
    assert depth_relation(t1, t2) is Depth.DISJOINT
    assert depth_relation(t2, t1) is Depth.DISJOINT
    assert not is_above(t1, t2)
    assert not is_above(t2, t1)


def test_equal_heights_are_not_above() -> None:
    t = flat(3)
    assert depth_relation(t, t) is Depth.LEVEL
    assert not is_above(t, t)


def test_edge_on_triangle_is_undetermined() -> None:
    edge_on = Triangle3(Pt3(0, 0, 0), Pt3(1, 0, 0), Pt3(0, 0, 5))
    assert depth_relation(edge_on, flat(0)) is Depth.UNDETERMINED
    assert depth_relation(flat(0), edge_on) is Depth.UNDETERMINED
    assert not is_above(edge_on, flat(-10))


def test_sink_receives_heights() -> None:
    messages = []
    depth_relation(flat(1), flat(0), sink=messages.append)
    assert messages == ["heights at (0, 0): 1 vs 0"]


def test_sink_is_silent_without_overlap() -> None:
    messages = []
    far = Triangle3(Pt3(100, 100, 0), Pt3(101, 100, 0), Pt3(100, 101, 0))
    assert depth_relation(flat(0), far, sink=messages.append) is Depth.DISJOINT
    assert messages == []
