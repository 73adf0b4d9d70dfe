# painter3d/spatial.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .geom import Pt3, cross, dot, project, rotate, sub, translate, trunc_div
from .planar import Triangle2
from .predicates import collinear


@dataclass(frozen=True)
class Triangle3:
    p1: Pt3
    p2: Pt3
    p3: Pt3

    def vertices(self) -> Tuple[Pt3, Pt3, Pt3]:
        return (self.p1, self.p2, self.p3)

    def project(self) -> Optional[Triangle2]:
        """Проєкція на площину XY; якщо вона вироджується у відрізок, то None."""
        q1, q2, q3 = project(self.p1), project(self.p2), project(self.p3)
        if collinear(q1, q2, q3):
            return None
        return Triangle2(q1, q2, q3)

    def rotate(self, axis_point: Pt3, axis_vector: Pt3, angle: float) -> "Triangle3":
        return Triangle3(*(rotate(p, axis_point, axis_vector, angle) for p in self.vertices()))

    def translate(self, vector: Pt3) -> "Triangle3":
        return Triangle3(*(translate(p, vector) for p in self.vertices()))


@dataclass(frozen=True)
class Plane:
    """
    Площина a*x + b*y + c*z = d, проведена через трикутник.
    (a, b, c): ненормована нормаль (векторний добуток ребер).
    """
    a: int
    b: int
    c: int
    d: int

    @classmethod
    def from_triangle(cls, t: Triangle3) -> "Plane":
        v1 = sub(t.p3, t.p1)
        v2 = sub(t.p2, t.p1)
        n = cross(v1, v2)
        return cls(n.x, n.y, n.z, dot(n, t.p3))

    def height_at(self, x: int, y: int) -> Optional[int]:
        """z площини над точкою (x, y); для вертикальної площини (c == 0) повертає None."""
        if self.c == 0:
            return None
        return trunc_div(self.d - x * self.a - y * self.b, self.c)
