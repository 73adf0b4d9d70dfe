# painter3d/planar.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .geom import Pt2, trunc_div
from .predicates import orient2d


@dataclass(frozen=True)
class Line:
    """
    Нескінченна пряма a*x + b*y = c у канонічній формі: a > 0, або a == 0 і b >= 0.
    Завдяки канонізації два відрізки колінеарні тоді й лише тоді, коли їхні прямі рівні.
    """
    a: int
    b: int
    c: int

    @classmethod
    def canonical(cls, a: int, b: int, c: int) -> "Line":
        if a < 0 or (a == 0 and b < 0):
            return cls(-a, -b, -c)
        return cls(a, b, c)

    @classmethod
    def from_segment(cls, seg: "Segment") -> "Line":
        p1, p2 = seg.p1, seg.p2
        return cls.canonical(
            p1.y - p2.y,
            p2.x - p1.x,
            -(p1.x * p2.y - p2.x * p1.y),
        )

    def intersection(self, other: "Line") -> Optional[Pt2]:
        """
        Точка перетину двох прямих за правилом Крамера.
        Паралельні (у т.ч. однакові) прямі -> None.
        Ділення цілочисельне з відкиданням дробу, тож неціла точка зсувається до нуля.
        """
        d = self.a * other.b - self.b * other.a
        if d == 0:
            return None
        dx = self.c * other.b - self.b * other.c
        dy = self.a * other.c - self.c * other.a
        return Pt2(trunc_div(dx, d), trunc_div(dy, d))


@dataclass(frozen=True)
class Segment:
    """Замкнений відрізок p1-p2."""
    p1: Pt2
    p2: Pt2

    def line(self) -> Line:
        return Line.from_segment(self)

    def contains_point(self, p: Pt2) -> bool:
        """
        Чи лежить p у прямокутнику, натягнутому на p1, p2.
        Має сенс лише для точок, що вже лежать на прямій відрізка.
        """
        x1, x2 = min(self.p1.x, self.p2.x), max(self.p1.x, self.p2.x)
        y1, y2 = min(self.p1.y, self.p2.y), max(self.p1.y, self.p2.y)
        return x1 <= p.x <= x2 and y1 <= p.y <= y2

    def intersection(self, other: "Segment") -> Optional[Pt2]:
        """
        Будь-яка спільна точка двох відрізків (або None).
        Для колінеарних відрізків повертається один кінець, що лежить в іншому відрізку,
        а не весь інтервал перекриття.
        """
        l1 = self.line()
        l2 = other.line()
        if l1 == l2:
            for p, seg in ((other.p1, self), (other.p2, self), (self.p1, other), (self.p2, other)):
                if seg.contains_point(p):
                    return p
            return None
        p = l1.intersection(l2)
        if p is not None and self.contains_point(p) and other.contains_point(p):
            return p
        return None


@dataclass(frozen=True)
class Triangle2:
    p1: Pt2
    p2: Pt2
    p3: Pt2

    orientation_sign = staticmethod(orient2d)

    def edges(self) -> Iterator[Segment]:
        yield Segment(self.p1, self.p2)
        yield Segment(self.p2, self.p3)
        yield Segment(self.p3, self.p1)

    def vertices(self) -> Tuple[Pt2, Pt2, Pt2]:
        return (self.p1, self.p2, self.p3)

    def contains_point(self, p: Pt2) -> bool:
        """Точка всередині або на межі трикутника."""
        d1 = orient2d(p, self.p1, self.p2)
        d2 = orient2d(p, self.p2, self.p3)
        d3 = orient2d(p, self.p3, self.p1)
        has_neg = d1 < 0 or d2 < 0 or d3 < 0
        has_pos = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_neg and has_pos)

    def intersection(self, other: "Triangle2") -> Optional[Pt2]:
        """
        Одна (довільна, але детермінована) спільна точка двох трикутників.
          1) вершина одного всередині іншого;
          2) перетин будь-якої пари ребер (3 x 3 пари у фіксованому порядку).
        """
        if self.contains_point(other.p1):
            return other.p1
        if other.contains_point(self.p1):
            return self.p1

        for e1 in self.edges():
            for e2 in other.edges():
                p = e1.intersection(e2)
                if p is not None:
                    return p
        return None
