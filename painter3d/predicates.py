# painter3d/predicates.py
from __future__ import annotations

from .geom import Pt2


def orient2d(p1: Pt2, p2: Pt2, p3: Pt2) -> int:
    """
    Знак векторного добутку (p1 - p3) x (p2 - p3).
    Повертає 1, -1 або 0 (0 означає, що точки колінеарні).
    """
    ind = (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)
    if ind > 0:
        return 1
    if ind < 0:
        return -1
    return 0


def collinear(p1: Pt2, p2: Pt2, p3: Pt2) -> bool:
    """Чи лежать три точки на одній прямій (тест для виродженої проєкції трикутника)."""
    return (p1.y - p2.y) * (p1.x - p3.x) == (p1.y - p3.y) * (p1.x - p2.x)
