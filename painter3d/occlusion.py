# painter3d/occlusion.py
from __future__ import annotations
from enum import Enum
from typing import Callable, Optional

from .spatial import Plane, Triangle3

Sink = Callable[[str], None]


class Depth(Enum):
    """Результат порівняння двох трикутників у точці їхнього видимого перекриття."""
    ABOVE = "above"                # t ближче до глядача, малювати після u
    BELOW = "below"
    LEVEL = "level"                # однакова висота у точці перевірки
    DISJOINT = "disjoint"          # проєкції не перетинаються
    UNDETERMINED = "undetermined"  # вироджена проєкція або вертикальна площина


def depth_relation(t: Triangle3, u: Triangle3, sink: Optional[Sink] = None) -> Depth:
    """
    Порівняти t з u у деякій спільній точці їхніх проєкцій.

    `sink`: необов'язковий приймач діагностики (рядок з висотами у точці перевірки).
    Саме ядро нічого не друкує і не логує.
    """
    st = t.project()
    su = u.project()
    if st is None or su is None:
        return Depth.UNDETERMINED

    point = st.intersection(su)
    if point is None:
        return Depth.DISJOINT

    h_t = Plane.from_triangle(t).height_at(point.x, point.y)
    h_u = Plane.from_triangle(u).height_at(point.x, point.y)
    if sink is not None:
        sink(f"heights at ({point.x}, {point.y}): {h_t} vs {h_u}")
    if h_t is None or h_u is None:
        return Depth.UNDETERMINED

    if h_t > h_u:
        return Depth.ABOVE
    if h_t < h_u:
        return Depth.BELOW
    return Depth.LEVEL


def is_above(t: Triangle3, u: Triangle3) -> bool:
    """True, якщо u треба намалювати ПЕРЕД t."""
    return depth_relation(t, u) is Depth.ABOVE
