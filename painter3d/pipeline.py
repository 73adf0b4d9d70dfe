from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .occlusion import Sink
from .order import OcclusionGraph
from .geom import Pt2
from .planar import Triangle2
from .spatial import Triangle3

logger = logging.getLogger(__name__)


def ordered_projection(
    triangles: Iterable[Triangle3],
    sink: Optional[Sink] = None,
) -> List[Triangle2]:
    """
    Повний пайплайн одного кадру:
      - будує граф перекриттів (OcclusionGraph);
      - бере порядок малювання (postorder DFS);
      - проєктує трикутники у цьому порядку, викидаючи вироджені проєкції.

    Повертає 2D-трикутники від найдальшого до найближчого.
    """
    graph = OcclusionGraph(list(triangles), sink=sink)
    order = graph.paint_order()

    report = graph.validate(order)
    if report["violations"]:
        logger.warning(
            "cyclic occlusion: %d constraint(s) violated by paint order", len(report["violations"])
        )

    result: List[Triangle2] = []
    for idx in order:
        flat = graph.T[idx].project()
        if flat is not None:
            result.append(flat)
    return result


def serialize(triangles: Iterable[Triangle2]) -> List[int]:
    """[кількість, p1.x, p1.y, p2.x, p2.y, p3.x, p3.y, ...]"""
    buf = [0]
    for tri in triangles:
        for p in tri.vertices():
            buf.append(p.x)
            buf.append(p.y)
        buf[0] += 1
    return buf


def deserialize(buf: List[int]) -> List[Triangle2]:
    """Зворотне до serialize(): рівно 6 * count чисел після лічильника."""
    if not buf:
        raise ValueError("Empty buffer: count is missing")
    count = buf[0]
    if count < 0 or len(buf) != 1 + 6 * count:
        raise ValueError(f"Buffer holds {len(buf) - 1} numbers, expected {6 * count}")
    result = []
    for k in range(count):
        x1, y1, x2, y2, x3, y3 = buf[1 + 6 * k:7 + 6 * k]
        result.append(Triangle2(Pt2(x1, y1), Pt2(x2, y2), Pt2(x3, y3)))
    return result


def paint(triangles: Iterable[Triangle3], sink: Optional[Sink] = None) -> List[int]:
    return serialize(ordered_projection(triangles, sink=sink))
