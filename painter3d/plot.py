# painter3d/plot.py
from __future__ import annotations
from typing import Optional, Sequence

from matplotlib.axes import Axes
from matplotlib.collections import PolyCollection

from .planar import Triangle2


def draw_paint_order(
    ax: Axes,
    triangles: Sequence[Triangle2],
    facecolors: Optional[Sequence] = None,
    edgecolor: str = "black",
    flip_y: bool = True,
) -> PolyCollection:
    """
    Намалювати трикутники на `ax` у переданому порядку (від найдальшого).
    Непрозорі заливки + порядок = алгоритм художника, без z-буфера.
    flip_y: екранна вісь y направлена вниз (як у canvas-контексті браузера).
    """
    verts = [[(p.x, p.y) for p in t.vertices()] for t in triangles]
    if facecolors is None:
        # чим пізніше малюємо, тим світліше
        n = max(len(verts), 1)
        facecolors = [(0.2, 0.3 + 0.6 * k / n, 0.4, 1.0) for k in range(len(verts))]

    pc = PolyCollection(verts, facecolors=facecolors, edgecolors=edgecolor, linewidths=0.8)
    ax.add_collection(pc)

    if verts:
        xs = [x for tri in verts for x, _ in tri]
        ys = [y for tri in verts for _, y in tri]
        ax.set_xlim(min(xs) - 1, max(xs) + 1)
        ax.set_ylim(min(ys) - 1, max(ys) + 1)
    ax.set_aspect("equal")
    if flip_y and not ax.yaxis_inverted():
        ax.invert_yaxis()
    return pc
