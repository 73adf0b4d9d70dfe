# painter3d/shapes.py
from __future__ import annotations
from typing import Dict, Iterable, List, Protocol, Tuple, runtime_checkable

from .geom import Pt3
from .spatial import Triangle3


@runtime_checkable
class Shape(Protocol):
    """Будь-яка фігура, яку можна наблизити набором трикутників."""
    def approximate(self) -> List[Triangle3]: ...


class TriangleSet:
    """Найпростіша фігура: готовий список трикутників."""

    def __init__(self, triangles: Iterable[Triangle3]):
        self.triangles: List[Triangle3] = list(triangles)

    def approximate(self) -> List[Triangle3]:
        return list(self.triangles)

    def __len__(self) -> int:
        return len(self.triangles)

    # ---------------- OFF ----------------
    @classmethod
    def from_off(cls, text: str) -> "TriangleSet":
        """
        Читає трикутну (або полігональну) сітку у форматі OFF.
        Координати округлюються до цілих; полігони з k > 3 вершинами
        розбиваються віялом з першої вершини.
        """
        lines = []
        for raw in text.splitlines():
            line = raw.split("#", 1)[0].strip()
            if line:
                lines.append(line)
        if not lines or lines[0] != "OFF":
            raise ValueError("OFF header is missing")
        if len(lines) < 2:
            raise ValueError("OFF counts line is missing")

        try:
            nv, nf = (int(v) for v in lines[1].split()[:2])
        except ValueError:
            raise ValueError(f"Bad OFF counts line: '{lines[1]}'")
        if len(lines) < 2 + nv + nf:
            raise ValueError(f"OFF: expected {nv} vertices and {nf} faces")

        pts: List[Pt3] = []
        for line in lines[2:2 + nv]:
            parts = line.split()
            if len(parts) < 3:
                raise ValueError(f"OFF: bad vertex line '{line}'")
            x, y, z = (round(float(v)) for v in parts[:3])
            pts.append(Pt3(x, y, z))

        triangles: List[Triangle3] = []
        for line in lines[2 + nv:2 + nv + nf]:
            parts = [int(v) for v in line.split()]
            k, idx = parts[0], parts[1:]
            if k < 3 or len(idx) < k:
                raise ValueError(f"OFF: bad face line '{line}'")
            if any(not (0 <= i < nv) for i in idx[:k]):
                raise ValueError(f"OFF: face index out of range in '{line}'")
            for m in range(1, k - 1):
                triangles.append(Triangle3(pts[idx[0]], pts[idx[m]], pts[idx[m + 1]]))
        return cls(triangles)

    def to_off(self) -> str:
        """Експорт у OFF зі спільними (дедуплікованими) вершинами."""
        index: Dict[Pt3, int] = {}
        faces: List[Tuple[int, int, int]] = []
        for t in self.triangles:
            face = []
            for p in t.vertices():
                if p not in index:
                    index[p] = len(index)
                face.append(index[p])
            faces.append((face[0], face[1], face[2]))

        lines = ["OFF", f"{len(index)} {len(faces)} 0"]
        for p in index:
            lines.append(f"{p.x} {p.y} {p.z}")
        for a, b, c in faces:
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)


def box(lo: Pt3, hi: Pt3) -> TriangleSet:
    """Паралелепіпед [lo, hi], по два трикутники на грань (12 трикутників)."""
    if lo.x >= hi.x or lo.y >= hi.y or lo.z >= hi.z:
        raise ValueError("Box corners must satisfy lo < hi on every axis")
    v = [
        Pt3(lo.x, lo.y, lo.z), Pt3(hi.x, lo.y, lo.z), Pt3(hi.x, hi.y, lo.z), Pt3(lo.x, hi.y, lo.z),
        Pt3(lo.x, lo.y, hi.z), Pt3(hi.x, lo.y, hi.z), Pt3(hi.x, hi.y, hi.z), Pt3(lo.x, hi.y, hi.z),
    ]
    quads = [
        (0, 1, 2, 3),  # низ
        (5, 4, 7, 6),  # верх
        (4, 0, 3, 7),  # ліва
        (1, 5, 6, 2),  # права
        (3, 2, 6, 7),  # задня
        (4, 5, 1, 0),  # передня
    ]
    triangles = []
    for a, b, c, d in quads:
        triangles.append(Triangle3(v[a], v[b], v[c]))
        triangles.append(Triangle3(v[a], v[c], v[d]))
    return TriangleSet(triangles)
