from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .geom import Pt3, add, rotation_matrix, sub
from .pipeline import paint
from .shapes import Shape, TriangleSet, box
from .spatial import Triangle3

logger = logging.getLogger(__name__)


@dataclass
class Animation:
    """
    Параметри анімації сцени: поворот навколо осі (axis_point, axis_vector)
    на кут `angle`, потім зсув на `translation`. Кожен tick() додає крок.
    """
    axis_point: Pt3 = field(default_factory=lambda: Pt3(0, 0, 0))
    axis_vector: Pt3 = field(default_factory=lambda: Pt3(0, 0, 1))
    angle: float = 0.0
    angle_step: float = 0.0
    translation: Pt3 = field(default_factory=lambda: Pt3(0, 0, 0))
    translation_step: Pt3 = field(default_factory=lambda: Pt3(0, 0, 0))

    def __post_init__(self):
        if self.axis_vector == Pt3(0, 0, 0):
            raise ValueError("Rotation axis must be a non-zero vector")

    @classmethod
    def from_dict(cls, data: dict) -> "Animation":
        known = {"axis_point", "axis_vector", "angle", "angle_step", "translation", "translation_step"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown animation keys: {sorted(unknown)}")
        kwargs = {}
        for key, value in data.items():
            if key in ("angle", "angle_step"):
                kwargs[key] = float(value)
            else:
                kwargs[key] = _pt3(value)
        return cls(**kwargs)

    def advance(self) -> None:
        self.angle += self.angle_step
        self.translation = add(self.translation, self.translation_step)


class Scene:
    """
    Фасад для хост-циклу: базова геометрія + анімація.
      tick()   : один крок анімації;
      render() : плаский список цілих [count, x1, y1, x2, y2, x3, y3, ...].
    """

    def __init__(self, shapes: Iterable[Union[Shape, Triangle3]], animation: Optional[Animation] = None):
        self.animation = animation if animation is not None else Animation()
        base: List[Triangle3] = []
        for shape in shapes:
            if isinstance(shape, Triangle3):
                base.append(shape)
            elif isinstance(shape, Shape):
                base.extend(shape.approximate())
            else:
                raise TypeError(f"Not a shape: {shape!r}")
        self._triangles: Tuple[Triangle3, ...] = tuple(base)

    @property
    def triangles(self) -> Tuple[Triangle3, ...]:
        """Базова геометрія сцени (незмінна після створення)."""
        return self._triangles

    def tick(self) -> None:
        self.animation.advance()

    def frame(self) -> List[Triangle3]:
        """
        Базові трикутники після повороту, а потім зсуву поточного кадру.
        Поворот рахується по всіх вершинах разом, але в тому самому порядку
        операцій, що й geom.rotate, тож результат збігається з Triangle3.rotate.
        Цілі частини (віднімання осі, зсув) лишаються Python int.
        """
        anim = self.animation
        m = rotation_matrix(anim.axis_vector, anim.angle)
        origin, shift = anim.axis_point, anim.translation

        rel = np.array(
            [tuple(sub(p, origin)) for t in self._triangles for p in t.vertices()], dtype=float
        ).reshape(-1, 3)
        rx, ry, rz = rel[:, 0], rel[:, 1], rel[:, 2]
        xs, ys, zs = (np.rint(row[0]*rx + row[1]*ry + row[2]*rz) for row in m)

        pts = [
            Pt3(int(x) + origin.x + shift.x, int(y) + origin.y + shift.y, int(z) + origin.z + shift.z)
            for x, y, z in zip(xs, ys, zs)
        ]
        return [Triangle3(*pts[k:k + 3]) for k in range(0, len(pts), 3)]

    def render(self) -> List[int]:
        sink = logger.debug if logger.isEnabledFor(logging.DEBUG) else None
        return paint(self.frame(), sink=sink)


def _pt3(value: Sequence) -> Pt3:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"Expected 3 coordinates, got: {value!r}")
    try:
        x, y, z = (int(v) for v in value)
    except TypeError as e:
        raise ValueError(f"Coordinates must be integers: {value!r}") from e
    return Pt3(x, y, z)


def load_scene(path: Union[str, Path]) -> Scene:
    """
    Сцена з JSON-файлу:
      {
        "triangles": [[[x, y, z], [x, y, z], [x, y, z]], ...],
        "boxes": [{"lo": [x, y, z], "hi": [x, y, z]}, ...],
        "off": ["mesh.off", ...],          # шляхи відносно JSON-файлу
        "animation": {"angle_step": 0.05, ...}
      }
    Усі секції необов'язкові.
    """
    path = Path(path)
    logger.info("Loading scene from: %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Scene file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Scene file {path} must contain a JSON object")

    for key in ("triangles", "boxes", "off"):
        if not isinstance(data.get(key, []), list):
            raise ValueError(f"Scene section '{key}' must be a list")
    if not isinstance(data.get("animation", {}), dict):
        raise ValueError("Scene section 'animation' must be an object")

    shapes: List[Union[Shape, Triangle3]] = []
    for raw in data.get("triangles", []):
        if not isinstance(raw, list) or len(raw) != 3:
            raise ValueError(f"Triangle must be a list of 3 vertices, got: {raw!r}")
        shapes.append(Triangle3(*(_pt3(p) for p in raw)))
    for raw in data.get("boxes", []):
        if not isinstance(raw, dict) or "lo" not in raw or "hi" not in raw:
            raise ValueError(f"Box must have 'lo' and 'hi' corners, got: {raw!r}")
        shapes.append(box(_pt3(raw["lo"]), _pt3(raw["hi"])))
    for name in data.get("off", []):
        if not isinstance(name, str):
            raise ValueError(f"OFF entry must be a file name, got: {name!r}")
        mesh = TriangleSet.from_off((path.parent / name).read_text(encoding="utf-8"))
        logger.debug("Loaded %d triangles from %s", len(mesh), name)
        shapes.append(mesh)

    animation = Animation.from_dict(data.get("animation", {}))
    scene = Scene(shapes, animation)
    logger.info("Scene loaded: %d triangles", len(scene.triangles))
    return scene
