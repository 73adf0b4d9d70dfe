"""
painter3d: порядок малювання непрозорих 3D-трикутників для алгоритму художника.
Цілочисельні 2D/3D примітиви + граф перекриттів + postorder DFS.
"""

__version__ = "0.1.0"

from painter3d.geom import Pt2, Pt3, rotate, project
from painter3d.planar import Line, Segment, Triangle2
from painter3d.spatial import Triangle3, Plane
from painter3d.occlusion import Depth, depth_relation, is_above
from painter3d.order import OcclusionGraph
from painter3d.pipeline import ordered_projection, serialize, deserialize, paint
from painter3d.shapes import Shape, TriangleSet, box
from painter3d.scene import Animation, Scene, load_scene

__all__ = [
    "Pt2", "Pt3", "rotate", "project",
    "Line", "Segment", "Triangle2",
    "Triangle3", "Plane",
    "Depth", "depth_relation", "is_above",
    "OcclusionGraph",
    "ordered_projection", "serialize", "deserialize", "paint",
    "Shape", "TriangleSet", "box",
    "Animation", "Scene", "load_scene",
    "__version__",
]
