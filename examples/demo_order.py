# examples/demo_order.py
import logging

from painter3d.geom import Pt3
from painter3d.order import OcclusionGraph
from painter3d.spatial import Triangle3

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    # три однакові трикутники на різній висоті + один нижче і збоку
    tris = [
        Triangle3(Pt3(0, 0, 0), Pt3(-1, 1, 0), Pt3(1, 1, 0)),
        Triangle3(Pt3(0, 0, 1), Pt3(-1, 1, 1), Pt3(1, 1, 1)),
        Triangle3(Pt3(0, 0, -1), Pt3(-1, 1, -1), Pt3(1, 1, -1)),
        Triangle3(Pt3(0, 0, -10), Pt3(-1, -1, -10), Pt3(1, -1, -10)),
    ]
    graph = OcclusionGraph(tris, sink=print)
    print("Edges:", graph.edges())
    print("Paint order:", graph.paint_order())
    print("VALIDATION:", graph.validate())
