# examples/main.py
from __future__ import annotations

import logging

import matplotlib
matplotlib.use("Agg")
from matplotlib.figure import Figure

from painter3d.geom import Pt3
from painter3d.pipeline import deserialize
from painter3d.plot import draw_paint_order
from painter3d.scene import Animation, Scene
from painter3d.shapes import TriangleSet, box


def main():
    logging.basicConfig(level=logging.INFO)

    # --- 1) Вхідні дані: дві коробки, одна частково над іншою ---
    shapes = [
        box(Pt3(100, 100, 0), Pt3(300, 300, 200)),
        box(Pt3(220, 180, 150), Pt3(420, 380, 350)),
    ]
    animation = Animation(
        axis_point=Pt3(260, 240, 175),
        axis_vector=Pt3(1, 1, 0),
        angle=0.6,
    )
    scene = Scene(shapes, animation)

    # --- 2) scene.off: базова геометрія ---
    with open("scene.off", "w", encoding="utf-8") as f:
        f.write(TriangleSet(scene.triangles).to_off())
    print("scene.off записано.")

    # --- 3) Один кадр: порядок малювання ---
    buf = scene.render()
    print(f"Видимих трикутників: {buf[0]} з {len(scene.triangles)}")

    # --- 4) frame.png: зафарбовані трикутники у порядку малювання ---
    fig = Figure(figsize=(5, 5))
    ax = fig.add_subplot(111)
    draw_paint_order(ax, deserialize(buf))
    fig.savefig("frame.png", dpi=100)
    print("frame.png записано.")


if __name__ == "__main__":
    main()
