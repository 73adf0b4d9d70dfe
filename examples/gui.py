# examples/gui.py
from __future__ import annotations

import math
import tkinter as tk
from tkinter import ttk, messagebox

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from painter3d.geom import Pt3
from painter3d.pipeline import deserialize
from painter3d.plot import draw_paint_order
from painter3d.scene import Animation, Scene
from painter3d.shapes import box
from painter3d.spatial import Triangle3


def parse_triangles_from_text(text: str):
    """
    Парсить трикутники з багаторядкового тексту.
    Кожен рядок: 9 цілих (x1 y1 z1 x2 y2 z2 x3 y3 z3), допускаються коми.
    """
    triangles = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті рядки і коментарі
        parts = line.replace(",", " ").split()
        if len(parts) != 9:
            raise ValueError(f"Рядок {lineno}: очікується 9 чисел, отримано: {len(parts)}")
        try:
            c = [int(v) for v in parts]
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати цілі числа '{line}'")
        triangles.append(Triangle3(Pt3(*c[0:3]), Pt3(*c[3:6]), Pt3(*c[6:9])))
    return triangles


def default_shapes():
    return [
        box(Pt3(-80, -80, -80), Pt3(80, 80, 80)),
        box(Pt3(40, -30, -30), Pt3(160, 30, 30)),
    ]


class PainterApp(tk.Tk):
    FRAME_MS = 50

    def __init__(self):
        super().__init__()
        self.title("Painter's order")
        self.geometry("800x700")

        self.scene = None
        self.running = False

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Геометрія ---
        manual_frame = ttk.LabelFrame(main, text="Трикутники (один трикутник - один рядок; порожньо = дві коробки)")
        manual_frame.pack(fill="x", pady=5)

        self.tri_text = tk.Text(manual_frame, height=5, wrap="none")
        self.tri_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.tri_text.insert(
            "1.0",
            "# Приклад:\n"
            "# 0 0 0  100 0 0  0 100 0\n"
        )

        # --- Параметри анімації ---
        anim_frame = ttk.LabelFrame(main, text="Анімація")
        anim_frame.pack(fill="x", pady=5)

        ttk.Label(anim_frame, text="Вісь (x y z):").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.axis_entry = ttk.Entry(anim_frame, width=15)
        self.axis_entry.insert(0, "1 1 0")
        self.axis_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Label(anim_frame, text="Крок кута (град):").grid(row=0, column=2, sticky="w", padx=5, pady=5)
        self.step_entry = ttk.Entry(anim_frame, width=8)
        self.step_entry.insert(0, "3")
        self.step_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)

        buttons = ttk.Frame(main)
        buttons.pack(fill="x", pady=5)
        ttk.Button(buttons, text="Старт", command=self.start).pack(side="left", expand=True, fill="x")
        ttk.Button(buttons, text="Стоп", command=self.stop).pack(side="left", expand=True, fill="x")

        self.status_var = tk.StringVar(value="-")
        ttk.Label(main, textvariable=self.status_var).pack(fill="x", pady=2)

        # --- Полотно ---
        plot_frame = ttk.LabelFrame(main, text="Кадр")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def start(self):
        raw_text = self.tri_text.get("1.0", "end").strip()
        try:
            triangles = parse_triangles_from_text(raw_text)
            axis = [int(v) for v in self.axis_entry.get().split()]
            if len(axis) != 3:
                raise ValueError("Вісь має містити 3 цілих числа")
            step = math.radians(float(self.step_entry.get()))
            shapes = triangles if triangles else default_shapes()
            self.scene = Scene(shapes, Animation(axis_vector=Pt3(*axis), angle_step=step))
        except ValueError as e:
            messagebox.showerror("Помилка вводу", str(e))
            return

        if not self.running:
            self.running = True
            self._next_frame()

    def stop(self):
        self.running = False

    def _next_frame(self):
        if not self.running or self.scene is None:
            return
        buf = self.scene.render()
        self.scene.tick()

        self.ax.clear()
        draw_paint_order(self.ax, deserialize(buf))
        self.canvas.draw()
        self.status_var.set(f"Видимих трикутників: {buf[0]} з {len(self.scene.triangles)}")

        self.after(self.FRAME_MS, self._next_frame)


if __name__ == "__main__":
    app = PainterApp()
    app.mainloop()
