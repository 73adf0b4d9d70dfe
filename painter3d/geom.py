# painter3d/geom.py
from __future__ import annotations
from dataclasses import dataclass
from math import cos, sin, sqrt
from typing import List

Matrix3 = List[List[float]]


@dataclass(frozen=True)
class Pt2:
    x: int
    y: int
    def __iter__(self):
        yield self.x; yield self.y


@dataclass(frozen=True)
class Pt3:
    """Точка або вектор у 3D (вектор = точка відносно початку координат)."""
    x: int
    y: int
    z: int
    def __iter__(self):
        yield self.x; yield self.y; yield self.z


def trunc_div(a: int, b: int) -> int:
    """Цілочисельне ділення з відкиданням дробової частини (до нуля), а не floor."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def sub(a: Pt3, b: Pt3) -> Pt3:
    return Pt3(a.x - b.x, a.y - b.y, a.z - b.z)

def add(a: Pt3, b: Pt3) -> Pt3:
    return Pt3(a.x + b.x, a.y + b.y, a.z + b.z)

def neg(a: Pt3) -> Pt3:
    return Pt3(-a.x, -a.y, -a.z)

def dot(a: Pt3, b: Pt3) -> int:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt3, b: Pt3) -> Pt3:
    return Pt3(a.y*b.z - a.z*b.y,
               a.z*b.x - a.x*b.z,
               a.x*b.y - a.y*b.x)

def norm(a: Pt3) -> float:
    return sqrt(dot(a, a))


def rotation_matrix(axis_vector: Pt3, angle: float) -> Matrix3:
    """
    Матриця повороту на `angle` радіан навколо осі `axis_vector` (формула Родріга).
    Напрям повороту за правилом правої руки відносно нормованої осі.
    """
    length = norm(axis_vector)
    if length == 0.0:
        raise ValueError("Rotation axis must be a non-zero vector")
    kx, ky, kz = (axis_vector.x / length, axis_vector.y / length, axis_vector.z / length)
    c = cos(angle)
    s = sin(angle)
    t = 1.0 - c
    return [
        [c + kx*kx*t,    kx*ky*t - kz*s, kx*kz*t + ky*s],
        [ky*kx*t + kz*s, c + ky*ky*t,    ky*kz*t - kx*s],
        [kz*kx*t - ky*s, kz*ky*t + kx*s, c + kz*kz*t],
    ]


def rotate(point: Pt3, axis_point: Pt3, axis_vector: Pt3, angle: float) -> Pt3:
    """
    Поворот точки навколо прямої (axis_point, axis_vector).
    Рахуємо у float, координати результату округлюємо до найближчого цілого.
    """
    m = rotation_matrix(axis_vector, angle)
    rx, ry, rz = sub(point, axis_point)
    return Pt3(
        round(m[0][0]*rx + m[0][1]*ry + m[0][2]*rz) + axis_point.x,
        round(m[1][0]*rx + m[1][1]*ry + m[1][2]*rz) + axis_point.y,
        round(m[2][0]*rx + m[2][1]*ry + m[2][2]*rz) + axis_point.z,
    )


def translate(point: Pt3, vector: Pt3) -> Pt3:
    return add(point, vector)


def project(point: Pt3) -> Pt2:
    """Ортографічна проєкція вздовж +z: просто відкидаємо z."""
    return Pt2(point.x, point.y)
