# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy.

Умножение справа на матрицу трактует вектор как строку: ``v * M``.
Умножение на кватернион (``v * q``) обрабатывает ``Quat.__rmul__``.
"""
import numbers

import numpy as np

from spatialkit.math.mat3 import Mat3
from spatialkit.math.mat4 import Mat4
from spatialkit.math.util import MATH_TOLERANCE, is_equal
from spatialkit.math.vec4 import Vec4


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @staticmethod
    def zero() -> "Vec3":
        return Vec3()

    @staticmethod
    def from_vec4(v: Vec4) -> "Vec3":
        """Отбрасывает w без деления на него."""
        return Vec3(v.x, v.y, v.z)

    def set(self, x: float, y: float, z: float) -> None:
        self._v[:] = (x, y, z)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float):
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float):
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float):
        self._v[2] = float(value)

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(self._v - other._v))

    def __neg__(self):
        return Vec3(*(-self._v))

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Vec3(*(self._v * np.float32(other)))
        if isinstance(other, Mat3):
            return Vec3(*(self._v @ other.m))
        if isinstance(other, Mat4):
            # точка: неявное w = 1, строка трансляции r3 прибавляется
            return Vec4(*(np.append(self._v, np.float32(1.0)) @ other.m))
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return Vec3(*(self._v * np.float32(scalar)))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v / np.float32(scalar)))

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def is_equal(self, other, epsilon: float = MATH_TOLERANCE) -> bool:
        return (is_equal(self.x, other.x, epsilon)
                and is_equal(self.y, other.y, epsilon)
                and is_equal(self.z, other.z, epsilon))

    def dot(self, other):
        return float(np.dot(self._v, other._v))

    def cross(self, other):
        return Vec3(*np.cross(self._v, other._v))

    def length(self):
        return float(np.linalg.norm(self._v))

    def length_sq(self):
        return float(np.dot(self._v, self._v))

    def normalize(self) -> None:
        with np.errstate(divide="ignore", invalid="ignore"):
            self._v = self._v / np.linalg.norm(self._v)

    def normalized(self):
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v / np.linalg.norm(self._v)))

    def angle(self, other) -> float:
        """Угол в радианах; для нулевых векторов – NaN."""
        with np.errstate(divide="ignore", invalid="ignore"):
            cos_a = np.dot(self._v, other._v) / (
                np.linalg.norm(self._v) * np.linalg.norm(other._v)
            )
            return float(np.arccos(cos_a))

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self):
        return tuple(self._v.tolist())

    def __iter__(self):
        return iter(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
