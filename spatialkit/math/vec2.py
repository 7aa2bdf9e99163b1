# spatialkit/math/vec2.py
"""
Двумерный вектор (float32). Оператора сравнения нет намеренно.
"""

import numbers

import numpy as np
from typing import Tuple


class Vec2:
    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float32)

    @staticmethod
    def from_vec3(v) -> "Vec2":
        """Проекция Vec3 на плоскость XY."""
        return Vec2(v.x, v.y)

    @staticmethod
    def from_vec4(v) -> "Vec2":
        return Vec2(v.x, v.y)

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

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(*(self._v + other._v))

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(*(self._v - other._v))

    def __neg__(self) -> "Vec2":
        return Vec2(*(-self._v))

    def __mul__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vec2(*(self._v * np.float32(scalar)))

    __rmul__ = __mul__

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec2") -> float:
        return float(np.dot(self._v, other._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def length_sq(self) -> float:
        return float(np.dot(self._v, self._v))

    def normalize(self) -> None:
        """Нормализация на месте. Нулевой вектор превращается в NaN."""
        with np.errstate(divide="ignore", invalid="ignore"):
            self._v = self._v / np.linalg.norm(self._v)

    def normalized(self) -> "Vec2":
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec2(*(self._v / np.linalg.norm(self._v)))

    def angle(self, other: "Vec2") -> float:
        """Угол между векторами в радианах."""
        with np.errstate(divide="ignore", invalid="ignore"):
            cos_a = np.dot(self._v, other._v) / (
                np.linalg.norm(self._v) * np.linalg.norm(other._v)
            )
            return float(np.arccos(cos_a))

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float]:
        return tuple(self._v.tolist())

    def __iter__(self):
        return iter(self._v.tolist())

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
