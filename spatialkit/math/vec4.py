# spatialkit/math/vec4.py
"""
4‑мерный вектор (float32). Однородные координаты точки/направления.
"""

import numbers

import numpy as np
from typing import Tuple

from spatialkit.math.mat4 import Mat4
from spatialkit.math.util import MATH_TOLERANCE, is_equal


class Vec4:
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    @staticmethod
    def from_vec3(v, w: float = 1.0) -> "Vec4":
        """Vec3 → Vec4; по умолчанию точка (w = 1)."""
        return Vec4(v.x, v.y, v.z, w)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = float(value)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(self._v + other._v))

    def __sub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(self._v - other._v))

    def __neg__(self) -> "Vec4":
        return Vec4(*(-self._v))

    def __mul__(self, other):
        """Vec4 * скаляр или Vec4 * Mat4 (вектор‑строка)."""
        if isinstance(other, numbers.Real):
            return Vec4(*(self._v * np.float32(other)))
        if isinstance(other, Mat4):
            return Vec4(*(self._v @ other.m))
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return Vec4(*(self._v * np.float32(scalar)))
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Vec4":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec4(*(self._v / np.float32(scalar)))

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def is_equal(self, other: "Vec4", epsilon: float = MATH_TOLERANCE) -> bool:
        """Покомпонентное сравнение с допуском."""
        return all(is_equal(a, b, epsilon) for a, b in zip(self, other))

    def dot(self, other: "Vec4") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec4") -> "Vec4":
        """Векторное произведение по xyz; результат – точка (w = 1)."""
        x, y, z = np.cross(self._v[:3], other._v[:3])
        return Vec4(x, y, z, 1.0)

    def length(self) -> float:
        """Евклидова длина."""
        return float(np.linalg.norm(self._v))

    def length_sq(self) -> float:
        return float(np.dot(self._v, self._v))

    def normalize(self) -> None:
        with np.errstate(divide="ignore", invalid="ignore"):
            self._v = self._v / np.linalg.norm(self._v)

    def normalized(self) -> "Vec4":
        """Нормализованный вектор (NaN для нулевого)."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec4(*(self._v / np.linalg.norm(self._v)))

    def angle(self, other: "Vec4") -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            cos_a = np.dot(self._v, other._v) / (
                np.linalg.norm(self._v) * np.linalg.norm(other._v)
            )
            return float(np.arccos(cos_a))

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    def __iter__(self):
        return iter(self._v.tolist())

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())
