# spatialkit/math/quat.py
# ---------------------------------------------------------------
# Кватернионы (x, y, z, real) с поддержкой:
# - создания из угла/оси, углов Эйлера и матрицы вращения,
# - умножения (произведение Гамильтона),
# - нормализации, сопряжения, обращения,
# - вращения вектора «сэндвичем» q·v·q⁻¹ (v * q),
# - преобразования в 4×4 матрицу и обратно.
#
# Формулы вращения предполагают единичную длину; нормализация –
# забота вызывающего кода.
# ---------------------------------------------------------------

import numbers

import numpy as np
from math import sin, cos, radians

from spatialkit.math.mat4 import Mat4
from spatialkit.math.util import MATH_TOLERANCE, is_equal
from spatialkit.math.vec3 import Vec3


class Quat:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0, real=1.0):
        self._v = np.array([x, y, z, real], dtype=np.float32)

    @staticmethod
    def identity() -> "Quat":
        return Quat(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def zero() -> "Quat":
        return Quat(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_axis_angle(axis, angle_deg):
        """axis – 3‑элементный iterable (или Vec3), angle – в градусах."""
        a = radians(angle_deg) / 2.0
        s = sin(a)
        ax = np.array(list(axis), dtype=np.float32)
        ax = ax / np.linalg.norm(ax)
        return Quat(ax[0] * s, ax[1] * s, ax[2] * s, cos(a))

    @staticmethod
    def from_euler(pitch, yaw, roll):
        """Эйлеровы углы в градусах (X‑pitch, Y‑yaw, Z‑roll)."""
        qx = Quat.from_axis_angle([1, 0, 0], pitch)
        qy = Quat.from_axis_angle([0, 1, 0], yaw)
        qz = Quat.from_axis_angle([0, 0, 1], roll)
        # порядок: roll → pitch → yaw (как в Mat4.from_euler)
        return qy * qx * qz

    @staticmethod
    def from_mat4(m: Mat4) -> "Quat":
        """
        Кватернион из матрицы вращения (обратное к Mat4.from_quat).

        Ветвь выбирается по следу и наибольшему диагональному элементу,
        чтобы не делить на малое `s`. Результат приводится к полусфере
        real >= 0.
        """
        (m00, m01, m02, _), (m10, m11, m12, _), (m20, m21, m22, _), _ = m.m
        t = m00 + m11 + m22
        with np.errstate(divide="ignore", invalid="ignore"):
            if t > 0.0:
                s = np.float32(2.0) * np.sqrt(t + np.float32(1.0))
                q = Quat(-(m21 - m12) / s,
                         -(m02 - m20) / s,
                         -(m10 - m01) / s,
                         0.25 * s)
            elif m00 > m11 and m00 > m22:
                s = np.float32(2.0) * np.sqrt(np.float32(1.0) + m00 - m11 - m22)
                q = Quat(0.25 * s,
                         (m01 + m10) / s,
                         (m02 + m20) / s,
                         -(m21 - m12) / s)
            elif m11 > m22:
                s = np.float32(2.0) * np.sqrt(np.float32(1.0) + m11 - m00 - m22)
                q = Quat((m01 + m10) / s,
                         0.25 * s,
                         (m12 + m21) / s,
                         -(m02 - m20) / s)
            else:
                s = np.float32(2.0) * np.sqrt(np.float32(1.0) + m22 - m00 - m11)
                q = Quat((m02 + m20) / s,
                         (m12 + m21) / s,
                         0.25 * s,
                         -(m10 - m01) / s)
        if q.real < 0.0:
            q._v = -q._v
        return q

    # -----------------------------------------------------------
    #  Компоненты
    # -----------------------------------------------------------
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

    @property
    def real(self) -> float:
        return float(self._v[3])

    @real.setter
    def real(self, value: float):
        self._v[3] = float(value)

    def vector(self) -> Vec3:
        """Векторная часть (x, y, z)."""
        return Vec3(*self._v[:3])

    # -----------------------------------------------------------
    #  Алгебра
    # -----------------------------------------------------------
    def __mul__(self, other: "Quat") -> "Quat":
        """Гамильтоново умножение: (a * b) вращает сначала b, затем a."""
        if not isinstance(other, Quat):
            return NotImplemented
        ax, ay, az, aw = self._v
        bx, by, bz, bw = other._v
        x = aw * bx + ax * bw + ay * bz - az * by
        y = aw * by - ax * bz + ay * bw + az * bx
        z = aw * bz + ax * by - ay * bx + az * bw
        w = aw * bw - ax * bx - ay * by - az * bz
        return Quat(x, y, z, w)

    def __rmul__(self, other):
        """``v * q`` – вращение Vec3 кватернионом."""
        if isinstance(other, Vec3):
            return self.rotate(other)
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            q = Quat()
            q._v = self._v / np.float32(scalar)
            return q

    def dot(self, other: "Quat") -> float:
        return float(np.dot(self._v, other._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def length_sq(self) -> float:
        return float(np.dot(self._v, self._v))

    def normalize(self) -> None:
        with np.errstate(divide="ignore", invalid="ignore"):
            self._v = self._v / np.linalg.norm(self._v)

    def normalized(self) -> "Quat":
        q = self.copy()
        q.normalize()
        return q

    def conjugate(self) -> None:
        """Сопряжение на месте: векторная часть меняет знак."""
        self._v[:3] = -self._v[:3]

    def conjugated(self) -> "Quat":
        return Quat(-self._v[0], -self._v[1], -self._v[2], self._v[3])

    def invert(self) -> None:
        self._v = self.inverted()._v

    def inverted(self) -> "Quat":
        """conj(q) / |q|²; для нулевого кватерниона – NaN."""
        return self.conjugated() / self.length_sq()

    def transpose(self) -> None:
        """Обращение вращения через транспонирование матрицы."""
        m = Mat4.from_quat(self)
        m.transpose()
        self._v = Quat.from_mat4(m)._v

    def transposed(self) -> "Quat":
        return Quat.from_mat4(Mat4.from_quat(self).transposed())

    # -----------------------------------------------------------
    #  Вращение
    # -----------------------------------------------------------
    def rotate(self, v: Vec3) -> Vec3:
        """q·v·q⁻¹ без промежуточных кватернионов."""
        qv = self.vector()
        real = self.real
        return (2.0 * real * qv.cross(v)
                + (real * real - qv.dot(qv)) * v
                + 2.0 * qv.dot(v) * qv)

    def _rotate_conjugate(self, v: Vec3) -> Vec3:
        # q⁻¹·v·q: отличается только порядком векторного произведения
        qv = self.vector()
        real = self.real
        return (2.0 * real * v.cross(qv)
                + (real * real - qv.dot(qv)) * v
                + 2.0 * qv.dot(v) * qv)

    def rotate_inverse(self, v: Vec3) -> Vec3:
        """Обратное вращение; совпадает с conjugated().rotate(v)."""
        return self._rotate_conjugate(v)

    def angle(self) -> float:
        """Угол вращения в радианах; real зажимается в [-1, 1]."""
        return 2.0 * float(np.arccos(np.clip(self._v[3], -1.0, 1.0)))

    def axis(self) -> Vec3:
        """Ось вращения; у тождественного кватерниона – NaN."""
        return self.vector().normalized()

    # -----------------------------------------------------------
    #  Преобразования
    # -----------------------------------------------------------
    def to_mat4(self) -> Mat4:
        """Возвращает 4×4 матрицу вращения."""
        return Mat4.from_quat(self)

    def is_equal(self, other: "Quat", epsilon: float = MATH_TOLERANCE) -> bool:
        return all(is_equal(a, b, epsilon) for a, b in zip(self, other))

    def copy(self) -> "Quat":
        return Quat(*self._v)

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self):
        return tuple(self._v.tolist())

    def __iter__(self):
        return iter(self._v.tolist())

    def __repr__(self):
        return f"Quat({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.real:.3f})"
