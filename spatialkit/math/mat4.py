# spatialkit/math/mat4.py
"""
Матрица 4×4 (float32), соглашение «вектор‑строка».

Точка преобразуется как ``v * M``; трансляция хранится в строке 3,
поэтому ``A @ B`` означает «сначала A, затем B».
"""
import numbers

import numpy as np
from math import radians, sin, cos

from spatialkit.math.mat3 import matrix_cell
from spatialkit.math.util import MATH_TOLERANCE, is_equal


def _minor(m: np.ndarray, row: int, col: int) -> np.float32:
    """Определитель 3×3 подматрицы без строки `row` и столбца `col`."""
    r0, r1, r2 = (r for r in range(4) if r != row)
    c0, c1, c2 = (c for c in range(4) if c != col)
    return (m[r0, c0] * (m[r1, c1] * m[r2, c2] - m[r1, c2] * m[r2, c1])
            - m[r0, c1] * (m[r1, c0] * m[r2, c2] - m[r1, c2] * m[r2, c0])
            + m[r0, c2] * (m[r1, c0] * m[r2, c1] - m[r1, c1] * m[r2, c0]))


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def zero():
        return Mat4(np.zeros((4, 4), dtype=np.float32))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[3, 0] = x
        m[3, 1] = y
        m[3, 2] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotate_x(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[1, 1] = c
        m[1, 2] = s
        m[2, 1] = -s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 2] = -s
        m[2, 0] = s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 1] = s
        m[1, 0] = -s
        m[1, 1] = c
        return Mat4(m)

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float):
        """Градусы; порядок применения: roll (Z) → pitch (X) → yaw (Y)."""
        Rx = Mat4.rotate_x(pitch)
        Ry = Mat4.rotate_y(yaw)
        Rz = Mat4.rotate_z(roll)
        return Rz @ Rx @ Ry

    @staticmethod
    def from_quat(q) -> "Mat4":
        """
        Матрица вращения из кватерниона (x, y, z, real).

        Единичная длина `q` не проверяется: неединичный кватернион даёт
        масштабированную/скошенную матрицу.
        """
        x_x, x_y, x_z, x_w = q.x * q.x, q.x * q.y, q.x * q.z, q.x * q.real
        y_y, y_z, y_w = q.y * q.y, q.y * q.z, q.y * q.real
        z_z, z_w = q.z * q.z, q.z * q.real

        return Mat4([
            [1.0 - 2.0 * (y_y + z_z), 2.0 * (x_y + z_w), 2.0 * (x_z - y_w), 0.0],
            [2.0 * (x_y - z_w), 1.0 - 2.0 * (x_x + z_z), 2.0 * (y_z + x_w), 0.0],
            [2.0 * (x_z + y_w), 2.0 * (y_z - x_w), 1.0 - 2.0 * (x_x + y_y), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    # -----------------------------------------------------------
    #  Определитель, транспонирование, обращение
    # -----------------------------------------------------------
    def determinant(self) -> float:
        """Разложение Лапласа по первой строке, без выбора ведущего элемента."""
        m = self.m
        with np.errstate(over="ignore", invalid="ignore"):
            return float(m[0, 0] * _minor(m, 0, 0)
                         - m[0, 1] * _minor(m, 0, 1)
                         + m[0, 2] * _minor(m, 0, 2)
                         - m[0, 3] * _minor(m, 0, 3))

    def transpose(self) -> None:
        """Транспонирование на месте: обмен шести пар вне диагонали."""
        m = self.m
        for row in range(4):
            for col in range(row + 1, 4):
                m[row, col], m[col, row] = m[col, row], m[row, col]

    def transposed(self) -> "Mat4":
        return Mat4(self.m.T)

    def inverted(self) -> "Mat4":
        """
        Обратная матрица через присоединённую: adj(M) / det(M).

        Вырожденная матрица не проверяется: при det == 0 элементы
        становятся ±inf/NaN. Нужна безопасность – проверяйте determinant().
        """
        m = self.m
        adj = np.empty((4, 4), dtype=np.float32)
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            for row in range(4):
                for col in range(4):
                    cofactor = _minor(m, row, col)
                    # индекс [col, row] сразу транспонирует матрицу кофакторов
                    adj[col, row] = -cofactor if (row + col) % 2 else cofactor
            inv_det = np.float32(1.0) / np.float32(self.determinant())
            return Mat4(adj * inv_det)

    def invert(self) -> None:
        self.m = self.inverted().m

    # -----------------------------------------------------------
    #  Арифметика
    # -----------------------------------------------------------
    def __matmul__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(np.dot(self.m, other.m))

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Mat4(self.m * np.float32(scalar))

    __rmul__ = __mul__

    def __add__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(self.m + other.m)

    def __sub__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(self.m - other.m)

    def __getitem__(self, index):
        return float(self.m[index])

    def is_equal(self, other: "Mat4", epsilon: float = MATH_TOLERANCE) -> bool:
        return all(is_equal(a, b, epsilon)
                   for a, b in zip(self.m.flat, other.m.flat))

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()


for _row in range(4):
    for _col in range(4):
        setattr(Mat4, f"r{_row}c{_col}", matrix_cell(_row, _col))
