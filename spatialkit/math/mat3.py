# spatialkit/math/mat3.py
import numpy as np

from spatialkit.math.util import MATH_TOLERANCE, is_equal


def matrix_cell(row: int, col: int) -> property:
    """Свойство r{row}c{col} поверх ``self.m[row, col]``."""

    def getter(self) -> float:
        return float(self.m[row, col])

    def setter(self, value: float) -> None:
        self.m[row, col] = float(value)

    return property(getter, setter, doc=f"Элемент строки {row}, столбца {col}.")


class Mat3:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(3, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((3, 3))

    @staticmethod
    def identity():
        return Mat3(np.identity(3, dtype=np.float32))

    @staticmethod
    def zero():
        return Mat3(np.zeros((3, 3), dtype=np.float32))

    def __getitem__(self, index):
        return float(self.m[index])

    def is_equal(self, other: "Mat3", epsilon: float = MATH_TOLERANCE) -> bool:
        return all(is_equal(a, b, epsilon)
                   for a, b in zip(self.m.flat, other.m.flat))

    def __repr__(self):
        return f"Mat3({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()


for _row in range(3):
    for _col in range(3):
        setattr(Mat3, f"r{_row}c{_col}", matrix_cell(_row, _col))
