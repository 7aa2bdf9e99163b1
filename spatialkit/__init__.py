"""
spatialkit – компактное ядро пространственной математики для Python:
векторы, матрицы 3×3/4×4 и кватернионы на базе NumPy (float32).
"""

from spatialkit.utils import logger, check_finite, Config
from spatialkit.math import (
    Vec2, Vec3, Vec4, Mat3, Mat4, Quat, MATH_TOLERANCE
)

__version__ = "1.0.0"

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat3",
    "Mat4",
    "Quat",
    "MATH_TOLERANCE",
    "Config",
    "check_finite",
    "logger",
]
