"""
Математический суб‑пакет: Vec2, Vec3, Vec4, Mat3, Mat4, Quat и предикаты допуска.
"""

from spatialkit.math.util import (
    MATH_TOLERANCE, is_equal, is_not_equal, is_one, is_zero, is_non_zero
)
from spatialkit.math.vec2 import Vec2
from spatialkit.math.vec3 import Vec3
from spatialkit.math.vec4 import Vec4
from spatialkit.math.mat3 import Mat3
from spatialkit.math.mat4 import Mat4
from spatialkit.math.quat import Quat

__all__ = [
    "Vec2", "Vec3", "Vec4", "Mat3", "Mat4", "Quat",
    "MATH_TOLERANCE", "is_equal", "is_not_equal", "is_one", "is_zero", "is_non_zero",
]
