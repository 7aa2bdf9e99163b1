# spatialkit/math/util.py
"""
Скалярные предикаты сравнения с допуском.

Все сравнения включают границу: |a - b| <= epsilon считается равенством.
"""

MATH_TOLERANCE = 0.001


def is_equal(a: float, b: float, epsilon: float = MATH_TOLERANCE) -> bool:
    diff = a - b
    return -epsilon <= diff <= epsilon


def is_not_equal(a: float, b: float, epsilon: float = MATH_TOLERANCE) -> bool:
    diff = a - b
    return diff < -epsilon or diff > epsilon


def is_one(a: float, epsilon: float = MATH_TOLERANCE) -> bool:
    return is_equal(a, 1.0, epsilon)


def is_zero(a: float, epsilon: float = MATH_TOLERANCE) -> bool:
    return -epsilon <= a <= epsilon


def is_non_zero(a: float, epsilon: float = MATH_TOLERANCE) -> bool:
    return a < -epsilon or a > epsilon
