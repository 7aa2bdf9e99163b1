# -*- coding: utf-8 -*-
import warnings
from math import pi, sqrt

import numpy as np
import pytest

from spatialkit.math import Vec2, Vec3, Vec4


def test_magnitude_and_normalize():
    v = Vec3(1, 2, 3)
    assert v.length() == pytest.approx(sqrt(14), abs=1e-3)
    assert v.length_sq() == pytest.approx(14.0)
    assert v.normalized().length() == pytest.approx(1.0, abs=1e-3)
    n = v.normalized()
    v.normalize()
    assert v == n


def test_cross_and_dot():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert Vec3(0, 1, 0).cross(Vec3(1, 0, 0)) == Vec3(0, 0, -1)
    assert Vec3(1, 2, 3).dot(Vec3(4, -5, 6)) == 12.0


def test_angle():
    assert Vec3(1, 0, 0).angle(Vec3(0, 1, 0)) == pytest.approx(pi / 2)
    assert Vec2(1, 0).angle(Vec2(-1, 0)) == pytest.approx(pi)
    assert Vec4(1, 0, 0, 0).angle(Vec4(0, 0, 0, 3)) == pytest.approx(pi / 2)


def test_degenerate_results_are_nan():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        n = Vec3.zero().normalized()
        a = Vec3.zero().angle(Vec3(1, 0, 0))
        z = Vec4().normalized()
        d = Vec3(1, 1, 1) / 0
    assert np.all(np.isnan(n.as_np()))
    assert np.isnan(a)
    assert np.all(np.isnan(z.as_np()))
    assert np.all(np.isinf(d.as_np()))


def test_tolerance_equality():
    assert Vec3(1, 2, 3) == Vec3(1.0005, 2, 2.9995)
    assert Vec3(1, 2, 3) != Vec3(1.002, 2, 3)
    assert Vec3(1, 2, 3).is_equal(Vec3(1.05, 2, 3), 0.1)
    assert Vec4(1, 2, 3, 4) == Vec4(1, 2, 3, 4.0005)
    assert Vec4(1, 2, 3, 4) != Vec4(1, 2, 3, 4.01)
    assert Vec3(1, 2, 3) != (1, 2, 3)


def test_vec2_has_no_tolerance_equality():
    assert Vec2.__eq__ is object.__eq__
    a = Vec2(1, 2)
    assert a == a
    assert Vec2(1, 2) != Vec2(1, 2)


def test_projections():
    v4 = Vec4(1, 2, 3, 4)
    assert Vec3.from_vec4(v4) == Vec3(1, 2, 3)
    assert Vec2.from_vec4(v4).to_tuple() == (1.0, 2.0)
    assert Vec2.from_vec3(Vec3(5, 6, 7)).to_tuple() == (5.0, 6.0)
    assert Vec4.from_vec3(Vec3(1, 2, 3)) == Vec4(1, 2, 3, 1)
    assert Vec4.from_vec3(Vec3(1, 2, 3), 0.0).w == 0.0


def test_vec4_arithmetic():
    a = Vec4(1, 2, 3, 4)
    b = Vec4(4, 3, 2, 1)
    assert a + b == Vec4(5, 5, 5, 5)
    assert a - b == Vec4(-3, -1, 1, 3)
    assert -a == Vec4(-1, -2, -3, -4)
    assert 2 * a == a * 2
    assert a / 2 == Vec4(0.5, 1, 1.5, 2)
    assert a.dot(b) == 20.0
    assert Vec4(1, 0, 0, 7).cross(Vec4(0, 1, 0, 7)) == Vec4(0, 0, 1, 1)


def test_vec2_arithmetic():
    a = Vec2(3, 4)
    assert a.length() == 5.0
    assert a.length_sq() == 25.0
    assert (a + Vec2(1, 1)).to_tuple() == (4.0, 5.0)
    assert (a - Vec2(1, 1)).to_tuple() == (2.0, 3.0)
    assert (-a).to_tuple() == (-3.0, -4.0)
    assert (0.5 * a).to_tuple() == (1.5, 2.0)
    assert a.dot(Vec2(1, 0)) == 3.0
    n = a.normalized()
    a.normalize()
    assert a.to_tuple() == n.to_tuple()
    assert n.x == pytest.approx(0.6)


def test_in_place_operators_rebind():
    v = Vec3(1, 2, 3)
    alias = v
    v += Vec3(1, 1, 1)
    v *= 2
    assert v == Vec3(4, 6, 8)
    assert alias == Vec3(1, 2, 3)


def test_set_and_setters():
    v = Vec3()
    v.set(1, 2, 3)
    v.z = 9
    assert v.to_tuple() == (1.0, 2.0, 9.0)
    w = Vec4()
    w.w = 2
    assert list(w) == [0.0, 0.0, 0.0, 2.0]


def test_bad_operands():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * "x"
    with pytest.raises(TypeError):
        Vec4() * Vec4()


@pytest.mark.parametrize("op", [
    lambda: Vec3() + 1,
    lambda: Vec3() - Vec4(),
    lambda: Vec3() / "x",
    lambda: Vec4() + 1,
    lambda: Vec4() - Vec3(),
    lambda: Vec4() / "x",
    lambda: Vec2() + 1,
    lambda: Vec2() - Vec3(),
    lambda: Vec2() * "x",
    lambda: "x" * Vec2(),
])
def test_mismatched_operands_raise_type_error(op):
    with pytest.raises(TypeError):
        op()


def test_vec4_normalize_pair():
    v = Vec4(1, 2, 3, 4)
    assert v.length() == pytest.approx(sqrt(30), abs=1e-3)
    assert v.length_sq() == pytest.approx(30.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0, abs=1e-3)
    v.normalize()
    assert v == n
    assert np.array_equal(v.as_np(), n.as_np())
