# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов математического ядра.
"""

import pytest

from spatialkit.math import Mat4, Quat
from spatialkit.utils.config import Config


# ----------------------------------------------------------------------
# Единичные кватернионы в полусфере real >= 0.
# Покрывают все четыре ветви Quat.from_mat4.
# ----------------------------------------------------------------------
UNIT_QUATS = [
    Quat.identity(),                                  # след > 0
    Quat.from_axis_angle([0, 0, 1], 90),              # след > 0
    Quat.from_axis_angle([1, 0, 0], 180),             # ветвь x, real == 0
    Quat.from_axis_angle([0, 1, 0], 160),             # ветвь y
    Quat.from_axis_angle([0, 0, 1], 170),             # ветвь z
    Quat(0.3, -0.5, 0.6, 0.2).normalized(),           # ветвь z, общий случай
    Quat(-0.7, 0.1, 0.2, 0.3).normalized(),           # ветвь x, x < 0
    Quat.from_euler(30, 45, 60),
]


@pytest.fixture(params=UNIT_QUATS, ids=lambda q: repr(q))
def unit_quat(request) -> Quat:
    return request.param.copy()


@pytest.fixture
def affine() -> Mat4:
    """Обратимая аффинная матрица: поворот → масштаб → перенос."""
    return Mat4.rotate_x(30) @ Mat4.scale(2, 3, 0.5) @ Mat4.translate(1, -2, 3)


@pytest.fixture
def dense() -> Mat4:
    """Обратимая матрица без нулей и структуры."""
    return Mat4([
        [4.0, 7.0, 2.0, 1.0],
        [3.0, 6.0, 1.0, 2.0],
        [2.0, 5.0, 3.0, 1.0],
        [1.0, 2.0, 2.0, 8.0],
    ])


# ----------------------------------------------------------------------
# PyTest‑fixture – чистый Config во временном каталоге
# ----------------------------------------------------------------------
@pytest.fixture
def config_path(tmp_path):
    Config.reset()
    yield tmp_path / "spatialkit.json"
    Config.reset()
