# spatialkit/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер + проверка результатов на NaN/Inf.
# ---------------------------------------------------------------

import logging

import numpy as np


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("spatialkit")

logger = init_logger()

def check_finite(value, context: str = "") -> bool:
    """
    Проверить вектор/матрицу/кватернион (или число) на NaN/Inf.

    Сами операции ядра ничего не логируют – вырождение проявляется
    как NaN/Inf. Эта функция для вызывающего кода: пишет ошибку в лог
    и возвращает False, если что‑то не так.
    """
    if hasattr(value, "m"):
        data = value.m
    elif hasattr(value, "as_np"):
        data = value.as_np()
    else:
        data = np.asarray(value, dtype=np.float32)
    if np.all(np.isfinite(data)):
        return True
    logger.error(f"Non-finite value {value!r} [{context}]")
    return False
