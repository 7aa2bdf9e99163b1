"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.

Математическое ядро конфиг не читает: допуск передаётся явно,
например ``v.is_equal(w, Config().tolerance)``.
"""

import copy
import json
import logging
from pathlib import Path

from spatialkit.math.util import MATH_TOLERANCE
from spatialkit.utils.logger import logger

DEFAULT_CONFIG = {
    "math": {"tolerance": MATH_TOLERANCE},
    "log_level": "INFO",
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "spatialkit.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить синглтон (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    @property
    def tolerance(self) -> float:
        """Допуск сравнения из секции "math"; должен быть > 0."""
        section = self["math"]
        if not isinstance(section, dict):
            raise ValueError(f"[Config] Invalid math section: {section!r}")
        value = section.get("tolerance", MATH_TOLERANCE)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"[Config] Invalid math tolerance: {value!r}")
        return float(value)

    def apply_log_level(self):
        """Выставить уровень логгера пакета из поля "log_level"."""
        level = self["log_level"]
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
        return logger.level
