"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path

from angie.utils.logger import logger

DEFAULT_CONFIG = {
    "math": {"separator": ",", "normalized_epsilon": 1e-9},
    "logging": {"level": "INFO"},
}


class Config:
    """Настройки пакета, хранящиеся в JSON‑файле."""

    def __init__(self, path: str = "angie.json"):
        self.path = Path(path)
        self._load()

    def _read(self):
        """Прочитать JSON‑объект из файла; None, если файла нет или он испорчен."""
        if not self.path.is_file():
            logger.info(f"[Config] {self.path} not found – writing defaults.")
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Cannot parse {self.path}: {exc}")
            return None
        if not isinstance(data, dict):
            logger.error(f"[Config] {self.path} must hold a JSON object, "
                         f"got {type(data).__name__}")
            return None
        logger.info(f"[Config] Loaded {self.path}.")
        return data

    def _load(self):
        data = self._read()
        if data is None:
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()
        else:
            self.data = data

    def save(self):
        try:
            self.path.write_text(json.dumps(self.data, indent=4), encoding="utf-8")
        except OSError as exc:
            logger.error(f"[Config] Cannot write {self.path}: {exc}")
        else:
            logger.debug(f"[Config] Saved {self.path}.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    # -----------------------------------------------------------------
    # удобные геттеры для math / logging
    # -----------------------------------------------------------------
    def _section(self, key) -> dict:
        # "math": null в JSON равносилен отсутствию секции
        return self[key] or {}

    @property
    def separator(self) -> str:
        return self._section("math").get("separator", DEFAULT_CONFIG["math"]["separator"])

    @property
    def normalized_epsilon(self) -> float:
        return float(self._section("math").get(
            "normalized_epsilon", DEFAULT_CONFIG["math"]["normalized_epsilon"]))

    def apply_logging(self):
        """Выставить уровень логгера пакета из секции "logging"."""
        level = self._section("logging").get("level", "INFO")
        logger.setLevel(level)
        return logger
