# angie/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – готовый объект logging.Logger (с level INFO)
    * init_logger – настройка logging для пакета
    * Config      – JSON‑конфигурация
"""

from .logger import logger, init_logger
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "init_logger", "Config", "DEFAULT_CONFIG"]
