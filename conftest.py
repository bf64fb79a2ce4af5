# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов angie.
"""

import pytest

from angie.math.vec3 import Vec3
from angie.utils.logger import logger


@pytest.fixture
def v123() -> Vec3:
    """Свежий вектор (1, 2, 3) для каждого теста."""
    return Vec3(1.0, 2.0, 3.0)


@pytest.fixture
def restore_logger_level():
    """Возвращает уровень логгера пакета после теста."""
    level = logger.level
    yield logger
    logger.setLevel(level)
