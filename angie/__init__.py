"""
angie – небольшая библиотека векторной математики для графики и геометрии.
"""

from angie.utils import logger, Config
from angie.math import Vec3, array_to_vec3, ParseError

__version__ = "0.1.0"

__all__ = [
    "logger",
    "Config",
    "Vec3",
    "array_to_vec3",
    "ParseError",
]
