"""
Математический суб‑пакет: Vec3 и вспомогательные функции.
"""

from angie.math.errors import ParseError
from angie.math.vec3 import Vec3, array_to_vec3

__all__ = ["Vec3", "array_to_vec3", "ParseError"]
