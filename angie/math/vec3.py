# angie/math/vec3.py
# ---------------------------------------------------------------
# Трёхмерный вектор (float64) на базе NumPy:
# - конструирование с «широковещанием» одного аргумента,
# - арифметика in‑place (цепочки вызовов) и операторы Python,
# - длины, расстояния, угол, проекция, нормализация,
# - свизлы и (де)сериализация в массив / строку.
# ---------------------------------------------------------------

import math
import re
from numbers import Real
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from angie.math.errors import ParseError
from angie.utils.logger import logger

NORMALIZED_EPSILON = 1e-9
DEFAULT_SEPARATOR = ","

_OPEN_CHARS = " [({"
_CLOSE_CHARS = " ])}"

# parseFloat: знак, цифры с дробной частью и экспонентой, либо Infinity
_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def _quiet():
    # IEEE‑754: inf/NaN распространяются без RuntimeWarning
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def _parse_float(token) -> float:
    """Разбор числового префикса строки; всё, что не число, – NaN."""
    if token is None:
        return math.nan
    match = _NUMBER_PREFIX.match(token.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def _format_number(value: float) -> str:
    """Текст числа как у JavaScript: 0 вместо 0.0, NaN, Infinity."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _read_slot(array: Sequence, index: int) -> float:
    # выход за границы массива даёт NaN, а не исключение
    if 0 <= index < len(array) and array[index] is not None:
        return array[index]
    return math.nan


def array_to_vec3(array: Sequence, offset: Optional[int] = 0) -> "Vec3":
    """Создать Vec3 из трёх подряд идущих элементов массива."""
    return Vec3.from_offset_array(array, offset)


class Vec3:
    """Изменяемый вектор‑3 двойной точности."""

    __slots__ = ("_v",)

    # numpy отдаёт бинарные операции со скаляром методам __r*__
    __array_ufunc__ = None

    def __init__(self, x: Optional[float] = None, y: Optional[float] = None,
                 z: Optional[float] = None):
        # только None означает «аргумент не передан»; 0 и NaN – значения
        x = 0.0 if x is None else x
        if z is None:
            z = x if y is None else 0.0
        if y is None:
            y = x
        self._v = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_offset_array(cls, array: Sequence, offset: Optional[int] = 0) -> "Vec3":
        offset = offset or 0
        return cls(
            _read_slot(array, offset),
            _read_slot(array, offset + 1),
            _read_slot(array, offset + 2),
        )

    @classmethod
    def parse(cls, text: str, separator: str = DEFAULT_SEPARATOR,
              strict: bool = False) -> "Vec3":
        """
        Создать вектор из строки вида "{1, 2, 3}".
        При strict=True пустая строка или нечисловой элемент приводят к
        ParseError вместо NaN.
        """
        if strict:
            if not text:
                raise ParseError("empty vector literal", text)
            tokens = cls._tokenize(text, separator)
            for axis, token in zip("xyz", tokens):
                if token is None:
                    raise ParseError(f"missing {axis} component", text)
                if math.isnan(_parse_float(token)):
                    raise ParseError(f"invalid number {token!r}", text)
        return cls().from_string(text, separator)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    # -----------------------------------------------------------------
    # копирование и установка значений
    # -----------------------------------------------------------------
    def clone(self) -> "Vec3":
        return Vec3(*self._v)

    def copy(self, v: "Vec3") -> "Vec3":
        """Скопировать компоненты `v` в этот вектор."""
        self._v[:] = v._v
        return self

    def set(self, x: float, y: float, z: float) -> "Vec3":
        self._v[:] = (x, y, z)
        return self

    def reset(self) -> "Vec3":
        self._v[:] = 0.0
        return self

    # -----------------------------------------------------------------
    # арифметика in‑place (возвращает self для цепочек)
    # -----------------------------------------------------------------
    def add_scalar(self, scalar: float) -> "Vec3":
        with _quiet():
            self._v += scalar
        return self

    def add_vector(self, v: "Vec3") -> "Vec3":
        with _quiet():
            self._v += v._v
        return self

    def sub_scalar(self, scalar: float) -> "Vec3":
        with _quiet():
            self._v -= scalar
        return self

    def sub_vector(self, v: "Vec3") -> "Vec3":
        with _quiet():
            self._v -= v._v
        return self

    def mul_scalar(self, scalar: float) -> "Vec3":
        with _quiet():
            self._v *= scalar
        return self

    def mul_vector(self, v: "Vec3") -> "Vec3":
        with _quiet():
            self._v *= v._v
        return self

    def div_scalar(self, scalar: float) -> "Vec3":
        with _quiet():
            self._v /= scalar
        return self

    def div_vector(self, v: "Vec3") -> "Vec3":
        with _quiet():
            self._v /= v._v
        return self

    def add(self, other: Union["Vec3", float]) -> "Vec3":
        """Сложение со скаляром или другим Vec3 (выбор по типу аргумента)."""
        if isinstance(other, Vec3):
            return self.add_vector(other)
        return self.add_scalar(self._scalar(other, "add"))

    def sub(self, other: Union["Vec3", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return self.sub_vector(other)
        return self.sub_scalar(self._scalar(other, "sub"))

    def mul(self, other: Union["Vec3", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return self.mul_vector(other)
        return self.mul_scalar(self._scalar(other, "mul"))

    def div(self, other: Union["Vec3", float]) -> "Vec3":
        if isinstance(other, Vec3):
            return self.div_vector(other)
        return self.div_scalar(self._scalar(other, "div"))

    @staticmethod
    def _scalar(value, op: str) -> float:
        if isinstance(value, Real):
            return float(value)
        raise TypeError(
            f"Vec3.{op}() expects a number or Vec3, got {type(value).__name__}"
        )

    def negate(self) -> "Vec3":
        self._v *= -1.0
        return self

    neg = negate

    def clamp(self, lo: float, hi: float) -> "Vec3":
        """Ограничить каждую компоненту отрезком [lo, hi]."""
        for i in range(3):
            if self._v[i] < lo:
                self._v[i] = lo
            elif self._v[i] > hi:
                self._v[i] = hi
        return self

    def normalize(self) -> "Vec3":
        """Нормализация на месте; нулевой вектор остаётся нулевым."""
        n = self.length()
        if n != 0.0:
            with _quiet():
                self._v /= n
        return self

    def set_length(self, l: float) -> "Vec3":
        return self.normalize().mul_scalar(l)

    # -----------------------------------------------------------------
    # операторы Python (+, -, *, / создают новый объект;
    # +=, -=, *=, /= меняют текущий)
    # -----------------------------------------------------------------
    @staticmethod
    def _supported(other) -> bool:
        return isinstance(other, (Vec3, Real))

    def __add__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.clone().add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.clone().sub(other)

    def __rsub__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return Vec3(float(other)).sub_vector(self)

    def __mul__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.clone().mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.clone().div(other)

    def __rtruediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return Vec3(float(other)).div_vector(self)

    def __iadd__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.mul(other)

    def __itruediv__(self, other):
        if not self._supported(other):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "Vec3":
        return self.clone().negate()

    # -----------------------------------------------------------------
    # производные величины (вектор не меняется)
    # -----------------------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        with _quiet():
            return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение (новый объект)."""
        with _quiet():
            return Vec3(*np.cross(self._v, other._v))

    def length(self) -> float:
        """Евклидова длина."""
        with _quiet():
            return float(np.linalg.norm(self._v))

    def length2(self) -> float:
        """Квадрат длины (без извлечения корня)."""
        with _quiet():
            return float(np.dot(self._v, self._v))

    length_sqr = length2

    def distance(self, other: "Vec3") -> float:
        with _quiet():
            return float(np.linalg.norm(other._v - self._v))

    def distance2(self, other: "Vec3") -> float:
        with _quiet():
            d = other._v - self._v
            return float(np.dot(d, d))

    distance_sqr = distance2

    def manhattan_dist(self, other: "Vec3") -> float:
        """
        «Манхэттенское» расстояние в исторической формуле библиотеки:
        |dx| + |dy| * |dz|  (а не |dx| + |dy| + |dz|).
        """
        with _quiet():
            dx, dy, dz = np.abs(other._v - self._v)
            return float(dx + dy * dz)

    def angle(self, other: "Vec3") -> float:
        """
        Угол между векторами в радианах. Операнды не меняются.
        Для вектора нулевой длины возвращается NaN.
        """
        if self.length() == 0.0 or other.length() == 0.0:
            return math.nan
        v0 = self.clone().normalize()
        v1 = other.clone().normalize()
        with _quiet():
            return float(np.arccos(v0.dot(v1)))

    def project(self, other: "Vec3") -> "Vec3":
        """
        Проекция `other` на этот вектор:
            norm(other) * (this . other) / |this|
        При |this| == 0 компоненты результата – inf/NaN.
        """
        vp = other.clone().normalize()
        with _quiet():
            factor = np.float64(self.dot(other)) / np.float64(self.length())
        return vp.mul_scalar(factor)

    def perp(self, other: "Vec3") -> "Vec3":
        # меняет и возвращает other
        return other.sub_vector(self.project(other))

    def reflect(self, normal: "Vec3") -> "Vec3":
        """Отражение относительно нормали `normal` (новый объект)."""
        return self - normal * (2.0 * self.dot(normal))

    def is_normalized(self, eps: float = NORMALIZED_EPSILON) -> bool:
        return abs(self.length() - 1.0) < eps

    def normalized(self) -> "Vec3":
        """Нормализованная копия."""
        return self.clone().normalize()

    # -----------------------------------------------------------------
    # статические функции
    # -----------------------------------------------------------------
    @staticmethod
    def max(v: "Vec3", w: "Vec3") -> "Vec3":
        """
        Покомпонентный максимум:
            max((2, 3, -5), (-1, 3, 20)) = (2, 3, 20)
        """
        return Vec3(*np.maximum(v._v, w._v))

    @staticmethod
    def min(v: "Vec3", w: "Vec3") -> "Vec3":
        """
        Покомпонентный минимум:
            min((2, 3, -5), (-1, 3, 20)) = (-1, 3, -5)
        """
        return Vec3(*np.minimum(v._v, w._v))

    @staticmethod
    def lerp(v0: "Vec3", v1: "Vec3", t: float) -> "Vec3":
        """Линейная интерполяция (v1 - v0) * t + v0, t не ограничивается."""
        with _quiet():
            return Vec3(*((v1._v - v0._v) * t + v0._v))

    @staticmethod
    def norm(v: "Vec3") -> "Vec3":
        return v.clone().normalize()

    # -----------------------------------------------------------------
    # свизлы и массивы
    # -----------------------------------------------------------------
    def xyz(self) -> List[float]:
        return [self.x, self.y, self.z]

    def xy(self) -> List[float]:
        return [self.x, self.y]

    def yxz(self) -> List[float]:
        return [self.y, self.x, self.z]

    def zyx(self) -> List[float]:
        return [self.z, self.y, self.x]

    def swizzle(self, order: str) -> List[float]:
        """Произвольный свизл: swizzle("zxy"), swizzle("xx") и т.п."""
        result = []
        for axis in order:
            if axis not in "xyz":
                raise ValueError(f"Unknown swizzle component {axis!r} in {order!r}")
            result.append(getattr(self, axis))
        return result

    def to_array(self) -> List[float]:
        return self.xyz()

    def from_array(self, array: Sequence, offset: Optional[int] = 0) -> "Vec3":
        offset = offset or 0
        self._v[:] = (
            _read_slot(array, offset),
            _read_slot(array, offset + 1),
            _read_slot(array, offset + 2),
        )
        return self

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    # -----------------------------------------------------------------
    # строки
    # -----------------------------------------------------------------
    def to_string(self) -> str:
        return "[" + ", ".join(_format_number(c) for c in self.xyz()) + "]"

    __str__ = to_string

    @staticmethod
    def _tokenize(text: str, separator: str) -> List[str]:
        tokens = text.split(separator or DEFAULT_SEPARATOR)
        tokens[0] = "".join(c for c in tokens[0] if c not in _OPEN_CHARS)
        if len(tokens) > 2:
            tokens[2] = "".join(c for c in tokens[2] if c not in _CLOSE_CHARS)
        # недостающие элементы остаются None -> NaN
        return (tokens + [None, None])[:3]

    def from_string(self, text: str, separator: str = DEFAULT_SEPARATOR) -> "Vec3":
        """
        Разобрать строку из трёх чисел, разделённых `separator`
        (по умолчанию ","), с необязательными скобками "[", "(" или "{":

            {1.5555, 5, 18.0333}
            {   2.1   , 9.9999,    10    }
            [ 3.1 , 9.9999, 10 ]
            (1,3)          -> z = NaN

        Нечисловые и отсутствующие элементы становятся NaN, чтобы ошибка
        не прошла незамеченной. Пустая строка – предупреждение в лог,
        вектор не меняется.
        """
        if not text:
            logger.warning("[Vec3] from_string: the text argument is empty")
            return self
        self._v[:] = [_parse_float(t) for t in self._tokenize(text, separator)]
        return self

    # -----------------------------------------------------------------
    # сравнение и протокол последовательности
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def is_close(self, other: "Vec3", tol: float = NORMALIZED_EPSILON) -> bool:
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=tol))

    def __iter__(self):
        return iter(self._v.tolist())

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    def __repr__(self) -> str:
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
