"""
ComplexVector — общая основа векторов с комплексными компонентами

Vec2c и Vec3c строятся покомпонентной композицией операций Complex.
Базовый класс содержит всё, что не зависит от размерности:
арифметику, скалярное произведение, длину, интерполяцию, отражения.

Скалярное произведение эрмитово: dot(u, v) = Σ u_i · conj(v_i),
поэтому v.dot(v) вещественно и равно length_squared.
"""

import math
from typing import Any, ClassVar, Iterator, TypeVar

from src.core.math.complex_number import Complex, as_complex, is_complex_like
from src.core.math.numerical_safeguards import (
    EPS_APPROX,
    clamp,
    ieee_acos,
    ieee_divide,
    is_equal_approx,
)

V = TypeVar("V", bound="ComplexVector")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComponentIndexError(IndexError):
    """Индекс компоненты вектора вне диапазона [0, размерность)."""

    pass


# =============================================================================
# BASE
# =============================================================================


class ComplexVector:
    """
    Базовый класс вектора фиксированной размерности.

    Подклассы — frozen dataclass с полями из _FIELDS.
    Вещественные компоненты расширяются до Complex при конструировании.
    """

    _FIELDS: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        for name in self._FIELDS:
            object.__setattr__(self, name, as_complex(getattr(self, name)))

    # ---------- компоненты ----------

    def components(self) -> tuple[Complex, ...]:
        return tuple(getattr(self, name) for name in self._FIELDS)

    def __iter__(self) -> Iterator[Complex]:
        return iter(self.components())

    def __len__(self) -> int:
        return len(self._FIELDS)

    def __getitem__(self, index: int) -> Complex:
        """
        Компонента по индексу: 0 -> x, 1 -> y, 2 -> z.

        Raises:
            ComponentIndexError: Если индекс вне [0, размерность)
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Component index must be int, got {type(index).__name__}")

        if index < 0 or index >= len(self._FIELDS):
            raise ComponentIndexError(
                f"{type(self).__name__} index out of range: {index} "
                f"(valid: 0..{len(self._FIELDS) - 1})"
            )
        return getattr(self, self._FIELDS[index])

    @property
    def real(self) -> tuple[float, ...]:
        """Вещественные части компонент."""
        return tuple(c.real for c in self)

    @property
    def imaginary(self) -> tuple[float, ...]:
        """Мнимые части компонент."""
        return tuple(c.imaginary for c in self)

    def _coerce(self: V, args: tuple[Any, ...]) -> V:
        """Аргументы (vector) или (x, y[, z]) -> вектор того же типа."""
        if len(args) == 1 and isinstance(args[0], type(self)):
            return args[0]

        if len(args) == len(self._FIELDS):
            return type(self)(*args)

        raise TypeError(
            f"{type(self).__name__} expects a {type(self).__name__} or "
            f"{len(self._FIELDS)} components, got {len(args)} arguments"
        )

    def _zip_with(self: V, other: V, op) -> V:
        return type(self)(*(op(s, o) for s, o in zip(self, other)))

    def _map(self: V, op) -> V:
        return type(self)(*(op(c) for c in self))

    # ---------- покомпонентная арифметика ----------

    def plus(self: V, *args: Any) -> V:
        return self._zip_with(self._coerce(args), lambda s, o: s + o)

    def minus(self: V, *args: Any) -> V:
        return self._zip_with(self._coerce(args), lambda s, o: s - o)

    def multiply(self: V, *args: Any) -> V:
        """Покомпонентное произведение."""
        return self._zip_with(self._coerce(args), lambda s, o: s * o)

    def divide(self: V, *args: Any) -> V:
        """Покомпонентное частное."""
        return self._zip_with(self._coerce(args), lambda s, o: s / o)

    def multiplied_by(self: V, k: Any) -> V:
        """Умножение на скаляр (Complex или real)."""
        return self._map(lambda c: c * k)

    def divided_by(self: V, k: Any) -> V:
        """Деление на скаляр (Complex или real)."""
        return self._map(lambda c: c / k)

    def negated(self: V) -> V:
        return self._map(lambda c: -c)

    @property
    def inverse(self: V) -> V:
        """Обратный вектор относительно покомпонентного умножения."""
        return self._map(lambda c: c.inverse)

    @property
    def conjugate(self: V) -> V:
        return self._map(lambda c: c.conjugate)

    def __add__(self, other: Any):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: Any):
        if isinstance(other, type(self)):
            return self.multiply(other)
        if is_complex_like(other):
            return self.multiplied_by(other)
        return NotImplemented

    def __rmul__(self, other: Any):
        if not is_complex_like(other):
            return NotImplemented
        return self.multiplied_by(other)

    def __truediv__(self, other: Any):
        if isinstance(other, type(self)):
            return self.divide(other)
        if is_complex_like(other):
            return self.divided_by(other)
        return NotImplemented

    def __rtruediv__(self, other: Any):
        # k / v == v.inverse * k
        if not is_complex_like(other):
            return NotImplemented
        return self.inverse.multiplied_by(other)

    def __neg__(self):
        return self.negated()

    def __pos__(self):
        return self

    # ---------- метрика ----------

    def dot(self, *args: Any) -> Complex:
        """Эрмитово скалярное произведение Σ self_i · conj(other_i)."""
        other = self._coerce(args)
        return sum((s * o.conjugate for s, o in zip(self, other)), Complex.ZERO)

    @property
    def length_squared(self) -> float:
        """
        Квадрат длины: Σ |c_i|².

        Для сравнения векторов по длине дешевле, чем length.
        """
        return sum(c.squared_modulus for c in self)

    @property
    def length(self) -> float:
        return math.sqrt(self.length_squared)

    @property
    def normalized(self: V) -> V:
        """Вектор единичной длины того же направления; для нуля — NaN."""
        return self.divided_by(self.length)

    def is_normalized(self, eps: float = EPS_APPROX) -> bool:
        return is_equal_approx(self.length_squared, 1.0, eps)

    def limit_length(self: V, limit: float = 1.0) -> V:
        """Вектор той же направленности длиной не больше limit."""
        length = self.length
        if length > 0.0 and limit < length:
            return self.divided_by(length).multiplied_by(limit)
        return self

    def abs(self) -> tuple[float, ...]:
        """
        Модули компонент.

        Не путать с length.
        """
        return tuple(c.modulus for c in self)

    def distance_squared_to(self, *args: Any) -> float:
        return (self._coerce(args) - self).length_squared

    def distance_to(self, *args: Any) -> float:
        return (self._coerce(args) - self).length

    def angle_to(self, *args: Any) -> float:
        """
        Угол (радианы) между векторами: acos(Re(dot) / (|u|·|v|)).

        Косинус ограничивается [-1, 1], чтобы ошибка округления
        не выводила его из области acos. Для нулевого вектора — NaN.
        """
        other = self._coerce(args)
        cosine = ieee_divide(self.dot(other).real, self.length * other.length)
        return ieee_acos(clamp(cosine, -1.0, 1.0))

    # ---------- интерполяция ----------

    def lerp(self: V, to: V, weight: float) -> V:
        """Линейная интерполяция, weight в [0, 1]."""
        return self + (to - self) * weight

    def move_toward(self: V, to: V, delta: float) -> V:
        """Сдвиг в сторону to на delta, не дальше to."""
        vd = to - self
        length = vd.length
        if length <= delta:
            return to
        return self + vd.divided_by(length).multiplied_by(delta)

    def direction_to(self: V, *args: Any) -> V:
        """(other - self).normalized"""
        return (self._coerce(args) - self).normalized

    # ---------- проекции и отражения ----------

    def project(self: V, *args: Any) -> V:
        other = self._coerce(args)
        return other * (self.dot(other) / other.length_squared)

    def reflect(self: V, *args: Any) -> V:
        """Отражение относительно нормали n: self - n · 2(self·n)."""
        n = self._coerce(args)
        return self - n * (self.dot(n) * 2.0)

    def bounce(self: V, *args: Any) -> V:
        """'Отскок' от плоскости с нормалью n."""
        return -self.reflect(*args)

    def slide(self: V, *args: Any) -> V:
        """Скольжение вдоль плоскости с нормалью n."""
        n = self._coerce(args)
        return self - n * self.dot(n)

    # ---------- сравнения ----------

    def equals(self, *args: Any) -> bool:
        other = self._coerce(args)
        return all(s == o for s, o in zip(self, other))

    def equals_approx(self, *args: Any, eps: float = EPS_APPROX) -> bool:
        other = self._coerce(args)
        return all(s.equals_approx(o, eps=eps) for s, o in zip(self, other))

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self) + ")"
