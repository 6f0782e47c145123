"""
Complex — комплексное число в декартовой форме a + ib

Immutable value-тип с арифметикой, сравнениями и производными величинами
(модуль, аргумент, сопряжённое, обратное).

Операнды:
- Complex
- вещественное число (numbers.Real) — расширяется до (r, 0)
- встроенный complex — расширяется до (z.real, z.imag)

Вещественное число может стоять слева от оператора: 2.0 + z, 2.0 * z, 1.0 / z.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляры никогда не изменяются; каждая операция возвращает новое значение
2. Деление на ноль НЕ бросает исключение: результат содержит Inf/NaN (IEEE-754)
3. Деление на Complex выполняется как умножение на inverse
4. == — точное покомпонентное сравнение, equals_approx — с толерантностью
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, ClassVar, NamedTuple, Union

from src.core.math.numerical_safeguards import (
    EPS_APPROX,
    ieee_atan2,
    ieee_cos,
    ieee_divide,
    ieee_sin,
    is_equal_approx,
    is_valid_float,
)

ComplexLike = Union["Complex", complex, float, int]


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


class Polar(NamedTuple):
    """Полярная форма: модуль r и аргумент theta в (-π, π]."""

    r: float
    theta: float


def is_complex_like(value: Any) -> bool:
    """Может ли значение участвовать в комплексной арифметике."""
    return isinstance(value, (Complex, Real, complex))


def as_complex(value: ComplexLike) -> "Complex":
    """
    Расширение значения до Complex.

    Args:
        value: Complex, вещественное число или встроенный complex

    Returns:
        Complex (тот же объект, если value уже Complex)

    Raises:
        TypeError: Если значение не является числом

    Examples:
        >>> as_complex(2)
        Complex(a=2.0, b=0.0)
        >>> as_complex(1 + 2j)
        Complex(a=1.0, b=2.0)
    """
    if isinstance(value, Complex):
        return value
    if isinstance(value, Real):
        return Complex(float(value), 0.0)
    if isinstance(value, complex):
        return Complex(value.real, value.imag)
    raise TypeError(f"Cannot convert {type(value).__name__} to Complex")


def to_components(x: ComplexLike, y: float | None = None) -> tuple[float, float]:
    """
    Нормализация аргументов вида (z) или (a, b) в пару float.

    Examples:
        >>> to_components(3.0)
        (3.0, 0.0)
        >>> to_components(1.0, 2.0)
        (1.0, 2.0)
    """
    if y is not None:
        return float(x), float(y)
    z = as_complex(x)
    return z.a, z.b


# =============================================================================
# COMPLEX
# =============================================================================


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Комплексное число a + ib.

    Immutable (frozen=True). Компоненты всегда хранятся как float.

    Методы plus/minus/multiply/divide/equals/equals_approx принимают
    либо одно значение (Complex или real), либо две вещественные компоненты:

        >>> Complex(1, 2).plus(3, 4)
        Complex(a=4.0, b=6.0)
        >>> Complex(1, 2).plus(Complex(3, 4))
        Complex(a=4.0, b=6.0)
    """

    a: float = 0.0
    b: float = 0.0

    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    I: ClassVar["Complex"]

    def __post_init__(self) -> None:
        for name in ("a", "b"):
            value = getattr(self, name)
            if not isinstance(value, Real):
                raise TypeError(
                    f"Complex component '{name}' must be a real number, "
                    f"got {type(value).__name__}"
                )
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        """
        Конструктор из полярной формы: (r·cos θ, r·sin θ).

        Args:
            r: Модуль
            theta: Аргумент (радианы)
        """
        return cls(r * ieee_cos(theta), r * ieee_sin(theta))

    # ---------- компоненты ----------

    @property
    def real(self) -> float:
        """Вещественная часть (alias для a)."""
        return self.a

    @property
    def imaginary(self) -> float:
        """Мнимая часть (alias для b)."""
        return self.b

    # ---------- сложение / вычитание ----------

    def plus(self, x: ComplexLike, y: float | None = None) -> "Complex":
        a, b = to_components(x, y)
        return Complex(self.a + a, self.b + b)

    def minus(self, x: ComplexLike, y: float | None = None) -> "Complex":
        a, b = to_components(x, y)
        return Complex(self.a - a, self.b - b)

    def negated(self) -> "Complex":
        """Аддитивная обратная: -a - ib."""
        return Complex(-self.a, -self.b)

    # ---------- умножение / деление ----------

    def multiply(self, x: ComplexLike, y: float | None = None) -> "Complex":
        """
        Произведение.

        На вещественное число — масштабирование обеих компонент.
        На комплексное (c, d) — (a*c - b*d, a*d + b*c).
        """
        if y is None and isinstance(x, Real):
            r = float(x)
            return Complex(self.a * r, self.b * r)

        c, d = to_components(x, y)
        return Complex(self.a * c - self.b * d, self.a * d + self.b * c)

    def divide(self, x: ComplexLike, y: float | None = None) -> "Complex":
        """
        Частное.

        На вещественное число — покомпонентное IEEE-деление.
        На комплексное z — умножение на z.inverse.

        Деление на ноль даёт Inf/NaN компоненты, исключение не бросается.
        Вблизи нуля погрешность округления усиливается так же, как
        у наивного деления float на малый знаменатель.
        """
        if y is None and isinstance(x, Real):
            r = float(x)
            return Complex(ieee_divide(self.a, r), ieee_divide(self.b, r))

        c, d = to_components(x, y)
        return self.multiply(Complex(c, d).inverse)

    # ---------- производные величины ----------

    @property
    def conjugate(self) -> "Complex":
        """Сопряжённое: a - ib."""
        return Complex(self.a, -self.b)

    @property
    def squared_modulus(self) -> float:
        """
        Квадрат модуля a² + b².

        Не требует sqrt; предпочтителен для сравнений по модулю.
        """
        return self.a * self.a + self.b * self.b

    @property
    def modulus(self) -> float:
        """Модуль (абсолютное значение), расстояние до начала координат."""
        return math.sqrt(self.squared_modulus)

    @property
    def arg(self) -> float:
        """Аргумент atan2(b, a) в диапазоне (-π, π]; arg(0) = 0."""
        return ieee_atan2(self.b, self.a)

    @property
    def inverse(self) -> "Complex":
        """
        Мультипликативная обратная: conjugate / squared_modulus.

        Для нуля результат не конечен (NaN), исключение не бросается.
        """
        return self.conjugate.divide(self.squared_modulus)

    def to_polar(self) -> Polar:
        """Полярная форма (modulus, arg)."""
        return Polar(self.modulus, self.arg)

    def is_finite(self) -> bool:
        """True если обе компоненты конечны (не NaN, не Inf)."""
        return is_valid_float(self.a) and is_valid_float(self.b)

    # ---------- сравнения ----------

    def equals(self, x: ComplexLike, y: float | None = None) -> bool:
        """Точное покомпонентное равенство (без толерантности)."""
        a, b = to_components(x, y)
        return self.a == a and self.b == b

    def equals_approx(
        self,
        x: ComplexLike,
        y: float | None = None,
        *,
        eps: float = EPS_APPROX,
    ) -> bool:
        """
        Приближённое покомпонентное равенство.

        Args:
            x: Complex/real или вещественная часть
            y: Мнимая часть (если x — вещественная часть)
            eps: Толерантность (default: EPS_APPROX)
        """
        a, b = to_components(x, y)
        return is_equal_approx(self.a, a, eps) and is_equal_approx(self.b, b, eps)

    # ---------- операторы ----------

    def __add__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: Any) -> "Complex":
        # r - z == -z + r
        if not is_complex_like(other):
            return NotImplemented
        return self.negated().plus(other)

    def __mul__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> "Complex":
        # r / z == z.inverse * r
        if not is_complex_like(other):
            return NotImplemented
        return self.inverse.multiply(other)

    def __pow__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        # complex_functions импортирует этот модуль
        from src.core.math import complex_functions

        return complex_functions.pow(self, other)

    def __rpow__(self, other: Any) -> "Complex":
        if not is_complex_like(other):
            return NotImplemented
        from src.core.math import complex_functions

        return complex_functions.pow(other, self)

    def __neg__(self) -> "Complex":
        return self.negated()

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self) -> float:
        return self.modulus

    def __bool__(self) -> bool:
        return self.a != 0.0 or self.b != 0.0

    def __complex__(self) -> complex:
        return complex(self.a, self.b)

    def __eq__(self, other: object) -> bool:
        if not is_complex_like(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Согласовано с == для real и встроенного complex
        return hash(complex(self.a, self.b))

    def __str__(self) -> str:
        """
        Каноническая строковая форма.

        Examples:
            >>> str(Complex(0, 0)), str(Complex(3, 0)), str(Complex(0, 1))
            ('0.0', '3.0', 'i')
            >>> str(Complex(0, 2)), str(Complex(1, 2)), str(Complex(1, -2))
            ('2.0i', '1.0 + 2.0i', '1.0 - 2.0i')
        """
        if self.a == 0.0 and self.b == 0.0:
            return "0.0"
        if self.b == 0.0:
            return repr(self.a)
        if self.a == 0.0:
            if self.b == 1.0:
                return "i"
            return f"{self.b!r}i"

        sign = "+" if self.b > 0.0 else "-"
        return f"{self.a!r} {sign} {abs(self.b)!r}i"


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)
