"""
Complex Functions — элементарные функции комплексного переменного

Stateless функции над Complex или парой компонент (a, b):
- Полярная форма: from_polar, abs
- Корни: sqrt (главная ветвь)
- Экспонента и логарифм: exp, log (главная ветвь), pow
- Тригонометрия: sin, cos, tan

Каждая функция принимает либо одно значение (Complex, real, complex),
либо две вещественные компоненты:

    >>> sqrt(-4.0, 0.0)
    Complex(a=0.0, b=2.0)
    >>> sqrt(Complex(-4.0, 0.0))
    Complex(a=0.0, b=2.0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции тотальны на float: вместо исключений возвращаются Inf/NaN
2. log и pow используют главную ветвь логарифма, arg в (-π, π]
3. Входные значения не изменяются
"""

from numbers import Real

from src.core.math.complex_number import (
    Complex,
    ComplexLike,
    as_complex,
    to_components,
)
from src.core.math.numerical_safeguards import (
    EPS_APPROX,
    ieee_atan2,
    ieee_cos,
    ieee_cosh,
    ieee_exp,
    ieee_log,
    ieee_sin,
    ieee_sinh,
    ieee_sqrt,
    ieee_tan,
    ieee_tanh,
    is_equal_approx,
)

__all__ = [
    "from_polar",
    "abs",
    "sqrt",
    "exp",
    "log",
    "pow",
    "sin",
    "cos",
    "tan",
]


# =============================================================================
# ПОЛЯРНАЯ ФОРМА
# =============================================================================


def from_polar(r: float, theta: float) -> Complex:
    """
    Перевод из полярной формы в декартову: (r·cos θ, r·sin θ).

    Args:
        r: Модуль
        theta: Аргумент (радианы)
    """
    return Complex.from_polar(r, theta)


def abs(a: ComplexLike, b: float | None = None) -> float:
    """
    Модуль комплексного числа: sqrt(a² + b²).

    Examples:
        >>> abs(3.0, 4.0)
        5.0
        >>> abs(Complex(3.0, 4.0))
        5.0
    """
    a, b = to_components(a, b)
    return ieee_sqrt(a * a + b * b)


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def sqrt(
    a: ComplexLike,
    b: float | None = None,
    *,
    eps: float = EPS_APPROX,
) -> Complex:
    """
    Главный квадратный корень.

    Алгоритм:
        a < 0 и b ≈ 0  -> (0, sqrt(-a))
        a = b = 0      -> 0
        иначе:
            r  = abs(a, b)
            zr = (a + r, b)
            result = zr / |zr| * sqrt(r)

    Args:
        a: Complex/real или вещественная часть
        b: Мнимая часть (если a — вещественная часть)
        eps: Толерантность проверки b ≈ 0 (default: EPS_APPROX)

    Returns:
        Корень с неотрицательной вещественной частью
    """
    a, b = to_components(a, b)

    if a < 0.0 and is_equal_approx(b, 0.0, eps):
        return Complex(0.0, ieee_sqrt(-a))

    r = abs(a, b)
    if r == 0.0:
        return Complex.ZERO

    zr = Complex(a + r, b)
    return zr / zr.modulus * ieee_sqrt(r)


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМ
# =============================================================================


def exp(a: ComplexLike, b: float | None = None) -> Complex:
    """
    Экспонента: e^a · (cos b, sin b).

    Examples:
        >>> exp(0.0, 0.0)
        Complex(a=1.0, b=0.0)
    """
    a, b = to_components(a, b)
    return Complex(ieee_cos(b), ieee_sin(b)) * ieee_exp(a)


def log(a: ComplexLike, b: float | None = None) -> Complex:
    """
    Натуральный логарифм (главная ветвь): (ln|z|, atan2(b, a)).

    log(0) = (-Inf, 0).
    """
    a, b = to_components(a, b)
    return Complex(ieee_log(abs(a, b)), ieee_atan2(b, a))


def pow(base: ComplexLike, exponent: ComplexLike) -> Complex:
    """
    Степень base^exponent через главную ветвь логарифма основания.

    - Вещественное основание x: exp(z · ln x)
    - Комплексное основание w:  exp(z · (ln|w|, arg w))

    Для отрицательного вещественного основания ln x = NaN; чтобы получить
    главное значение, основание передаётся как Complex.

    Args:
        base: Основание
        exponent: Показатель

    Examples:
        >>> pow(Complex(0.0, 1.0), 2).equals_approx(-1.0, 0.0)
        True
    """
    z = as_complex(exponent)

    if isinstance(base, Real):
        return exp(z * ieee_log(float(base)))

    w = as_complex(base)
    return exp(z * Complex(ieee_log(w.modulus), w.arg))


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(a: ComplexLike, b: float | None = None) -> Complex:
    """Синус: (sin a · cosh b, cos a · sinh b)."""
    a, b = to_components(a, b)
    return Complex(ieee_sin(a) * ieee_cosh(b), ieee_cos(a) * ieee_sinh(b))


def cos(a: ComplexLike, b: float | None = None) -> Complex:
    """Косинус: (cos a · cosh b, -sin a · sinh b)."""
    a, b = to_components(a, b)
    return Complex(ieee_cos(a) * ieee_cosh(b), -ieee_sin(a) * ieee_sinh(b))


def tan(a: ComplexLike, b: float | None = None) -> Complex:
    """
    Тангенс: (tan a, tanh b) / (1, -tan a · tanh b).

    Вычисляется через комплексное деление. Полюса tan a
    (a = π/2 + kπ) не обрабатываются особо.
    """
    a, b = to_components(a, b)
    tan_a = ieee_tan(a)
    tanh_b = ieee_tanh(b)
    return Complex(tan_a, tanh_b).divide(1.0, -tan_a * tanh_b)
