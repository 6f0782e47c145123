"""
Numerical Safeguards — Real Math Primitives

Модуль содержит вещественные примитивы, на которых строится комплексная арифметика:
- Epsilon-сравнения float (приближённое равенство)
- IEEE-754 тотальные версии функций из math (без исключений)
- Проверка конечности и clamp

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна ieee_* функция не бросает исключение на float входе
2. NaN/Inf НЕ санитизируются: результат совпадает с IEEE-754 семантикой
3. Приближённое равенство симметрично для точных совпадений (включая Inf)
4. Все операции детерминированы и воспроизводимы

Модуль math в Python бросает ZeroDivisionError/OverflowError/ValueError там,
где IEEE-754 возвращает Inf или NaN. Функции ieee_* восстанавливают
IEEE-поведение.
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для приближённого равенства компонент
# Используется в is_equal_approx и во всех equals_approx
EPS_APPROX: Final[float] = 1e-6

_INF: Final[float] = math.inf
_NAN: Final[float] = math.nan


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def validate_eps(eps: float) -> None:
    """
    Валидация epsilon-параметра.

    Raises:
        ValueError: Если eps <= 0 или NaN/Inf
    """
    if not is_valid_float(eps):
        raise ValueError(f"eps must be a valid float (not NaN/Inf), got {eps}")

    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")


def is_equal_approx(x: float, y: float, eps: float = EPS_APPROX) -> bool:
    """
    Приближённое равенство двух float.

    Алгоритм:
        x == y                             -> True (включая одинаковые Inf)
        abs(x - y) < max(eps, eps * abs(x)) -> True

    Толерантность относительная для больших значений и абсолютная
    вблизи нуля.

    Args:
        x: Первое значение
        y: Второе значение
        eps: Толерантность (default: EPS_APPROX)

    Returns:
        True если значения приближённо равны

    Examples:
        >>> is_equal_approx(1.0, 1.0 + 1e-9)
        True
        >>> is_equal_approx(1.0, 1.1)
        False
        >>> is_equal_approx(1e10, 1e10 + 1.0)
        True
        >>> is_equal_approx(float('inf'), float('inf'))
        True
    """
    validate_eps(eps)

    if x == y:
        return True

    tolerance = eps * abs(x)
    if tolerance < eps:
        tolerance = eps

    return abs(x - y) < tolerance


def is_zero_approx(x: float, eps: float = EPS_APPROX) -> bool:
    """
    Проверка, близко ли значение к нулю.

    Returns:
        True если abs(x) < eps
    """
    validate_eps(eps)
    return abs(x) < eps


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    NaN проходит без изменений.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    if math.isnan(value):
        return value

    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float с семантикой IEEE-754.

    В отличие от оператора `/` не бросает ZeroDivisionError:
    - x / ±0.0 -> ±Inf (знак = произведение знаков)
    - 0.0 / 0.0 -> NaN
    - NaN / 0.0 -> NaN

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return _NAN

    return math.copysign(_INF, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# IEEE-754 ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def ieee_sqrt(x: float) -> float:
    """Квадратный корень: NaN для x < 0 вместо ValueError."""
    if x < 0.0:
        return _NAN
    return math.sqrt(x)


def ieee_exp(x: float) -> float:
    """Экспонента: +Inf при переполнении вместо OverflowError."""
    try:
        return math.exp(x)
    except OverflowError:
        return _INF


def ieee_log(x: float) -> float:
    """
    Натуральный логарифм.

    - log(±0.0) -> -Inf
    - log(x < 0) -> NaN
    - log(+Inf) -> +Inf
    """
    if x == 0.0:
        return -_INF
    if x < 0.0:
        return _NAN
    return math.log(x)


def ieee_sin(x: float) -> float:
    """Синус: NaN для ±Inf."""
    if math.isinf(x):
        return _NAN
    return math.sin(x)


def ieee_cos(x: float) -> float:
    """Косинус: NaN для ±Inf."""
    if math.isinf(x):
        return _NAN
    return math.cos(x)


def ieee_tan(x: float) -> float:
    """Тангенс: NaN для ±Inf. Полюса (π/2 + kπ) не обрабатываются особо."""
    if math.isinf(x):
        return _NAN
    return math.tan(x)


def ieee_sinh(x: float) -> float:
    """Гиперболический синус: ±Inf при переполнении."""
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(_INF, x)


def ieee_cosh(x: float) -> float:
    """Гиперболический косинус: +Inf при переполнении."""
    try:
        return math.cosh(x)
    except OverflowError:
        return _INF


def ieee_tanh(x: float) -> float:
    return math.tanh(x)


def ieee_atan2(y: float, x: float) -> float:
    """
    atan2 в диапазоне (-π, π].

    math.atan2 уже тотальна и следует C99 (atan2(0, 0) = 0).
    """
    return math.atan2(y, x)


def ieee_acos(x: float) -> float:
    """Арккосинус: NaN вне [-1, 1] вместо ValueError."""
    if x < -1.0 or x > 1.0:
        return _NAN
    return math.acos(x)
