"""
Core math modules

Комплексное число, элементарные функции комплексного переменного
и вещественные примитивы с IEEE-754 семантикой.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_APPROX,
    # Epsilon comparisons
    is_equal_approx,
    is_zero_approx,
    validate_eps,
    # Utilities
    clamp,
    is_valid_float,
    # IEEE-754 primitives
    ieee_acos,
    ieee_atan2,
    ieee_cos,
    ieee_cosh,
    ieee_divide,
    ieee_exp,
    ieee_log,
    ieee_sin,
    ieee_sinh,
    ieee_sqrt,
    ieee_tan,
    ieee_tanh,
)

# Complex value type
from src.core.math.complex_number import (
    Complex,
    ComplexLike,
    Polar,
    as_complex,
    is_complex_like,
    to_components,
)

# Tolerance config
from src.core.math.tolerance import DEFAULT_TOLERANCE, Tolerance

# Elementary functions (модуль целиком: abs и pow затеняют builtins)
from src.core.math import complex_functions

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_APPROX",
    # Numerical Safeguards — Epsilon comparisons
    "is_equal_approx",
    "is_zero_approx",
    "validate_eps",
    # Numerical Safeguards — Utilities
    "clamp",
    "is_valid_float",
    # Numerical Safeguards — IEEE-754 primitives
    "ieee_acos",
    "ieee_atan2",
    "ieee_cos",
    "ieee_cosh",
    "ieee_divide",
    "ieee_exp",
    "ieee_log",
    "ieee_sin",
    "ieee_sinh",
    "ieee_sqrt",
    "ieee_tan",
    "ieee_tanh",
    # Complex — Types
    "Complex",
    "ComplexLike",
    "Polar",
    # Complex — Functions
    "as_complex",
    "is_complex_like",
    "to_components",
    # Tolerance
    "DEFAULT_TOLERANCE",
    "Tolerance",
    # Elementary functions
    "complex_functions",
]
