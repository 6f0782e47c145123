"""
Тесты для Complex — комплексное число в декартовой форме

Проверяет:
1. Конструирование и расширение real -> Complex
2. Арифметику с Complex, real и парой компонент
3. Коммутативность с вещественным операндом слева
4. Производные величины (conjugate, modulus, arg, inverse)
5. IEEE-семантику деления на ноль (без исключений)
6. Точное и приближённое равенство, хеширование
7. Каноническую строковую форму
"""

import dataclasses
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.core.math.complex_number import (
    Complex,
    Polar,
    as_complex,
    is_complex_like,
    to_components,
)

SAMPLES = [
    Complex(1.0, 2.0),
    Complex(-3.5, 0.25),
    Complex(0.0, -4.0),
    Complex(7.0, 0.0),
    Complex(-1e-3, 1e3),
    Complex(123.456, -654.321),
]


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestConstruction:
    """Тесты конструирования Complex"""

    def test_components_stored_as_float(self) -> None:
        """int компоненты расширяются до float"""
        z = Complex(3, 4)
        assert isinstance(z.a, float)
        assert isinstance(z.b, float)
        assert z.a == 3.0 and z.b == 4.0

    def test_default_is_zero(self) -> None:
        assert Complex() == Complex.ZERO

    def test_aliases(self) -> None:
        z = Complex(1.5, -2.5)
        assert z.real == 1.5
        assert z.imaginary == -2.5

    def test_constants(self) -> None:
        assert Complex.ZERO.equals(0.0, 0.0)
        assert Complex.ONE.equals(1.0, 0.0)
        assert Complex.I.equals(0.0, 1.0)

    def test_non_numeric_component_raises(self) -> None:
        with pytest.raises(TypeError, match="must be a real number"):
            Complex("1", 2.0)

        with pytest.raises(TypeError, match="must be a real number"):
            Complex(1.0, Complex(0.0, 1.0))

    def test_immutable(self) -> None:
        """Complex immutable (frozen=True)"""
        z = Complex(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            z.a = 5.0

    def test_from_polar(self) -> None:
        z = Complex.from_polar(2.0, math.pi / 2)
        assert z.equals_approx(0.0, 2.0)

    @pytest.mark.parametrize("r", [0.5, 1.0, 2.5, 100.0])
    @pytest.mark.parametrize("theta", [-2.5, -1.0, 0.0, 1.0, 2.5, math.pi])
    def test_polar_round_trip(self, r: float, theta: float) -> None:
        """modulus и arg восстанавливаются из полярной формы"""
        z = Complex.from_polar(r, theta)
        assert z.modulus == pytest.approx(r)
        assert z.arg == pytest.approx(theta)

    def test_to_polar(self) -> None:
        polar = Complex(0.0, 2.0).to_polar()
        assert isinstance(polar, Polar)
        assert polar.r == 2.0
        assert polar.theta == pytest.approx(math.pi / 2)


class TestConversions:
    """Тесты преобразований real/complex -> Complex"""

    def test_as_complex_real(self) -> None:
        assert as_complex(2) == Complex(2.0, 0.0)
        assert as_complex(-1.5) == Complex(-1.5, 0.0)

    def test_as_complex_builtin(self) -> None:
        assert as_complex(1 + 2j) == Complex(1.0, 2.0)

    def test_as_complex_identity(self) -> None:
        z = Complex(1.0, 2.0)
        assert as_complex(z) is z

    def test_as_complex_invalid(self) -> None:
        with pytest.raises(TypeError, match="Cannot convert str to Complex"):
            as_complex("1+2i")

    def test_to_components(self) -> None:
        assert to_components(3.0) == (3.0, 0.0)
        assert to_components(1, 2) == (1.0, 2.0)
        assert to_components(Complex(5.0, 6.0)) == (5.0, 6.0)

    def test_is_complex_like(self) -> None:
        assert is_complex_like(1)
        assert is_complex_like(1.0)
        assert is_complex_like(1j)
        assert is_complex_like(Complex.I)
        assert not is_complex_like("1")
        assert not is_complex_like(None)

    def test_builtin_complex_conversion(self) -> None:
        assert complex(Complex(1.0, -2.0)) == 1 - 2j


# =============================================================================
# ТЕСТЫ: Сложение и вычитание
# =============================================================================


class TestAdditionSubtraction:
    """Тесты сложения/вычитания"""

    @pytest.mark.parametrize("z", SAMPLES)
    @pytest.mark.parametrize("w", SAMPLES)
    def test_componentwise_addition(self, z: Complex, w: Complex) -> None:
        assert z + w == Complex(z.a + w.a, z.b + w.b)

    @pytest.mark.parametrize("z", SAMPLES)
    @pytest.mark.parametrize("w", SAMPLES)
    def test_componentwise_subtraction(self, z: Complex, w: Complex) -> None:
        assert z - w == Complex(z.a - w.a, z.b - w.b)

    @pytest.mark.parametrize("z", SAMPLES)
    def test_additive_inverse(self, z: Complex) -> None:
        """z + (-z) == 0 точно"""
        assert z + (-z) == Complex.ZERO

    def test_add_real_keeps_imaginary(self) -> None:
        assert Complex(1.0, 2.0) + 3.0 == Complex(4.0, 2.0)

    def test_add_raw_components(self) -> None:
        assert Complex(1.0, 2.0).plus(3.0, 4.0) == Complex(4.0, 6.0)
        assert Complex(1.0, 2.0).minus(3.0, 4.0) == Complex(-2.0, -2.0)

    def test_real_on_the_left(self) -> None:
        """2.0 + z == z + 2.0"""
        z = Complex(1.0, 1.0)
        assert 2.0 + z == z + 2.0 == Complex(3.0, 1.0)
        assert 2 + z == Complex(3.0, 1.0)

    def test_subtract_from_real(self) -> None:
        """r - z == -z + r"""
        assert 5.0 - Complex(1.0, 2.0) == Complex(4.0, -2.0)

    def test_builtin_complex_operand(self) -> None:
        assert Complex(1.0, 2.0) + 1j == Complex(1.0, 3.0)

    def test_unary_operators(self) -> None:
        z = Complex(1.0, -2.0)
        assert -z == Complex(-1.0, 2.0)
        assert z.negated() == -z
        assert +z is z

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            Complex(1.0, 2.0) + "x"

        with pytest.raises(TypeError):
            None - Complex(1.0, 2.0)


# =============================================================================
# ТЕСТЫ: Умножение и деление
# =============================================================================


class TestMultiplicationDivision:
    """Тесты умножения/деления"""

    def test_complex_product(self) -> None:
        """(1 + 2i)(3 + 4i) = -5 + 10i"""
        assert Complex(1.0, 2.0) * Complex(3.0, 4.0) == Complex(-5.0, 10.0)
        assert Complex(1.0, 2.0).multiply(3.0, 4.0) == Complex(-5.0, 10.0)

    def test_i_squared(self) -> None:
        assert Complex.I * Complex.I == Complex(-1.0, 0.0)

    def test_real_scaling(self) -> None:
        z = Complex(1.5, -2.0)
        assert z * 2.0 == Complex(3.0, -4.0)
        assert 2.0 * z == z * 2.0

    def test_real_scaling_does_not_mix_components(self) -> None:
        """Умножение на real — масштабирование, не комплексное произведение"""
        z = Complex(math.inf, 1.0) * 2.0
        assert z.a == math.inf
        assert z.b == 2.0

    def test_divide_by_real(self) -> None:
        assert Complex(1.0, 2.0) / 2.0 == Complex(0.5, 1.0)

    def test_divide_by_complex(self) -> None:
        assert (Complex(-5.0, 10.0) / Complex(3.0, 4.0)).equals_approx(1.0, 2.0)
        assert Complex(-5.0, 10.0).divide(3.0, 4.0).equals_approx(1.0, 2.0)

    def test_real_divided_by_complex(self) -> None:
        """r / z == z.inverse * r"""
        assert 1.0 / Complex.I == Complex(0.0, -1.0)
        assert (2.0 / Complex(1.0, 1.0)).equals_approx(1.0, -1.0)

    @pytest.mark.parametrize("z", SAMPLES)
    def test_multiplicative_inverse(self, z: Complex) -> None:
        """z * z.inverse ≈ 1"""
        assert (z * z.inverse).equals_approx(Complex.ONE)

    @pytest.mark.parametrize("z", SAMPLES)
    @pytest.mark.parametrize("w", SAMPLES)
    def test_division_undoes_multiplication(self, z: Complex, w: Complex) -> None:
        assert (z * w / w).equals_approx(z)


class TestDivisionByZero:
    """Деление на ноль: IEEE-семантика, без исключений"""

    def test_inverse_of_zero(self) -> None:
        inv = Complex.ZERO.inverse
        assert math.isnan(inv.a)
        assert math.isnan(inv.b)
        assert not inv.is_finite()

    def test_divide_by_zero_complex(self) -> None:
        result = Complex(1.0, 1.0) / Complex.ZERO
        assert not result.is_finite()

    def test_divide_by_zero_real(self) -> None:
        result = Complex(1.0, -1.0) / 0.0
        assert result.a == math.inf
        assert result.b == -math.inf

    def test_zero_component_divided_by_zero(self) -> None:
        result = Complex(0.0, 1.0) / 0.0
        assert math.isnan(result.a)
        assert result.b == math.inf

    def test_real_divided_by_zero_complex(self) -> None:
        assert not (1.0 / Complex.ZERO).is_finite()

    def test_nan_propagates(self) -> None:
        result = Complex(math.nan, 0.0) + Complex(1.0, 1.0)
        assert math.isnan(result.a)
        assert result.b == 1.0


# =============================================================================
# ТЕСТЫ: Производные величины
# =============================================================================


class TestDerivedQuantities:
    """Тесты conjugate/modulus/arg/inverse"""

    def test_conjugate(self) -> None:
        assert Complex(1.0, 2.0).conjugate == Complex(1.0, -2.0)

    @pytest.mark.parametrize("z", SAMPLES)
    def test_conjugate_involution(self, z: Complex) -> None:
        assert z.conjugate.conjugate == z

    @pytest.mark.parametrize("z", SAMPLES)
    def test_product_with_conjugate_is_real(self, z: Complex) -> None:
        """z * conj(z) == (|z|², 0)"""
        product = z * z.conjugate
        assert product.equals_approx(z.squared_modulus, 0.0)
        assert product.b == 0.0

    def test_modulus(self) -> None:
        z = Complex(3.0, 4.0)
        assert z.squared_modulus == 25.0
        assert z.modulus == 5.0
        assert abs(z) == 5.0

    def test_arg_axes(self) -> None:
        assert Complex(1.0, 0.0).arg == 0.0
        assert Complex(0.0, 1.0).arg == pytest.approx(math.pi / 2)
        assert Complex(-1.0, 0.0).arg == pytest.approx(math.pi)
        assert Complex(0.0, -1.0).arg == pytest.approx(-math.pi / 2)

    def test_arg_of_zero(self) -> None:
        """atan2(0, 0) = 0"""
        assert Complex.ZERO.arg == 0.0

    def test_inverse(self) -> None:
        assert Complex(0.0, 2.0).inverse == Complex(0.0, -0.5)

    def test_bool(self) -> None:
        assert not Complex.ZERO
        assert Complex(0.0, 1e-300)


# =============================================================================
# ТЕСТЫ: Сравнения
# =============================================================================


class TestEquality:
    """Тесты точного и приближённого равенства"""

    def test_exact_equality(self) -> None:
        assert Complex(1.0, 2.0) == Complex(1.0, 2.0)
        assert Complex(1.0, 2.0) != Complex(1.0, 2.0 + 1e-12)

    def test_equals_raw_components(self) -> None:
        assert Complex(1.0, 2.0).equals(1.0, 2.0)
        assert not Complex(1.0, 2.0).equals(1.0, 2.1)

    def test_equality_with_real(self) -> None:
        assert Complex(3.0, 0.0) == 3.0
        assert Complex(3.0, 0.0) == 3
        assert Complex(3.0, 1.0) != 3.0

    def test_equality_with_builtin_complex(self) -> None:
        assert Complex(1.0, 2.0) == 1 + 2j

    def test_equality_with_unrelated_type(self) -> None:
        assert Complex(1.0, 2.0) != "1.0 + 2.0i"
        assert Complex(1.0, 2.0) != (1.0, 2.0)

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(Complex(3.0, 0.0)) == hash(3.0)
        assert hash(Complex(1.0, 2.0)) == hash(1 + 2j)
        assert len({Complex(1, 2), Complex(1.0, 2.0)}) == 1

    def test_equals_approx(self) -> None:
        z = Complex(1.0, 2.0)
        assert z.equals_approx(Complex(1.0 + 1e-9, 2.0 - 1e-9))
        assert z.equals_approx(1.0 + 1e-9, 2.0)
        assert not z.equals_approx(1.1, 2.0)

    def test_equals_approx_with_real(self) -> None:
        assert Complex(3.0, 1e-9).equals_approx(3.0)

    def test_equals_approx_custom_eps(self) -> None:
        z = Complex(1.0, 2.0)
        assert not z.equals_approx(1.01, 2.0)
        assert z.equals_approx(1.01, 2.0, eps=0.1)


# =============================================================================
# ТЕСТЫ: Строковая форма
# =============================================================================


class TestStringForm:
    """Тесты канонической строковой формы"""

    @pytest.mark.parametrize(
        "z, expected",
        [
            (Complex(0.0, 0.0), "0.0"),
            (Complex(-0.0, 0.0), "0.0"),
            (Complex(3.0, 0.0), "3.0"),
            (Complex(-3.0, 0.0), "-3.0"),
            (Complex(0.0, 1.0), "i"),
            (Complex(0.0, 2.0), "2.0i"),
            (Complex(0.0, -1.0), "-1.0i"),
            (Complex(1.0, 2.0), "1.0 + 2.0i"),
            (Complex(1.0, -2.0), "1.0 - 2.0i"),
            (Complex(1.5, -0.5), "1.5 - 0.5i"),
            (Complex(1.0, 1.0), "1.0 + 1.0i"),
        ],
    )
    def test_canonical_form(self, z: Complex, expected: str) -> None:
        assert str(z) == expected

    def test_repr(self) -> None:
        assert repr(Complex(1.0, 2.0)) == "Complex(a=1.0, b=2.0)"


# =============================================================================
# ТЕСТЫ: Степень
# =============================================================================


class TestPowerOperator:
    """Тесты оператора ** (делегирует complex_functions.pow)"""

    def test_complex_power(self) -> None:
        assert (Complex.I**2).equals_approx(-1.0, 0.0)

    def test_real_base(self) -> None:
        assert (2.0 ** Complex(3.0, 0.0)).equals_approx(8.0, 0.0)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            Complex.I ** "2"


# =============================================================================
# ТЕСТЫ: Детерминизм
# =============================================================================


class TestDeterminism:
    """Значения immutable: параллельные вычисления дают те же результаты"""

    def test_parallel_map_matches_serial(self) -> None:
        inputs = SAMPLES * 20
        serial = [z * z.inverse + z.conjugate for z in inputs]

        with ThreadPoolExecutor(max_workers=4) as pool:
            parallel = list(pool.map(lambda z: z * z.inverse + z.conjugate, inputs))

        assert parallel == serial
