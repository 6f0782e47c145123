"""
Vec2c — двумерный вектор с комплексными компонентами
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from src.core.math.complex_number import Complex
from src.core.vectors.complex_vector import ComplexVector


@dataclass(frozen=True)
class Vec2c(ComplexVector):
    """
    2D комплексный вектор (x, y).

    Immutable. Вещественные компоненты расширяются до Complex:

        >>> Vec2c(1.0, Complex(0.0, 1.0))
        Vec2c(x=Complex(a=1.0, b=0.0), y=Complex(a=0.0, b=1.0))
    """

    x: Complex
    y: Complex

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y")
    ZERO: ClassVar["Vec2c"]

    def cross(self, *args: Any) -> Complex:
        """
        Псевдоскалярное произведение: x · v.y - y · v.x.

        Args:
            *args: Vec2c или компоненты (x, y)
        """
        v = self._coerce(args)
        return self.x * v.y - self.y * v.x


Vec2c.ZERO = Vec2c(0.0, 0.0)
