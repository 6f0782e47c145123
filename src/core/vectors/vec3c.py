"""
Vec3c — трёхмерный вектор с комплексными компонентами
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from src.core.math.complex_number import Complex, ComplexLike
from src.core.vectors.complex_vector import ComplexVector
from src.core.vectors.vec2c import Vec2c


@dataclass(frozen=True)
class Vec3c(ComplexVector):
    """
    3D комплексный вектор (x, y, z).

    Immutable. Вещественные компоненты расширяются до Complex.
    """

    x: Complex
    y: Complex
    z: Complex

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z")
    ZERO: ClassVar["Vec3c"]

    @classmethod
    def from_xy(cls, xy: Vec2c, z: ComplexLike) -> "Vec3c":
        """Конструктор из 2D вектора (x, y) и компоненты z."""
        return cls(xy.x, xy.y, z)

    @property
    def xy(self) -> Vec2c:
        """2D вектор из компонент x и y."""
        return Vec2c(self.x, self.y)

    def cross(self, *args: Any) -> "Vec3c":
        """
        Векторное произведение.

        Args:
            *args: Vec3c, компоненты (x, y, z) или Vec2c
                (считается лежащим в плоскости xy, z = 0)

        Returns:
            (y·vz - z·vy, vx·z - vz·x, x·vy - y·vx)
        """
        if len(args) == 1 and isinstance(args[0], Vec2c):
            v = Vec3c.from_xy(args[0], 0.0)
        else:
            v = self._coerce(args)

        return Vec3c(
            self.y * v.z - self.z * v.y,
            v.x * self.z - v.z * self.x,
            self.x * v.y - self.y * v.x,
        )


Vec3c.ZERO = Vec3c(0.0, 0.0, 0.0)
