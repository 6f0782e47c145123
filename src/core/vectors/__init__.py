"""
Complex vectors

Векторы фиксированной размерности с компонентами Complex.
"""

from src.core.vectors.complex_vector import ComplexVector, ComponentIndexError
from src.core.vectors.vec2c import Vec2c
from src.core.vectors.vec3c import Vec3c

__all__ = [
    # Base
    "ComplexVector",
    "ComponentIndexError",
    # Vectors
    "Vec2c",
    "Vec3c",
]
