"""
Tolerance — конфигурация приближённого равенства

Immutable Pydantic модель, задающая epsilon для приближённых сравнений.
По умолчанию используется EPS_APPROX; для тестов и вычислений с иной
точностью создаётся отдельный экземпляр:

    >>> loose = Tolerance(epsilon=1e-3)
    >>> loose.approx(1.0, 1.0005)
    True
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.complex_number import as_complex
from src.core.math.numerical_safeguards import (
    EPS_APPROX,
    is_equal_approx,
    is_valid_float,
)


class Tolerance(BaseModel):
    """
    Толерантность для приближённого равенства.

    Immutable модель (frozen=True): экземпляр можно разделять между потоками.
    """

    epsilon: float = Field(
        default=EPS_APPROX,
        gt=0,
        description="Толерантность покомпонентного сравнения",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("epsilon")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Проверка, что epsilon конечен"""
        if not is_valid_float(v):
            raise ValueError(f"epsilon must be finite, got {v}")
        return v

    def approx(self, x: float, y: float) -> bool:
        """Приближённое равенство двух float."""
        return is_equal_approx(x, y, eps=self.epsilon)

    def approx_complex(self, z: Any, w: Any) -> bool:
        """Приближённое равенство двух комплексных чисел (или Complex и real)."""
        return as_complex(z).equals_approx(w, eps=self.epsilon)

    def approx_vector(self, v: Any, u: Any) -> bool:
        """Приближённое равенство двух комплексных векторов одной размерности."""
        return v.equals_approx(u, eps=self.epsilon)


DEFAULT_TOLERANCE = Tolerance()
