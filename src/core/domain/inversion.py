"""
Inversion Request / Report — модели внешней границы инверсии

Immutable Pydantic модели, через которые внешний слой (UI, сервис)
передаёт матрицу и получает результат.
Полная совместимость с JSON Schema (contracts/schema/inversion_request.json,
contracts/schema/inversion_report.json).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.rational import DisplayFormat


# =============================================================================
# ENUMS
# =============================================================================


class InversionStatus(str, Enum):
    """Итог обработки запроса."""

    INVERTIBLE = "INVERTIBLE"
    SINGULAR = "SINGULAR"
    INVALID = "INVALID"


# =============================================================================
# REQUEST
# =============================================================================


class InversionRequest(BaseModel):
    """
    Запрос на инверсию.

    Форма матрицы здесь не проверяется: квадратность, NaN/Inf и нулевая
    матрица проверяются в validate(), отказ возвращается как INVALID report.
    """

    matrix: list[list[float]] = Field(..., description="Матрица, строки снаружи")
    display_format: DisplayFormat = Field(
        DisplayFormat.DECIMAL, description="Режим отображения (decimal/fraction)"
    )

    model_config = {"frozen": True}


# =============================================================================
# REPORT
# =============================================================================


class InversionReport(BaseModel):
    """
    Результат обработки запроса.

    inverse и rendered заполнены только при status=INVERTIBLE.
    reason заполнен при SINGULAR/INVALID.
    """

    status: InversionStatus = Field(..., description="INVERTIBLE/SINGULAR/INVALID")
    size: int = Field(..., ge=0, description="Число строк входной матрицы")
    display_format: DisplayFormat = Field(..., description="Режим отображения")
    reason: Optional[str] = Field(None, description="Причина отказа")
    rank: Optional[int] = Field(None, ge=0, description="Ранг левого блока после RREF")
    inverse: Optional[list[list[float]]] = Field(None, description="Обратная матрица")
    rendered: Optional[list[list[str]]] = Field(
        None, description="Строковое представление inverse в display_format"
    )

    model_config = {"frozen": True}

    @field_validator("reason")
    @classmethod
    def validate_reason(cls, v: Optional[str]) -> Optional[str]:
        """reason не может быть пустой строкой."""
        if v is not None and not v:
            raise ValueError("reason must be non-empty when provided")
        return v

    @model_validator(mode="after")
    def validate_payload(self) -> "InversionReport":
        """inverse/rendered присутствуют тогда и только тогда, когда INVERTIBLE."""
        has_payload = self.inverse is not None and self.rendered is not None
        if self.status == InversionStatus.INVERTIBLE:
            if not has_payload:
                raise ValueError("INVERTIBLE report requires inverse and rendered")
            if len(self.inverse) != self.size or len(self.rendered) != self.size:
                raise ValueError("inverse/rendered must have `size` rows")
        else:
            if self.inverse is not None or self.rendered is not None:
                raise ValueError(f"{self.status.value} report must not carry inverse")
            if self.reason is None:
                raise ValueError(f"{self.status.value} report requires reason")
        return self
