"""Inversion — валидация, Gauss-Jordan инверсия и граница запросов.

Внешний слой вызывает только:
- validate(matrix)
- compute_inverse(matrix)
- format_number(value, format)
"""

from src.core.math.rational import DisplayFormat, format_number
from .inverter import (
    InversionOutcome,
    InverterConfig,
    MatrixInverter,
    compute_inverse,
    residual_norm,
)
from .service import (
    InversionService,
    invert_payload,
    parse_matrix,
    random_integer_matrix,
)
from .validation import ValidationFailure, ValidationResult, validate

__all__ = [
    "DisplayFormat",
    "format_number",
    "InversionOutcome",
    "InverterConfig",
    "MatrixInverter",
    "compute_inverse",
    "residual_norm",
    "InversionService",
    "invert_payload",
    "parse_matrix",
    "random_integer_matrix",
    "ValidationFailure",
    "ValidationResult",
    "validate",
]
