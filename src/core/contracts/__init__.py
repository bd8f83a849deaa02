"""
Contract Validation Module

Модуль для валидации JSON контрактов внешней границы инверсии.
"""

from .validators import (
    ContractValidator,
    InversionReportValidator,
    InversionRequestValidator,
    SchemaLoader,
    get_schema_loader,
    validate_inversion_report,
    validate_inversion_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InversionRequestValidator",
    "InversionReportValidator",
    # Functions
    "get_schema_loader",
    "validate_inversion_request",
    "validate_inversion_report",
]
