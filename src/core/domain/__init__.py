"""
Domain models внешней границы инверсии.
"""

from src.core.domain.inversion import InversionReport, InversionRequest, InversionStatus

__all__ = [
    "InversionRequest",
    "InversionReport",
    "InversionStatus",
]
