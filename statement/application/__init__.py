"""Application services."""

from .conversion import (
    ConversionRequest,
    ConversionResult,
    ConversionService,
    get_conversion_service,
)

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "ConversionService",
    "get_conversion_service",
]
