"""
Unified error module.
"""

from .errors import (
    ErrorSeverity,
    DocManagerError,
    StoreError,
    ConversionError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ErrorSeverity",
    "DocManagerError",
    "StoreError",
    "ConversionError",
    "NotFoundError",
    "ValidationError",
]
