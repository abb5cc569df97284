"""
Unified error types shared by services, adapters and the HTTP layer.

Absence on read is not an error: repositories and ``get_by_id`` return ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ErrorSeverity(Enum):
    WARNING = "warning"      # caller may continue
    ERROR = "error"          # operation failed
    CRITICAL = "critical"    # process should stop


@dataclass
class DocManagerError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class StoreError(DocManagerError):
    """Failure reported by a repository or file-storage backend."""

    code: str = "STORE_ERROR"


@dataclass
class ConversionError(StoreError):
    """A stored record could not be converted into its entity."""

    code: str = "CONVERSION_ERROR"


@dataclass
class NotFoundError(DocManagerError):
    """Raised by ``update`` when the target entity does not exist."""

    code: str = "NOT_FOUND"


@dataclass
class ValidationError(DocManagerError):
    severity: ErrorSeverity = ErrorSeverity.WARNING
    code: str = "VALIDATION_ERROR"
