"""
Presence markers for partial updates.

A patch field left at ``UNSET`` was not supplied by the caller and keeps the
stored value. Each patch class lists the fields that an explicit empty value is
allowed to clear in its ``CLEARABLE`` set.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional


class Unset:
    """Singleton marker for "field not supplied"."""

    _instance: Optional["Unset"] = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def parse_timestamp(raw: object) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; ``None``/empty means the zero value."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be an ISO-8601 string, got {type(raw).__name__}")
    text = raw.strip()
    # RFC3339 "Z" suffix as written by other services
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)
