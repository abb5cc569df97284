"""
Helpers shared by the entity services: id generation, creation defaults and
the partial-update merge.
"""

from __future__ import annotations

import uuid
from dataclasses import fields
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar

from docmanager.domain import UNSET

T = TypeVar("T")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_entity_id() -> str:
    return str(uuid.uuid4())


def apply_creation_defaults(
    entity: Any,
    *,
    now: datetime,
    created_at_field: Optional[str] = None,
    default_status: Optional[str] = None,
) -> None:
    """Fill the id, an unset created-at timestamp and an empty status in place."""
    if not entity.id:
        entity.id = new_entity_id()
    if created_at_field and getattr(entity, created_at_field) is None:
        setattr(entity, created_at_field, now)
    if default_status and not entity.status:
        entity.status = default_status


def _is_zero(value: Any) -> bool:
    return value is None or value == ""


def apply_patch(target: T, patch: Any) -> T:
    """
    Merge ``patch`` into ``target`` in place and return it.

    - UNSET fields are skipped
    - bool fields are always written
    - fields in ``patch.CLEARABLE`` are written even when empty
    - any other field is written only when non-empty
    """
    clearable = getattr(patch, "CLEARABLE", frozenset())
    for f in fields(patch):
        value = getattr(patch, f.name)
        if value is UNSET:
            continue
        if isinstance(value, bool) or f.name in clearable:
            setattr(target, f.name, value)
        elif not _is_zero(value):
            setattr(target, f.name, value)
    return target
