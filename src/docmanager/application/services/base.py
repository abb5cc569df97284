"""
Generic entity service: creation defaults, partial updates and store error
wrapping, shared by the Document, Employee and Role services.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Generic, Iterator, List, Optional, Type, TypeVar, Union

from docmanager.core.errors import NotFoundError, StoreError

from .merge import apply_creation_defaults, apply_patch, utcnow

logger = logging.getLogger(__name__)

E = TypeVar("E")
P = TypeVar("P")


# Bugs in an adapter are not backend failures; they propagate as-is.
PROGRAMMING_ERRORS = (AttributeError, NameError, TypeError, AssertionError)


@contextmanager
def wrap_store_errors(action: str, **context: Any) -> Iterator[None]:
    """Re-raise backend failures as StoreError with ``action`` prepended."""
    try:
        yield
    except StoreError as exc:
        logger.error("%s: %s", action, exc)
        merged = {**(exc.context or {}), **context}
        raise type(exc)(message=f"{action}: {exc.message}", context=merged or None) from exc
    except PROGRAMMING_ERRORS:
        raise
    except Exception as exc:
        logger.exception("%s", action)
        raise StoreError(message=f"{action}: {exc}", context=context or None) from exc


class EntityService(Generic[E, P]):
    """
    Create / read / partial-update / delete on top of a repository port.

    Subclasses set ``entity_name``, ``entity_type``, ``patch_type`` and,
    where the entity has them, ``created_at_field`` and ``default_status``.
    """

    entity_name: str = "entity"
    entity_type: Type[Any]
    patch_type: Type[Any]
    created_at_field: Optional[str] = None
    default_status: Optional[str] = None

    def __init__(self, repo: Any, *, clock: Callable[[], datetime] = utcnow):
        self._repo = repo
        self._clock = clock

    def create(self, entity: E) -> E:
        entity = replace(entity)
        apply_creation_defaults(
            entity,
            now=self._clock(),
            created_at_field=self.created_at_field,
            default_status=self.default_status,
        )
        with wrap_store_errors(f"failed to save {self.entity_name}", id=entity.id):
            self._repo.save(entity)
        logger.info("Created %s %s", self.entity_name, entity.id)
        return entity

    def get_by_id(self, entity_id: str) -> Optional[E]:
        """Return the entity or ``None`` when it does not exist."""
        with wrap_store_errors(f"failed to find {self.entity_name} by ID", id=entity_id):
            return self._repo.find_by_id(entity_id)

    def get_all(self) -> List[E]:
        with wrap_store_errors(f"failed to get all {self.entity_name}s"):
            return list(self._repo.find_all())

    def update(self, entity_id: str, changes: Union[E, P]) -> E:
        """
        Merge ``changes`` into the stored entity and persist the result.

        ``changes`` is either a patch or a full entity; an entity counts as a
        patch with every mutable field supplied. Raises NotFoundError when the
        id does not exist. Concurrent updates are last-write-wins.
        """
        patch = self._to_patch(changes)
        with wrap_store_errors(f"failed to find existing {self.entity_name} for update", id=entity_id):
            existing = self._repo.find_by_id(entity_id)
        if existing is None:
            raise NotFoundError(
                message=f"{self.entity_name} with ID {entity_id} not found",
                context={"id": entity_id},
            )

        apply_patch(existing, patch)
        with wrap_store_errors(f"failed to update {self.entity_name}", id=entity_id):
            self._repo.update(existing)
        logger.info("Updated %s %s", self.entity_name, entity_id)
        return existing

    def delete(self, entity_id: str) -> None:
        with wrap_store_errors(f"failed to delete {self.entity_name}", id=entity_id):
            self._repo.delete(entity_id)
        logger.info("Deleted %s %s", self.entity_name, entity_id)

    def _to_patch(self, changes: Any) -> Any:
        if isinstance(changes, self.patch_type):
            return changes
        if isinstance(changes, self.entity_type):
            return self.patch_type.from_entity(changes)
        raise TypeError(
            f"{self.entity_name} update expects {self.patch_type.__name__} or "
            f"{self.entity_type.__name__}, got {type(changes).__name__}"
        )
