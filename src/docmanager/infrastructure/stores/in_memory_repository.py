from __future__ import annotations

import threading
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from docmanager.core.errors import ConversionError
from docmanager.domain import Document, Employee, Role

E = TypeVar("E")


class InMemoryRepository(Generic[E]):
    """
    Dict-backed repository (useful for tests and local runs).

    Keeps the flat persisted record rather than the entity, so callers always
    get a fresh copy and timestamps go through the same string round trip as
    the table-backed stores.
    """

    entity_type: Type[Any]

    def __init__(self) -> None:
        self.records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def save(self, entity: E) -> None:
        record = entity.to_dict()  # type: ignore[attr-defined]
        with self._lock:
            self.records[record["id"]] = record

    update = save

    def find_by_id(self, entity_id: str) -> Optional[E]:
        with self._lock:
            record = self.records.get(entity_id)
        return self._to_entity(record) if record is not None else None

    def find_all(self) -> List[E]:
        with self._lock:
            records = list(self.records.values())
        return [self._to_entity(r) for r in records]

    def delete(self, entity_id: str) -> None:
        with self._lock:
            self.records.pop(entity_id, None)

    def _to_entity(self, record: Dict[str, Any]) -> E:
        try:
            return self.entity_type.from_dict(record)
        except (TypeError, ValueError) as exc:
            raise ConversionError(
                message=f"failed to convert record {record.get('id')}: {exc}",
                context={"id": record.get("id")},
            ) from exc


class InMemoryDocumentRepository(InMemoryRepository[Document]):
    entity_type = Document


class InMemoryEmployeeRepository(InMemoryRepository[Employee]):
    entity_type = Employee


class InMemoryRoleRepository(InMemoryRepository[Role]):
    entity_type = Role
