from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from docmanager.core.errors import ConversionError, StoreError
from docmanager.infrastructure.stores.sqlalchemy_db import SessionProvider

logger = logging.getLogger(__name__)

E = TypeVar("E")


class SqlAlchemyRepository(Generic[E]):
    """
    Table-backed repository for one entity type.

    Rows mirror ``entity.to_dict()`` column for column.
    - save()/update(): upsert by primary key (session.merge)
    - delete(): no-op when the id is missing
    - find_all(): full table scan, unordered
    """

    model: Type[Any]
    entity_type: Type[Any]

    def __init__(self, provider: Optional[SessionProvider] = None):
        self._provider = provider or SessionProvider()

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def save(self, entity: E) -> None:
        self._upsert(entity, "save")

    def update(self, entity: E) -> None:
        self._upsert(entity, "update")

    def find_by_id(self, entity_id: str) -> Optional[E]:
        try:
            with self._provider.session() as session:
                row = session.get(self.model, entity_id)
                if row is None:
                    return None
                return self._to_entity(row)
        except SQLAlchemyError as exc:
            raise StoreError(
                message=f"failed to get {self.table_name} row: {exc}",
                context={"id": entity_id},
            ) from exc

    def find_all(self) -> List[E]:
        try:
            with self._provider.session() as session:
                rows = session.execute(select(self.model)).scalars().all()
                return [self._to_entity(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StoreError(message=f"failed to scan {self.table_name}: {exc}") from exc

    def delete(self, entity_id: str) -> None:
        try:
            with self._provider.session() as session:
                session.execute(delete(self.model).where(self.model.id == entity_id))
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(
                message=f"failed to delete {self.table_name} row: {exc}",
                context={"id": entity_id},
            ) from exc

    def close(self) -> None:
        self._provider.dispose()

    def _upsert(self, entity: E, action: str) -> None:
        row = self.model(**self._to_record(entity))
        try:
            with self._provider.session() as session:
                session.merge(row)
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(
                message=f"failed to {action} {self.table_name} row: {exc}",
                context={"id": row.id},
            ) from exc
        logger.debug("%s %s row %s", action, self.table_name, row.id)

    def _to_record(self, entity: E) -> Dict[str, Any]:
        return entity.to_dict()  # type: ignore[attr-defined]

    def _to_entity(self, row: Any) -> E:
        record = {column.key: getattr(row, column.key) for column in self.model.__table__.columns}
        try:
            return self.entity_type.from_dict(record)
        except (TypeError, ValueError) as exc:
            raise ConversionError(
                message=f"failed to convert {self.table_name} row {record.get('id')}: {exc}",
                context={"id": record.get("id")},
            ) from exc
