from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from docmanager.domain import Document, Employee, Role


@runtime_checkable
class DocumentRepositoryPort(Protocol):
    """
    Keyed store for Document records.

    - ``find_by_id`` returns ``None`` when the id is absent (never raises for it)
    - ``save``/``update`` overwrite an existing record with the same id
    - ``delete`` of a missing id is left to the backend
    Backend failures raise ``StoreError``.
    """

    def save(self, doc: Document) -> None:
        """Persist a new record."""

    def find_by_id(self, doc_id: str) -> Optional[Document]:
        """Fetch one record or ``None``."""

    def find_all(self) -> List[Document]:
        """Return every record, unordered."""

    def update(self, doc: Document) -> None:
        """Write the full record back."""

    def delete(self, doc_id: str) -> None:
        """Remove the record."""


@runtime_checkable
class EmployeeRepositoryPort(Protocol):
    """Keyed store for Employee records. Same contract as DocumentRepositoryPort."""

    def save(self, employee: Employee) -> None: ...

    def find_by_id(self, employee_id: str) -> Optional[Employee]: ...

    def find_all(self) -> List[Employee]: ...

    def update(self, employee: Employee) -> None: ...

    def delete(self, employee_id: str) -> None: ...


@runtime_checkable
class RoleRepositoryPort(Protocol):
    """Keyed store for Role records. Same contract as DocumentRepositoryPort."""

    def save(self, role: Role) -> None: ...

    def find_by_id(self, role_id: str) -> Optional[Role]: ...

    def find_all(self) -> List[Role]: ...

    def update(self, role: Role) -> None: ...

    def delete(self, role_id: str) -> None: ...
