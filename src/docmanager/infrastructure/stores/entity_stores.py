from __future__ import annotations

from docmanager.domain import Document, Employee, Role
from docmanager.infrastructure.stores.models import DocumentModel, EmployeeModel, RoleModel
from docmanager.infrastructure.stores.sqlalchemy_repository import SqlAlchemyRepository


class SqlAlchemyDocumentRepository(SqlAlchemyRepository[Document]):
    """Document metadata on the ``documents`` table (no blob content)."""

    model = DocumentModel
    entity_type = Document


class SqlAlchemyEmployeeRepository(SqlAlchemyRepository[Employee]):
    model = EmployeeModel
    entity_type = Employee


class SqlAlchemyRoleRepository(SqlAlchemyRepository[Role]):
    model = RoleModel
    entity_type = Role
