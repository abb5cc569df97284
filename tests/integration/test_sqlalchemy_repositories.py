from __future__ import annotations

from datetime import datetime, timezone

import pytest

from docmanager.application.services import DocumentService, EmployeeService
from docmanager.core.errors import ConversionError
from docmanager.domain import Document, DocumentPatch, Employee, EmployeePatch, Role
from docmanager.infrastructure.stores import (
    SessionProvider,
    SqlAlchemyDocumentRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyRoleRepository,
)
from docmanager.infrastructure.stores.models import DocumentModel
from tests.conftest import FakeFileStorage


@pytest.fixture
def provider(tmp_path):
    p = SessionProvider(f"sqlite:///{tmp_path / 'docmanager_test.db'}")
    yield p
    p.dispose()


@pytest.fixture
def documents(provider):
    return SqlAlchemyDocumentRepository(provider=provider)


@pytest.fixture
def employees(provider):
    return SqlAlchemyEmployeeRepository(provider=provider)


@pytest.fixture
def roles(provider):
    return SqlAlchemyRoleRepository(provider=provider)


def test_document_persists_and_round_trips(documents):
    doc = Document(
        id="doc-1",
        file_name="contract.pdf",
        storage_key="uploads/contract.pdf_1714564800_abc",
        upload_date=datetime(2024, 5, 1, 12, 0, 0, 654321, tzinfo=timezone.utc),
        status="UPLOADED",
        owner_id="emp-1",
        requires_signature=True,
        document_type="contract",
        group_name="legal",
        recipient="ana@example.com",
    )
    documents.save(doc)
    assert documents.find_by_id("doc-1") == doc


def test_find_missing_returns_none(documents, employees, roles):
    assert documents.find_by_id("nope") is None
    assert employees.find_by_id("nope") is None
    assert roles.find_by_id("nope") is None


def test_save_with_existing_id_overwrites(roles):
    roles.save(Role(id="r1", name="Admin"))
    roles.save(Role(id="r1", name="Owner"))
    assert [r.name for r in roles.find_all()] == ["Owner"]


def test_update_and_delete(employees):
    employees.save(Employee(id="e1", name="Ana", status="Active"))
    employees.update(Employee(id="e1", name="Ana", status="Inactive", role_id="r1"))
    assert employees.find_by_id("e1").status == "Inactive"

    employees.delete("e1")
    assert employees.find_by_id("e1") is None
    employees.delete("e1")


def test_find_all_scans_every_row(roles):
    for i in range(5):
        roles.save(Role(id=f"r{i}", name=f"Role {i}"))
    assert sorted(r.id for r in roles.find_all()) == ["r0", "r1", "r2", "r3", "r4"]


def test_unparseable_timestamp_raises_conversion_error(documents, provider):
    with provider.session() as session:
        session.add(DocumentModel(id="bad", file_name="x.pdf", upload_date="31/12/2024"))
        session.commit()

    with pytest.raises(ConversionError) as exc_info:
        documents.find_by_id("bad")
    assert exc_info.value.context == {"id": "bad"}


def test_employee_scenario_over_sqlite(employees):
    service = EmployeeService(employees)
    ana = service.create(Employee(name="Ana"))
    assert ana.status == "Active"

    service.update(ana.id, EmployeePatch(role_id="r1"))
    fetched = service.get_by_id(ana.id)
    assert fetched.role_id == "r1"
    assert fetched.name == "Ana"
    assert fetched.link_date == ana.link_date


def test_document_scenario_over_sqlite(documents):
    service = DocumentService(documents, FakeFileStorage())
    created = service.create(Document(file_name="a.pdf"))
    assert created.status == "PENDING_UPLOAD"

    service.update(created.id, DocumentPatch(status="UPLOADED"))
    fetched = service.get_by_id(created.id)
    assert fetched.status == "UPLOADED"
    assert fetched.file_name == "a.pdf"
