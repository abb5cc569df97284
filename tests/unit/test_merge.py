from datetime import datetime, timezone

from docmanager.application.services.merge import apply_creation_defaults, apply_patch
from docmanager.domain import (
    UNSET,
    Document,
    DocumentPatch,
    Employee,
    EmployeePatch,
    Role,
    RolePatch,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_unset_is_a_falsy_singleton():
    from docmanager.domain.patch import Unset

    assert Unset() is UNSET
    assert not UNSET
    assert repr(UNSET) == "UNSET"


def test_unset_fields_keep_existing_values():
    role = Role(id="r1", name="Admin", description="Full access")
    apply_patch(role, RolePatch())
    assert role == Role(id="r1", name="Admin", description="Full access")


def test_empty_string_keeps_existing_value():
    role = Role(id="r1", name="Admin", description="Full access")
    apply_patch(role, RolePatch(name="", description="Everything"))
    assert role.name == "Admin"
    assert role.description == "Everything"


def test_none_keeps_existing_value():
    employee = Employee(id="e1", name="Ana", email="ana@example.com")
    apply_patch(employee, EmployeePatch(email=None))  # type: ignore[arg-type]
    assert employee.email == "ana@example.com"


def test_clearable_field_accepts_empty_string():
    employee = Employee(id="e1", name="Ana", role_id="r1")
    apply_patch(employee, EmployeePatch(role_id=""))
    assert employee.role_id == ""
    assert employee.name == "Ana"


def test_bool_field_is_always_written():
    doc = Document(id="d1", requires_signature=True)
    apply_patch(doc, DocumentPatch())
    assert doc.requires_signature is False

    apply_patch(doc, DocumentPatch(requires_signature=True))
    assert doc.requires_signature is True


def test_patch_from_entity_supplies_every_mutable_field():
    patch = DocumentPatch.from_entity(Document(id="ignored", file_name="a.pdf", status="UPLOADED"))
    assert patch.file_name == "a.pdf"
    assert patch.status == "UPLOADED"
    assert patch.owner_id == ""
    assert not hasattr(patch, "id")


def test_employee_patch_from_entity_overwrites_role():
    employee = Employee(id="e1", name="Ana", role_id="r1")
    apply_patch(employee, EmployeePatch.from_entity(Employee(name="Ana B.")))
    assert employee.name == "Ana B."
    assert employee.role_id == ""


def test_creation_defaults_fill_only_missing_values():
    doc = Document(file_name="a.pdf")
    apply_creation_defaults(doc, now=NOW, created_at_field="upload_date", default_status="PENDING_UPLOAD")
    assert doc.id
    assert doc.upload_date == NOW
    assert doc.status == "PENDING_UPLOAD"

    earlier = datetime(2020, 1, 1, tzinfo=timezone.utc)
    kept = Document(id="d1", upload_date=earlier, status="UPLOADED")
    apply_creation_defaults(kept, now=NOW, created_at_field="upload_date", default_status="PENDING_UPLOAD")
    assert (kept.id, kept.upload_date, kept.status) == ("d1", earlier, "UPLOADED")


def test_creation_defaults_without_timestamp_or_status():
    role = Role(name="Viewer")
    apply_creation_defaults(role, now=NOW)
    assert role.id
    assert role.name == "Viewer"
