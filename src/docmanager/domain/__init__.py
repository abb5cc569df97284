# src/docmanager/domain/__init__.py
"""
Domain model layer.

- document: Document entity and its patch type
- employee: Employee entity and its patch type
- role: Role entity and its patch type
"""

from .patch import UNSET, Unset
from .document import Document, DocumentPatch, DocumentStatus
from .employee import Employee, EmployeePatch, DEFAULT_EMPLOYEE_STATUS
from .role import Role, RolePatch

__all__ = [
    "UNSET",
    "Unset",
    "Document",
    "DocumentPatch",
    "DocumentStatus",
    "Employee",
    "EmployeePatch",
    "DEFAULT_EMPLOYEE_STATUS",
    "Role",
    "RolePatch",
]
