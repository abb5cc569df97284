from .base import EntityService
from .document_service import DocumentService
from .employee_service import EmployeeService
from .role_service import RoleService
from .upload_keys import DEFAULT_UPLOAD_PREFIX, build_upload_key

__all__ = [
    "EntityService",
    "DocumentService",
    "EmployeeService",
    "RoleService",
    "DEFAULT_UPLOAD_PREFIX",
    "build_upload_key",
]
