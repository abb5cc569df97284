from .repository_port import DocumentRepositoryPort, EmployeeRepositoryPort, RoleRepositoryPort
from .file_storage_port import FileStoragePort, UPLOAD_URL_TTL_SECONDS

__all__ = [
    "DocumentRepositoryPort",
    "EmployeeRepositoryPort",
    "RoleRepositoryPort",
    "FileStoragePort",
    "UPLOAD_URL_TTL_SECONDS",
]
