"""
Wire repositories, file storage and services from Settings.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from docmanager.application.ports import (
    DocumentRepositoryPort,
    EmployeeRepositoryPort,
    FileStoragePort,
    RoleRepositoryPort,
)
from docmanager.application.services import DocumentService, EmployeeService, RoleService
from docmanager.config.settings import Settings

from .container import Container

logger = logging.getLogger(__name__)


def _repository_factories(settings: Settings) -> Dict[Any, Callable[[], Any]]:
    backend = settings.repository.backend
    if backend == "memory":
        from docmanager.infrastructure.stores import (
            InMemoryDocumentRepository,
            InMemoryEmployeeRepository,
            InMemoryRoleRepository,
        )

        return {
            DocumentRepositoryPort: InMemoryDocumentRepository,
            EmployeeRepositoryPort: InMemoryEmployeeRepository,
            RoleRepositoryPort: InMemoryRoleRepository,
        }

    if backend != "sqlalchemy":
        raise ValueError(f"Unknown repository backend: {backend}")

    from docmanager.infrastructure.stores import (
        SessionProvider,
        SqlAlchemyDocumentRepository,
        SqlAlchemyEmployeeRepository,
        SqlAlchemyRoleRepository,
    )

    auto_create = settings.repository.auto_create_schema
    shared: Dict[str, SessionProvider] = {}

    # one engine for all three tables
    def provider() -> SessionProvider:
        if "provider" not in shared:
            shared["provider"] = SessionProvider(settings.database, create_schema=auto_create)
        return shared["provider"]

    def build(repo_cls):
        return lambda: repo_cls(provider=provider())

    return {
        DocumentRepositoryPort: build(SqlAlchemyDocumentRepository),
        EmployeeRepositoryPort: build(SqlAlchemyEmployeeRepository),
        RoleRepositoryPort: build(SqlAlchemyRoleRepository),
    }


def _file_storage_factory(settings: Settings) -> Callable[[], Any]:
    from docmanager.infrastructure.storage import S3FileStorage, create_s3_client

    storage = settings.storage

    def factory() -> S3FileStorage:
        client = create_s3_client(
            region=storage.region,
            endpoint_url=storage.endpoint_url,
            access_key_id=storage.access_key_id,
            secret_access_key=storage.secret_access_key,
            local=storage.local,
        )
        return S3FileStorage(
            storage.bucket_name,
            client=client,
            expires_in=storage.upload_url_expiry_seconds,
        )

    return factory


def bootstrap_dependencies(
    settings: Optional[Settings] = None,
    *,
    container: Optional[Container] = None,
) -> Container:
    """
    Register adapters and services.

    Ports already registered on ``container`` (e.g. test fakes) are kept.
    Adapters are built lazily on first resolve.
    """
    settings = settings or Settings()
    container = container or Container.instance()

    adapters = {**_repository_factories(settings), FileStoragePort: _file_storage_factory(settings)}
    for port, factory in adapters.items():
        if not container.is_registered(port):
            container.register(port, factory, singleton=True)

    container.register(
        DocumentService,
        lambda: DocumentService(
            container.resolve(DocumentRepositoryPort),
            container.resolve(FileStoragePort),
            upload_prefix=settings.storage.upload_prefix,
        ),
        singleton=True,
    )
    container.register(
        EmployeeService,
        lambda: EmployeeService(container.resolve(EmployeeRepositoryPort)),
        singleton=True,
    )
    container.register(
        RoleService,
        lambda: RoleService(container.resolve(RoleRepositoryPort)),
        singleton=True,
    )
    logger.info(
        "Dependencies bootstrapped (repository=%s, bucket=%s)",
        settings.repository.backend,
        settings.storage.bucket_name or "<unset>",
    )
    return container
