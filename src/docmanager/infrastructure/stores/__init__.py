from .sqlalchemy_db import SessionProvider, create_db_engine, resolve_db_url
from .entity_stores import (
    SqlAlchemyDocumentRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyRoleRepository,
)
from .in_memory_repository import (
    InMemoryDocumentRepository,
    InMemoryEmployeeRepository,
    InMemoryRoleRepository,
)

__all__ = [
    "SessionProvider",
    "create_db_engine",
    "resolve_db_url",
    "SqlAlchemyDocumentRepository",
    "SqlAlchemyEmployeeRepository",
    "SqlAlchemyRoleRepository",
    "InMemoryDocumentRepository",
    "InMemoryEmployeeRepository",
    "InMemoryRoleRepository",
]
