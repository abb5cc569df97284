# docmanager/config/__init__.py

from .settings import (
    APIConfig,
    DatabaseConfig,
    LoggingConfig,
    RepositoryConfig,
    Settings,
    StorageConfig,
    create_settings,
)
from .validated_settings import load_validated_settings

__all__ = [
    "APIConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "RepositoryConfig",
    "Settings",
    "StorageConfig",
    "create_settings",
    "load_validated_settings",
]
