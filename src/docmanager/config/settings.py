# docmanager/config/settings.py

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class DatabaseConfig:
    """Table store settings"""
    url: str = ""  # empty -> DOCMANAGER_DB_URL or the sqlite default


@dataclass
class RepositoryConfig:
    """Which repository adapters to wire"""
    backend: str = "sqlalchemy"  # sqlalchemy / memory
    auto_create_schema: bool = True


@dataclass
class StorageConfig:
    """Blob storage settings"""
    bucket_name: str = ""
    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    local: bool = False  # LocalStack endpoint + static test credentials
    upload_prefix: str = "uploads/"
    upload_url_expiry_seconds: int = 300


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class APIConfig:
    title: str = "docmanager API"
    version: str = "0.1.0"
    allow_origins: list = field(default_factory=lambda: ["*"])


@dataclass
class Settings:
    """Main settings object"""
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    repository: RepositoryConfig = field(default_factory=RepositoryConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    api: APIConfig = field(default_factory=APIConfig)

    @classmethod
    def load_from_file(cls, config_path: Optional[str] = None) -> "Settings":
        """Load YAML config; missing file -> defaults. Env overrides applied last."""
        if config_path is None:
            config_path = Path(__file__).parent / "config.yaml"

        config_path = Path(config_path)

        config_data: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        return cls.from_dict(config_data).apply_env_overrides()

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "Settings":
        settings = cls()

        if "database" in config_data:
            settings.database = DatabaseConfig(**config_data["database"])

        if "repository" in config_data:
            settings.repository = RepositoryConfig(**config_data["repository"])

        if "storage" in config_data:
            settings.storage = StorageConfig(**config_data["storage"])

        if "logging" in config_data:
            settings.logging = LoggingConfig(**config_data["logging"])

        if "api" in config_data:
            settings.api = APIConfig(**config_data["api"])

        return settings

    def apply_env_overrides(self, environ: Optional[Dict[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        if env.get("DOCMANAGER_DB_URL"):
            self.database.url = env["DOCMANAGER_DB_URL"]
        if env.get("DOCMANAGER_REPOSITORY_BACKEND"):
            self.repository.backend = env["DOCMANAGER_REPOSITORY_BACKEND"]
        if env.get("DOCUMENT_BUCKET_NAME"):
            self.storage.bucket_name = env["DOCUMENT_BUCKET_NAME"]
        if env.get("AWS_REGION"):
            self.storage.region = env["AWS_REGION"]
        if env.get("AWS_SAM_LOCAL", "").lower() == "true":
            self.storage.local = True
        if env.get("DOCMANAGER_LOG_LEVEL"):
            self.logging.level = env["DOCMANAGER_LOG_LEVEL"]
        return self


def create_settings(config_path: Optional[str] = None) -> Settings:
    return Settings.load_from_file(config_path)
