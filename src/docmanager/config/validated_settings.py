"""
Pydantic validation of the YAML config before it is turned into the
``Settings`` dataclass. Unknown keys are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict, Field

from docmanager.core.errors import ValidationError

from .settings import (
    APIConfig,
    DatabaseConfig,
    LoggingConfig,
    RepositoryConfig,
    Settings,
    StorageConfig,
)


class DatabaseConfigModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str = ""


class RepositoryConfigModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    backend: str = Field(default="sqlalchemy", pattern="^(sqlalchemy|memory)$")
    auto_create_schema: bool = True


class StorageConfigModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    bucket_name: str = ""
    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    local: bool = False
    upload_prefix: str = "uploads/"
    upload_url_expiry_seconds: int = Field(default=300, gt=0, le=7 * 24 * 3600)


class LoggingConfigModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class APIConfigModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = "docmanager API"
    version: str = "0.1.0"
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])


class SettingsModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    database: DatabaseConfigModel = DatabaseConfigModel()
    repository: RepositoryConfigModel = RepositoryConfigModel()
    storage: StorageConfigModel = StorageConfigModel()
    logging: LoggingConfigModel = LoggingConfigModel()
    api: APIConfigModel = APIConfigModel()

    def to_dataclass(self) -> Settings:
        s = Settings()
        s.database = DatabaseConfig(**self.database.model_dump())
        s.repository = RepositoryConfig(**self.repository.model_dump())
        s.storage = StorageConfig(**self.storage.model_dump())
        s.logging = LoggingConfig(**self.logging.model_dump())
        s.api = APIConfig(**self.api.model_dump())
        return s


def load_validated_settings(
    config_path: Optional[str] = None,
    *,
    environ: Optional[Dict[str, str]] = None,
) -> Settings:
    """Validate the YAML file with pydantic and return the Settings dataclass."""
    cfg_file = Path(config_path) if config_path else Path(__file__).parent / "config.yaml"
    data: Dict[str, Any] = {}
    if cfg_file.exists():
        data = yaml.safe_load(cfg_file.read_text(encoding="utf-8")) or {}
    try:
        model = SettingsModel(**data)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            message=f"invalid configuration in {cfg_file}: {exc}",
            context={"path": str(cfg_file)},
        ) from exc
    return model.to_dataclass().apply_env_overrides(environ)
