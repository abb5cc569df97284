from pathlib import Path

import pytest

from docmanager.config import Settings, load_validated_settings
from docmanager.core.errors import ValidationError


def test_defaults():
    s = Settings()
    assert s.repository.backend == "sqlalchemy"
    assert s.storage.upload_prefix == "uploads/"
    assert s.storage.upload_url_expiry_seconds == 300
    assert s.storage.local is False


def test_from_dict_replaces_sections():
    s = Settings.from_dict({"storage": {"bucket_name": "docs", "region": "eu-west-1"}})
    assert s.storage.bucket_name == "docs"
    assert s.storage.region == "eu-west-1"
    assert s.repository.backend == "sqlalchemy"


def test_env_overrides():
    s = Settings().apply_env_overrides(
        {
            "DOCMANAGER_DB_URL": "sqlite:///tmp/x.db",
            "DOCUMENT_BUCKET_NAME": "docs-bucket",
            "AWS_SAM_LOCAL": "true",
            "DOCMANAGER_LOG_LEVEL": "DEBUG",
        }
    )
    assert s.database.url == "sqlite:///tmp/x.db"
    assert s.storage.bucket_name == "docs-bucket"
    assert s.storage.local is True
    assert s.logging.level == "DEBUG"


def test_load_from_missing_file_returns_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("DOCUMENT_BUCKET_NAME", raising=False)
    s = Settings.load_from_file(str(tmp_path / "absent.yaml"))
    assert s.storage.bucket_name == ""


def test_packaged_config_is_valid():
    s = load_validated_settings(environ={})
    assert s.repository.backend == "sqlalchemy"
    assert s.storage.upload_url_expiry_seconds == 300


def test_validated_settings_ignore_unknown_keys(tmp_path: Path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "repository:\n  backend: memory\n  shards: 3\nstorage:\n  bucket_name: docs\nextra_section: {}\n",
        encoding="utf-8",
    )
    s = load_validated_settings(str(cfg), environ={})
    assert s.repository.backend == "memory"
    assert s.storage.bucket_name == "docs"


def test_validated_settings_reject_bad_values(tmp_path: Path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("repository:\n  backend: dynamo\n", encoding="utf-8")
    with pytest.raises(ValidationError) as exc_info:
        load_validated_settings(str(cfg), environ={})
    assert exc_info.value.context == {"path": str(cfg)}


def test_validated_settings_reject_non_positive_expiry(tmp_path: Path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("storage:\n  upload_url_expiry_seconds: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_validated_settings(str(cfg), environ={})
