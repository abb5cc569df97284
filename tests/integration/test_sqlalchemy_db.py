from __future__ import annotations

from pathlib import Path

from sqlalchemy import event, inspect

from docmanager.application.ports import DocumentRepositoryPort, EmployeeRepositoryPort, RoleRepositoryPort
from docmanager.config.settings import DatabaseConfig, RepositoryConfig, Settings
from docmanager.core.di import Container, bootstrap_dependencies
from docmanager.infrastructure.stores.models import Base
from docmanager.infrastructure.stores.sqlalchemy_db import DEFAULT_DB_URL, SessionProvider, resolve_db_url

ENTITY_TABLES = {"documents", "employees", "roles"}


def test_configured_url_wins_over_environment():
    env = {"DOCMANAGER_DB_URL": "sqlite:///from-env.db"}
    assert resolve_db_url(DatabaseConfig(url="sqlite:///configured.db"), environ=env) == "sqlite:///configured.db"
    assert resolve_db_url(DatabaseConfig(), environ=env) == "sqlite:///from-env.db"
    assert resolve_db_url(DatabaseConfig(), environ={}) == DEFAULT_DB_URL
    assert resolve_db_url("sqlite:///plain.db", environ=env) == "sqlite:///plain.db"


def test_provider_creates_parent_dir_and_entity_tables(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    provider = SessionProvider(DatabaseConfig(url="sqlite:///nested/store/docmanager.db"))
    try:
        assert (tmp_path / "nested" / "store").is_dir()
        assert ENTITY_TABLES <= set(inspect(provider.engine).get_table_names())
    finally:
        provider.dispose()


def test_provider_can_skip_schema_creation(tmp_path: Path):
    provider = SessionProvider(DatabaseConfig(url=f"sqlite:///{tmp_path / 'bare.db'}"), create_schema=False)
    try:
        assert inspect(provider.engine).get_table_names() == []
    finally:
        provider.dispose()


def test_bootstrap_creates_schema_once_for_all_repositories(tmp_path: Path):
    calls = []

    def record_create(target, connection, **kw):
        calls.append(connection.engine.url)

    event.listen(Base.metadata, "before_create", record_create)
    settings = Settings(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'wired.db'}"),
        repository=RepositoryConfig(backend="sqlalchemy"),
    )
    try:
        container = bootstrap_dependencies(settings, container=Container())
        repos = [container.resolve(port) for port in (DocumentRepositoryPort, EmployeeRepositoryPort, RoleRepositoryPort)]
        assert len(calls) == 1
        repos[0].close()
    finally:
        event.remove(Base.metadata, "before_create", record_create)


def test_bootstrap_honours_auto_create_schema_flag(tmp_path: Path):
    settings = Settings(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'manual.db'}"),
        repository=RepositoryConfig(backend="sqlalchemy", auto_create_schema=False),
    )
    container = bootstrap_dependencies(settings, container=Container())
    repo = container.resolve(RoleRepositoryPort)
    try:
        assert inspect(repo._provider.engine).get_table_names() == []
    finally:
        repo.close()
