"""
Engine and session handling for the documents / employees / roles tables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from docmanager.config.settings import DatabaseConfig
from docmanager.infrastructure.stores.models import Base

logger = logging.getLogger(__name__)

DEFAULT_DB_URL = "sqlite:///data/docmanager.db"
DB_URL_ENV = "DOCMANAGER_DB_URL"

DatabaseTarget = Union[DatabaseConfig, str, None]


def resolve_db_url(target: DatabaseTarget = None, *, environ: Optional[Mapping[str, str]] = None) -> str:
    """Configured url, then ``DOCMANAGER_DB_URL``, then the bundled sqlite file."""
    url = target.url if isinstance(target, DatabaseConfig) else target
    if url:
        return url
    env = os.environ if environ is None else environ
    return env.get(DB_URL_ENV) or DEFAULT_DB_URL


def create_db_engine(db_url: str) -> Engine:
    url = make_url(db_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        database = url.database or ""
        if database and database != ":memory:" and not database.startswith("file:"):
            Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


class SessionProvider:
    """
    One engine per database, shared by all entity repositories.

    With ``create_schema`` the entity tables are created on construction, so
    repositories built on a shared provider never repeat it.
    """

    def __init__(self, target: DatabaseTarget = None, *, create_schema: bool = True):
        self.db_url = resolve_db_url(target)
        self.engine = create_db_engine(self.db_url)
        self._factory = sessionmaker(bind=self.engine, autoflush=False)
        if create_schema:
            Base.metadata.create_all(self.engine)
            logger.debug("Schema ready on %s", self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        return self._factory()

    def dispose(self) -> None:
        self.engine.dispose()
