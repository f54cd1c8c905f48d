from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

log = logging.getLogger(__name__)

Base = declarative_base()

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Database:
    """Store handle owned by the application.

    Created once by the application factory, disposed when the app shuts down.
    Request handlers get sessions from it through ``dependencies.get_db``.
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        pool_timeout: int = 60,
        echo: bool = False,
    ):
        self.url = database_url
        self.engine = create_engine(database_url, future=True, echo=echo, **_engine_options(database_url, pool_size, pool_timeout))
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        # models must be imported so their tables are registered on Base.metadata
        from luct_reports import models  # noqa: F401

        Base.metadata.create_all(self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(self.engine)

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        log.info("Closing database pool for %s", self.engine.url.render_as_string(hide_password=True))
        self.engine.dispose()


def _engine_options(database_url: str, pool_size: int, pool_timeout: int) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if database_url in _MEMORY_URLS:
            # one shared connection, otherwise every checkout sees an empty database
            options["poolclass"] = StaticPool
        return options
    return {"pool_size": pool_size, "pool_timeout": pool_timeout, "pool_pre_ping": True}
