# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Database layer helpers and session utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from commentboard.shared.config import DatabaseConfig
from commentboard.shared.logging import logger


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


def create_db_engine(config: DatabaseConfig) -> Engine:
    connect_args: dict[str, object] = {}
    pool_kwargs: dict[str, object] = {}
    if _is_sqlite(config.url):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
    if ":memory:" not in config.url and config.url not in ("sqlite://", "sqlite:///"):
        pool_kwargs = {
            "pool_size": config.pool_size,
            "max_overflow": config.max_overflow,
            "pool_timeout": config.pool_timeout,
        }

    engine = create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
        **pool_kwargs,
    )
    if _is_sqlite(config.url):
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


class Database:
    """Connection pool plus session factory for one application instance."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = create_db_engine(config)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a transactional scope, released on every exit path."""

        session = self._session_factory()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except Exception:
            logger.exception("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            logger.debug("db.session: closed session")

    def create_tables(self) -> None:
        """Ensure database schema exists."""

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.engine.dispose()
