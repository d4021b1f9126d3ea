"""
Local storage engine (SQLAlchemy)

Este módulo centraliza el acceso a la base de datos local:
- Base declarativa para los modelos ORM
- StorageManager: engine + session factory, con acceso serializado

Author: TM3
Date: 2026-10-19
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.config import get_settings

logger = logging.getLogger(__name__)

# Base para modelos
Base = declarative_base()


def create_storage_engine(url: str) -> Engine:
    """
    Build an engine for the given SQLAlchemy URL

    sqlite in-memory URLs share a single connection (StaticPool) so every
    session sees the same database.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url == "sqlite://":
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)

        # Cascades on order_notes/order_items rely on FK enforcement
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(url, pool_pre_ping=True)


class StorageManager:
    """
    Owns the local database used as a cache of remote entities

    Usage:
        storage = StorageManager("sqlite:///storefront.db")
        with storage.session() as session:
            session.add(...)
    """

    def __init__(self, url: Optional[str] = None):
        self.url = url or get_settings().DATABASE_URL
        self.engine = create_storage_engine(self.url)
        self._session_factory = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False, expire_on_commit=False
        )
        self._lock = threading.RLock()

        # Import ORM models so their tables are attached to Base.metadata
        from storefront import models  # noqa: F401

        Base.metadata.create_all(self.engine)
        logger.debug(f"Storage ready at {self.url}")

    @classmethod
    def in_memory(cls) -> "StorageManager":
        """Isolated in-memory storage (tests, dry runs)"""
        return cls("sqlite://")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Transactional session scope

        Commits on success, rolls back on error, always closes. Sessions are
        handed out one at a time.
        """
        with self._lock:
            session = self._session_factory()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

    def reset(self) -> None:
        """Drop and recreate every table"""
        with self._lock:
            Base.metadata.drop_all(self.engine)
            Base.metadata.create_all(self.engine)
        logger.info("Local storage reset")

    def close(self) -> None:
        self.engine.dispose()
