"""
Database setup for the FastAPI backend.
Provides the SQLAlchemy store handle (engine + session factory).
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from settings import settings


Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    """
    Handle on the relational store.

    Built once at process start and passed to whatever needs a session;
    nothing in the app reaches for a module-level engine.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None) -> None:
        self.url = url or settings.DATABASE_URL
        connect_args = {}
        if self.url.startswith("sqlite"):
            # check_same_thread=False allows usage across FastAPI threads
            connect_args["check_same_thread"] = False
        self.engine: Engine = create_engine(
            self.url,
            echo=settings.DATABASE_ECHO if echo is None else echo,
            connect_args=connect_args,
        )
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    def init_db(self) -> None:
        """Create tables if they don't exist."""
        from repositories import models  # noqa: F401  Ensures models are registered

        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
