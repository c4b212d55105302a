"""Engine and session management for the relational store."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from infrastructure.logging import get_module_logger
from infrastructure.persistence.models import Base

logger = get_module_logger()


def _is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url)


def _enable_sqlite_savepoints(engine: Engine) -> None:
    # pysqlite defers BEGIN on its own, which breaks SAVEPOINT handling;
    # let SQLAlchemy emit BEGIN instead.
    @event.listens_for(engine, "connect")
    def _do_connect(dbapi_connection, connection_record):  # pylint: disable=unused-argument
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql("BEGIN")


class Database:
    """Owns the SQLAlchemy engine and hands out transactional sessions.

    Attributes:
        engine: The underlying SQLAlchemy engine.
    """

    def __init__(self, url: str, echo: bool = False):
        engine_kwargs: dict = {"echo": echo, "future": True}
        if _is_memory_sqlite(url):
            # One shared connection, otherwise every pooled connection sees
            # its own empty in-memory database.
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self.engine: Engine = create_engine(url, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_savepoints(self.engine)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        logger.info("initialized_database", dialect=self.engine.dialect.name)

    def create_all(self) -> None:
        """Create the locale and translation tables if they are missing."""
        Base.metadata.create_all(self.engine)
        logger.info("database_schema_ready")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a session wrapped in a transaction.

        Commits on success, rolls back and re-raises on any error.
        """
        with self._session_factory.begin() as session:
            yield session

    def dispose(self) -> None:
        self.engine.dispose()
