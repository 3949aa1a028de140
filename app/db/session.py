"""
Database engine and request-scoped sessions.

Postgres gets a pooled engine; the per-user ``SELECT ... FOR UPDATE``
serialises one user's sleep session writes.

A SQLite file (``SQLITE_PATH``) has no row locks and pysqlite does not
emit ``BEGIN`` before a SELECT, so the overlap re-check would otherwise
read outside any transaction.  SQLite engines therefore take over
transaction control and open every transaction with ``BEGIN IMMEDIATE``:
the write lock is held from the first statement until commit or rollback.
"""

from typing import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings

# Seconds a SQLite writer waits for another writer's lock
SQLITE_BUSY_TIMEOUT = 5.0


def _use_immediate_transactions(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(url: str, busy_timeout: float = SQLITE_BUSY_TIMEOUT) -> Engine:
    """
    Create the engine for *url*.

    Args:
        url: SQLAlchemy database URL
        busy_timeout: SQLite only, seconds to wait for a held write lock

    Returns:
        Configured engine
    """
    if url.startswith("sqlite"):
        engine = create_engine(url, echo=settings.DEBUG,
                               connect_args={"check_same_thread": False, "timeout": busy_timeout})
        _use_immediate_transactions(engine)
        return engine
    return create_engine(url, echo=settings.DEBUG, pool_pre_ping=True, pool_size=5, max_overflow=10)


engine = build_engine(settings.DATABASE_URL)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get a database session.

    Yields:
        SQLModel Session instance, closed when the request ends
    """
    with Session(engine) as session:
        yield session
